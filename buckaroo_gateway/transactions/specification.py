"""Request for the specification (supported actions) of one service."""

import logging

from buckaroo_gateway.authentication import Authentication
from buckaroo_gateway.results.transaction import TransactionSpecificationResult
from buckaroo_gateway.transport.base import Transport

logger = logging.getLogger("buckaroo_gateway.transaction")

API_URL = "json/Transaction/Specification/{service}"


class TransactionSpecificationRequest:
    def __init__(self, authentication: Authentication, service_name: str, endpoint: str, transport: Transport):
        self._authentication = authentication
        self._service_name = service_name
        self._endpoint = endpoint
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def request(self) -> TransactionSpecificationResult:
        response = await self._transport.submit(self._endpoint, [], self._authentication)
        result = TransactionSpecificationResult.from_response(response)
        logger.info("Specification of %s lists %d action(s)", self._service_name, len(result.actions))
        return result
