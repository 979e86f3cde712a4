"""
Gateway client facade.

Holds the credentials and the transport, picks the live or test host and
hands out request objects bound to them. Requests run through submit() are
recorded in the audit database when auditing is enabled.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from buckaroo_gateway import database
from buckaroo_gateway.authentication import Authentication
from buckaroo_gateway.config import settings
from buckaroo_gateway.results.transaction import TransactionResult
from buckaroo_gateway.services.base import Service
from buckaroo_gateway.transactions import specification, transaction
from buckaroo_gateway.transactions.specification import TransactionSpecificationRequest
from buckaroo_gateway.transactions.transaction import TransactionRequest
from buckaroo_gateway.transport.base import Transport


class BuckarooClient:
    def __init__(
        self,
        authentication: Authentication,
        transport: Transport,
        test_mode: Optional[bool] = None,
        audit: Optional[bool] = None,
    ):
        self._authentication = authentication
        self._transport = transport
        self._test_mode = settings.test_mode if test_mode is None else test_mode
        self._audit = settings.audit_enabled if audit is None else audit
        self._audit_ready = False

    @property
    def host(self) -> str:
        return settings.test_host if self._test_mode else settings.live_host

    def url(self, path: str) -> str:
        return f"https://{self.host}/{path.lstrip('/')}"

    def transaction_request(
        self,
        service: Service,
        audit_session: Optional[AsyncSession] = None,
    ) -> TransactionRequest:
        return TransactionRequest(
            self._authentication,
            service,
            self.url(transaction.API_URL),
            self._transport,
            audit_session=audit_session,
        )

    async def submit(self, request: TransactionRequest) -> TransactionResult:
        """
        Run a transaction request.

        With auditing enabled the request is recorded in the audit database,
        in its own session that is committed whether or not the request
        succeeds.
        """
        if not self._audit:
            return await request.request()

        if not self._audit_ready:
            await database.init_db()
            self._audit_ready = True

        async with database.audit_session() as session:
            request.set_audit_session(session)
            return await request.request()

    def specification_request(self, service_name: str) -> TransactionSpecificationRequest:
        return TransactionSpecificationRequest(
            self._authentication,
            service_name,
            self.url(specification.API_URL.format(service=service_name)),
            self._transport,
        )
