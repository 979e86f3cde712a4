"""
Mock transport for tests and local development.

Simulates gateway behavior:
  - Configurable canned response (defaults to a successful transaction)
  - Configurable latency and failure rate
  - Rate limiting simulation (429s)
  - Records every submission for inspection
"""

import asyncio
import copy
import random
import uuid
from typing import Any, Optional, Sequence

from buckaroo_gateway.authentication import Authentication
from buckaroo_gateway.config import settings
from buckaroo_gateway.exceptions import PermanentError, RateLimitError, TransportError
from buckaroo_gateway.models.enums import StatusCode
from buckaroo_gateway.models.parameters import ParameterRecord
from buckaroo_gateway.transport.base import Transport


class MockTransport(Transport):
    """
    In-memory transport that answers every submission with a fixed response.

    Without a response configured, each call returns a new transaction key
    and status 190.
    """

    def __init__(
        self,
        response: Optional[dict[str, Any]] = None,
        failure_rate: Optional[float] = None,
        latency_ms: Optional[int] = None,
    ):
        self._response = response
        self._failure_rate = failure_rate if failure_rate is not None else settings.mock_failure_rate
        self._latency_ms = latency_ms if latency_ms is not None else settings.mock_latency_ms
        self.submissions: list[tuple[str, list[ParameterRecord]]] = []

    @property
    def name(self) -> str:
        return "mock"

    async def submit(
        self,
        endpoint: str,
        parameters: Sequence[ParameterRecord],
        authentication: Authentication,
    ) -> dict[str, Any]:
        self.submissions.append((endpoint, list(parameters)))

        if self._latency_ms > 0:
            jitter = random.uniform(0.5, 1.5)
            await asyncio.sleep(self._latency_ms * jitter / 1000)

        roll = random.random()

        if roll < self._failure_rate * 0.3:
            raise RateLimitError(message="Mock rate limit - too many requests", retry_after=1.0)

        if roll < self._failure_rate * 0.6:
            raise TransportError(
                message="Mock transient error - service temporarily unavailable",
                status_code=503,
                retriable=True,
            )

        if roll < self._failure_rate:
            raise PermanentError(message="Mock permanent error - request rejected", status_code=400)

        if self._response is not None:
            return copy.deepcopy(self._response)

        return {
            "Key": uuid.uuid4().hex.upper(),
            "Status": {"Code": {"Code": StatusCode.SUCCESS.value, "Description": "Success"}},
        }

    @property
    def last_parameters(self) -> list[ParameterRecord]:
        return self.submissions[-1][1] if self.submissions else []
