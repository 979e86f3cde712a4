"""
Exponential backoff retry for transports.

Retries transient failures (429 rate limits, 503 service unavailable) with
exponential backoff and a configurable number of retries. Permanent failures
(4xx client errors) are raised immediately.
"""

import asyncio
import logging
from typing import Any, Optional, Sequence

from buckaroo_gateway.authentication import Authentication
from buckaroo_gateway.config import settings
from buckaroo_gateway.exceptions import RateLimitError, TransportError
from buckaroo_gateway.models.parameters import ParameterRecord
from buckaroo_gateway.transport.base import Transport

logger = logging.getLogger("buckaroo_gateway.retry")

MAX_DELAY = 30.0


class RetryingTransport(Transport):
    """Wraps another transport and retries its retriable errors."""

    def __init__(
        self,
        inner: Transport,
        max_retries: Optional[int] = None,
        base_delay: Optional[float] = None,
    ):
        self._inner = inner
        self._max_retries = max_retries if max_retries is not None else settings.max_retries
        self._base_delay = base_delay if base_delay is not None else settings.retry_base_delay

    @property
    def name(self) -> str:
        return f"retrying_{self._inner.name}"

    async def submit(
        self,
        endpoint: str,
        parameters: Sequence[ParameterRecord],
        authentication: Authentication,
    ) -> dict[str, Any]:
        delay = self._base_delay
        last_error = None

        for attempt in range(self._max_retries + 1):
            try:
                return await self._inner.submit(endpoint, parameters, authentication)
            except TransportError as e:
                last_error = e
                if not e.retriable:
                    raise

                if attempt < self._max_retries:
                    sleep_for = min(delay, MAX_DELAY)
                    if isinstance(e, RateLimitError) and e.retry_after:
                        sleep_for = min(e.retry_after, MAX_DELAY)

                    logger.warning(
                        "Retriable error on attempt %d/%d: %s - sleeping %.1fs",
                        attempt + 1,
                        self._max_retries + 1,
                        e,
                        sleep_for,
                    )
                    await asyncio.sleep(sleep_for)
                    delay = min(delay * 2, MAX_DELAY)
                else:
                    logger.error("Exhausted %d retries for %s: %s", self._max_retries, endpoint, e)
                    raise

        raise last_error or TransportError("Unknown error after retries")
