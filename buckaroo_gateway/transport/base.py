"""
Abstract transport interface.

A transport takes the endpoint, the flattened parameter records and the
credentials, performs the HTTP exchange (including request signing) and
returns the decoded JSON body. The client does not retry; wrap a transport
in RetryingTransport when retries are wanted.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from buckaroo_gateway.authentication import Authentication
from buckaroo_gateway.models.parameters import ParameterRecord


class Transport(ABC):
    """Abstract base class for gateway transports."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Transport identifier (e.g. 'mock')."""
        ...

    @abstractmethod
    async def submit(
        self,
        endpoint: str,
        parameters: Sequence[ParameterRecord],
        authentication: Authentication,
    ) -> dict[str, Any]:
        """
        Send one request to the gateway and return the raw response.

        Raises:
            TransportError: On transient failure.
            PermanentError: On non-retriable failure.
        """
        ...
