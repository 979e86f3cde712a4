from buckaroo_gateway.transport.base import Transport
from buckaroo_gateway.transport.mock import MockTransport
from buckaroo_gateway.transport.retry import RetryingTransport

__all__ = ["Transport", "MockTransport", "RetryingTransport"]
