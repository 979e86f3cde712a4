"""
Exception hierarchy for the gateway client.

Validation errors never reach the transport: they are raised before a
request is submitted and name the exact field that is missing. Transport
errors are raised by transport implementations and propagated unchanged.
"""

from typing import Optional, Sequence


class BuckarooError(Exception):
    """Base exception for everything raised by this package."""


class ValidationError(BuckarooError):
    """A request could not be built from the current configuration."""


class MissingParameterError(ValidationError):
    """A mandatory parameter is absent or empty."""

    def __init__(self, field_name: str, missing: Optional[Sequence[str]] = None):
        super().__init__(f"Missing mandatory parameter: {field_name}")
        self.field_name = field_name
        self.missing = list(missing) if missing else [field_name]


class NoArticlesProvidedError(ValidationError):
    """A grouped service needs at least one article."""

    def __init__(self, message: str = "No articles have been provided"):
        super().__init__(message)


class UnknownParameterError(ValidationError):
    """A parameter name is not declared for the service."""

    def __init__(self, name: str, service: str):
        super().__init__(f"Unknown parameter for {service}: {name}")
        self.name = name
        self.service = service


class InvalidParameterError(ValidationError):
    """A parameter value is not one of the values the gateway accepts."""

    def __init__(self, name: str, value: object, allowed: str):
        super().__init__(f"Invalid value for {name}: {value!r} (allowed: {allowed})")
        self.name = name
        self.value = value


class AmountError(ValidationError):
    """Exactly one of debit and credit amount should be set."""


class TransactionStateError(BuckarooError):
    """A transaction request was used after it left the configured state."""


class TransportError(BuckarooError):
    """Base exception for transport failures."""

    def __init__(self, message: str, status_code: int = 500, retriable: bool = True):
        super().__init__(message)
        self.status_code = status_code
        self.retriable = retriable


class RateLimitError(TransportError):
    """429 Too Many Requests from the gateway."""

    def __init__(self, message: str = "Rate limited", retry_after: float | None = None):
        super().__init__(message, status_code=429, retriable=True)
        self.retry_after = retry_after


class PermanentError(TransportError):
    """Non-retriable error (e.g. rejected credentials, bad request)."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message, status_code=status_code, retriable=False)
