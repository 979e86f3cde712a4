"""
Abstract payment service.

A service holds the raw fields of one payment method, knows which of them
are mandatory, and turns itself into parameter records for the request.
Setting a value only checks its name; mandatory fields are checked once,
right before the transaction request is assembled.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Iterable, Optional, Sequence

from buckaroo_gateway.exceptions import MissingParameterError, UnknownParameterError
from buckaroo_gateway.models.parameters import ParameterRecord


def is_empty(value: Any) -> bool:
    """
    A value counts as missing when it is None, blank, "0", zero, False or an
    empty collection.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() in ("", "0")
    if isinstance(value, (bool, int, float, Decimal)):
        return value == 0
    if isinstance(value, (list, tuple, dict, set)):
        return not value
    return False


class Service(ABC):
    """Abstract base class for payment services."""

    # Raw parameter names every instance must have set.
    mandatory_parameters: tuple[str, ...] = ()

    # When set, only these raw parameter names may be used.
    allowed_parameters: Optional[frozenset[str]] = None

    action: str = ""

    def __init__(self):
        self._parameters: dict[str, Any] = {}

    @property
    @abstractmethod
    def name(self) -> str:
        """Service identifier as known by the gateway (e.g. 'ideal')."""
        ...

    def set(self, name: str, value: Any) -> "Service":
        if self.allowed_parameters is not None and name not in self.allowed_parameters:
            raise UnknownParameterError(name, self.name)
        self._parameters[name] = value
        return self

    def get_parameters(self) -> dict[str, Any]:
        return dict(self._parameters)

    def missing_parameters(self, mandatory: Iterable[str] = ()) -> list[str]:
        """All mandatory raw parameters that are absent or empty, in declaration order."""
        names = list(dict.fromkeys([*self.mandatory_parameters, *mandatory]))
        return [name for name in names if is_empty(self._parameters.get(name))]

    def validate_parameters(
        self,
        parameters: Sequence[ParameterRecord] = (),
        mandatory: Iterable[str] = (),
    ) -> None:
        """
        Check that every mandatory raw parameter has a value.

        Args:
            parameters: The records assembled so far by the transaction request.
            mandatory: Extra parameter names required by the caller.

        Raises:
            MissingParameterError: For the first missing parameter. The error
                lists every missing parameter in ``missing``.
        """
        missing = self.missing_parameters(mandatory)
        if missing:
            raise MissingParameterError(missing[0], missing)

    def complement_parameter_list(self, parameters: Sequence[ParameterRecord]) -> list[ParameterRecord]:
        """Return a new list: the given records followed by this service's own."""
        return [
            *parameters,
            *(ParameterRecord.build(name, value) for name, value in self._parameters.items()),
        ]


class PayService(Service):
    """Base for services that start a payment."""

    action = "Pay"
