"""
Declarative field schemas for grouped services.

A customer block (billing, shipping) is described once as a list of field
definitions plus the ordered list of mandatory wire names. Generic code maps
keyword arguments onto wire names, checks enumerated values, formats the
rest and derives the mandatory-field list, so services do not need one
setter per field and block.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from buckaroo_gateway.exceptions import InvalidParameterError


@dataclass(frozen=True)
class FieldDefinition:
    """One field of a customer block."""

    attribute: str  # keyword argument name, e.g. "first_name"
    name: str  # wire name, e.g. "FirstName"
    formatter: Optional[Callable[[Any], Any]] = None
    choices: Optional[type[Enum]] = None  # accepted values, e.g. CustomerCountry

    def format(self, value: Any) -> Any:
        if self.choices is not None:
            try:
                return self.choices(value)
            except ValueError:
                allowed = ", ".join(str(member.value) for member in self.choices)
                raise InvalidParameterError(self.name, value, allowed) from None
        return self.formatter(value) if self.formatter else value


@dataclass(frozen=True)
class CustomerBlock:
    """A group of fields sent under a shared GroupType."""

    group_type: str
    fields: tuple[FieldDefinition, ...]
    mandatory_names: tuple[str, ...] = ()  # checked in this order

    def field(self, attribute: str) -> Optional[FieldDefinition]:
        for definition in self.fields:
            if definition.attribute == attribute:
                return definition
        return None

    @property
    def mandatory(self) -> list[str]:
        """Mandatory keys as stored by a grouped service (group type + name)."""
        return [f"{self.group_type}{name}" for name in self.mandatory_names]
