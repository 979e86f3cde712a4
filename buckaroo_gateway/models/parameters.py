"""
Flat parameter records exchanged with the gateway.

Every record serializes to exactly four string-valued keys: Name, GroupType,
GroupID and Value. Records belonging to one repeated group (an article, for
instance) share GroupType and GroupID so the gateway can correlate them.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Union


def format_value(value: Any) -> str:
    """Stringify a parameter value the way the gateway expects it."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (float, Decimal)):
        return f"{value:.2f}"
    if isinstance(value, date):
        return value.strftime("%d-%m-%Y")
    return str(value)


@dataclass(frozen=True)
class ParameterRecord:
    """A single name/value pair, optionally tagged with a group."""

    name: str
    value: str
    group_type: str = ""
    group_id: Union[str, int] = ""

    @classmethod
    def build(cls, name: str, value: Any, group_type: str = "", group_id: Union[str, int] = "") -> "ParameterRecord":
        return cls(name=name, value=format_value(value), group_type=group_type, group_id=group_id)

    def to_wire(self) -> dict[str, str]:
        return {
            "Name": self.name,
            "GroupType": self.group_type or "",
            "GroupID": "" if self.group_id == "" else str(self.group_id),
            "Value": self.value,
        }
