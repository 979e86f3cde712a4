"""Results of transaction and specification requests."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from buckaroo_gateway.models.enums import StatusCode
from buckaroo_gateway.results.decoder import decode_actions, dig, parse_int
from buckaroo_gateway.results.models import Action


@dataclass
class TransactionSpecificationResult:
    """The actions a service supports, keyed by action name."""

    actions: dict[str, Action] = field(default_factory=dict)

    @classmethod
    def from_response(cls, data: Mapping[str, Any]) -> "TransactionSpecificationResult":
        return cls(actions=decode_actions(data))


@dataclass
class TransactionResult(Mapping):
    """
    Decoded response of a transaction request.

    The raw response stays reachable through mapping access, so
    ``result["Status"]["Code"]["Code"]`` works as on the plain JSON.
    The top-level keys are not validated; use the properties, which return
    None when a key is absent.
    """

    raw: dict[str, Any]
    actions: dict[str, Action] = field(default_factory=dict)

    @classmethod
    def from_response(cls, data: Mapping[str, Any]) -> "TransactionResult":
        return cls(raw=dict(data), actions=decode_actions(data))

    def __getitem__(self, key: str) -> Any:
        return self.raw[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.raw)

    def __len__(self) -> int:
        return len(self.raw)

    @property
    def key(self) -> Optional[str]:
        return self.raw.get("Key")

    @property
    def status_code(self) -> Optional[int]:
        return parse_int(dig(self.raw, "Status", "Code", "Code"))

    @property
    def status_description(self) -> Optional[str]:
        return dig(self.raw, "Status", "SubCode", "Description")

    @property
    def is_success(self) -> bool:
        return self.status_code == StatusCode.SUCCESS
