"""
Decoding of loosely typed gateway responses.

Responses are nested mappings and lists keyed by strings; any key may be
absent. Decoding is permissive per record: an action entry that does not
fit the Action model is logged and skipped, the rest of the response is
still decoded.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from pydantic import ValidationError

from buckaroo_gateway.results.models import Action

logger = logging.getLogger("buckaroo_gateway.decoder")


def dig(data: Any, *keys: str, default: Any = None) -> Any:
    """Follow ``keys`` through nested mappings, returning ``default`` on any gap."""
    current = data
    for key in keys:
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current


def parse_int(value: Any) -> Optional[int]:
    """Integer-like value or None; bools are not integers here."""
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def decode_actions(data: Mapping[str, Any]) -> dict[str, Action]:
    """
    Build the actions of a response, keyed by name.

    Entries without a name are dropped. When two entries share a name the
    later one wins.
    """
    actions: dict[str, Action] = {}
    entries = data.get("Actions") if isinstance(data, Mapping) else None
    if not entries:
        return actions
    if not isinstance(entries, Sequence) or isinstance(entries, (str, bytes)):
        logger.warning("Ignoring Actions of type %s; expected a list", type(entries).__name__)
        return actions

    for position, entry in enumerate(entries):
        if not isinstance(entry, Mapping) or not entry.get("Name"):
            continue
        try:
            action = Action.model_validate(dict(entry))
        except ValidationError as e:
            logger.warning(
                "Skipping malformed action %r at position %d: %d error(s)",
                entry.get("Name"),
                position,
                e.error_count(),
            )
            continue
        if action.name in actions:
            logger.debug("Action %s listed more than once; keeping the last entry", action.name)
        actions[action.name] = action

    return actions
