"""Opaque gateway credentials handed to the transport."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Authentication:
    """
    Website key and secret key for the gateway.

    The client never reads these values; request signing is the
    transport's job. The secret is kept out of the repr.
    """

    website_key: str
    secret_key: str = field(repr=False)
