"""Parsing of address tokens printed by `exec=` executables.

Token grammar: an optional pair of surrounding double quotes around
`<ip>` or `<ip>%<zone>`.
"""

from __future__ import annotations

from ipaddress import ip_address
from typing import Iterable

from core.domain.errors import InvalidAddressError
from core.domain.models import ResolvedAddress


def trim_quotes(value: str) -> str:
    """Strip one layer of surrounding double quotes, if both are present."""

    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def parse_address_token(token: str) -> ResolvedAddress:
    """Parse a single stdout token into a `ResolvedAddress`.

    Only the part before the first `%` is validated. A zone is attached when
    the token splits into exactly two parts; with more separators the address
    is kept and the zone dropped.

    Raises `InvalidAddressError` when the address part is not an IP literal.
    """

    parts = trim_quotes(token).split("%")
    address = parts[0]
    try:
        ip = ip_address(address)
    except ValueError as exc:
        raise InvalidAddressError(token, address) from exc

    zone = parts[1] if len(parts) == 2 and parts[1] else None
    return ResolvedAddress(address=ip, zone=zone)


def parse_address_tokens(tokens: Iterable[str]) -> list[ResolvedAddress]:
    """Parse tokens in order; the first invalid one aborts the whole batch."""

    return [parse_address_token(token) for token in tokens]
