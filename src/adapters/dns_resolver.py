"""Resolver: DNS name -> A/AAAA addresses via the system resolver.

Uses `loop.getaddrinfo` (the platform resolver, run off the event loop) so the
lookup can be awaited, bounded by a timeout and cancelled by the caller.
"""

from __future__ import annotations

import asyncio
import socket
from ipaddress import ip_address
from typing import Any

from core.domain.errors import DNSResolutionError
from core.domain.models import ResolvedAddress
from core.interfaces.debug_sink import DebugSink
from core.interfaces.resolver import AddressResolver


class DNSResolver(AddressResolver):
    """Single A+AAAA lookup, no retries, resolver order preserved."""

    def __init__(self, log: DebugSink, *, timeout: float | None = None) -> None:
        self._log = log
        self._timeout = timeout

    async def resolve(self, target: str) -> list[ResolvedAddress]:
        loop = asyncio.get_running_loop()
        try:
            async with asyncio.timeout(self._timeout):
                infos = await loop.getaddrinfo(
                    target,
                    None,
                    family=socket.AF_UNSPEC,
                    type=socket.SOCK_STREAM,
                )
        except (OSError, ValueError) as exc:
            # gaierror and TimeoutError are OSErrors; bad IDNA labels raise UnicodeError.
            raise DNSResolutionError(target, exc) from exc

        addrs = [address_from_sockaddr(info[4]) for info in infos]
        self._log.debug("Resolved DNS name", name=target, ip_addrs=addrs)
        return addrs


def address_from_sockaddr(sockaddr: tuple[Any, ...]) -> ResolvedAddress:
    """Build a `ResolvedAddress` from a getaddrinfo sockaddr tuple.

    IPv6 sockaddrs are `(host, port, flowinfo, scope_id)`; a non-zero scope id
    becomes the zone when the host text does not already carry one.
    """

    host = str(sockaddr[0])
    zone: str | None = None
    if "%" in host:
        host, zone = host.split("%", 1)
    ip = ip_address(host)
    if ip.version == 6 and zone is None and len(sockaddr) >= 4 and sockaddr[3]:
        zone = str(sockaddr[3])
    if ip.version != 6:
        zone = None
    return ResolvedAddress(address=ip, zone=zone or None)
