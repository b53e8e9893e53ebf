"""IP address lookup entry point.

`ip_addrs` picks a resolver from the configuration string and returns its
result. Entry points (CLI, embedding tools, tests) only ever call this
function; the resolvers stay swappable behind `AddressResolver`.
"""

from __future__ import annotations

from adapters.debug_sinks import NullDebugSink
from adapters.dns_resolver import DNSResolver
from adapters.exec_resolver import EXEC_PREFIX, ExecutableResolver
from core.domain.errors import ExecutableError, ExecutableLookupError
from core.domain.models import ResolvedAddress
from core.interfaces.debug_sink import DebugSink


async def ip_addrs(
    cfg: str,
    log: DebugSink | None = None,
    *,
    timeout: float | None = None,
) -> list[ResolvedAddress]:
    """Look up and return IP addresses using the method described by `cfg`.

    If `cfg` is a DNS name, addresses come from the default system resolver
    (A and AAAA records).

    If `cfg` has an `exec=` prefix, addresses come from running the command
    after `exec=`. The command may include arguments separated by spaces;
    spaces inside argument values can not be escaped. The command may print
    IPv4 or IPv6 addresses, and IPv6 addresses may include a zone index.

    Cancel the awaiting task, or pass `timeout` (seconds), to bound the lookup.

    Raises:
    - `DNSResolutionError` for DNS failures (not wrapped).
    - `ExecutableLookupError` for any executable failure; the original
      `ExecutableError` is available as `.reason`.
    """

    if log is None:
        log = NullDebugSink()

    if not cfg.startswith(EXEC_PREFIX):
        return await DNSResolver(log, timeout=timeout).resolve(cfg)

    resolver = ExecutableResolver(log, timeout=timeout)
    try:
        return await resolver.resolve(cfg[len(EXEC_PREFIX):])
    except ExecutableError as exc:
        raise ExecutableLookupError(exc) from exc
