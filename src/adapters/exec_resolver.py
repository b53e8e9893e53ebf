"""Resolver: run a local executable and parse the addresses it prints.

Executable contract:
- on success: exit 0 and print whitespace delimited IP addresses to stdout.
  Each address may be wrapped in double quotes; IPv6 addresses may carry a
  `%<zone>` suffix.
- on failure: exit non-zero and optionally print a short (~1024 bytes) error
  message to stderr.

The command line is split on whitespace only. There is no shell, quoting or
escaping, so an argument containing spaces cannot be expressed.
"""

from __future__ import annotations

import asyncio
import contextlib

from adapters.address_parser import parse_address_tokens
from core.domain.errors import (
    ExecutableTimeoutError,
    InvalidConfigurationError,
    NoOutputError,
    ProcessExitError,
    ProcessLaunchError,
)
from core.domain.models import ResolvedAddress
from core.interfaces.debug_sink import DebugSink
from core.interfaces.resolver import AddressResolver

EXEC_PREFIX = "exec="


class ExecutableResolver(AddressResolver):
    """Runs `<command> [args...]` once and parses its stdout.

    stderr is only used as context for non-zero exits; output on stderr with a
    zero exit status is ignored.
    """

    def __init__(self, log: DebugSink, *, timeout: float | None = None) -> None:
        self._log = log
        self._timeout = timeout

    async def resolve(self, target: str) -> list[ResolvedAddress]:
        command, args = split_command(target)

        self._log.debug("Executing command", command=command, args=args)

        try:
            proc = await asyncio.create_subprocess_exec(
                command,
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (OSError, ValueError) as exc:
            # ValueError: embedded null byte in the command or an argument.
            raise ProcessLaunchError(command, exc) from exc

        try:
            async with asyncio.timeout(self._timeout):
                stdout, stderr = await proc.communicate()
        except TimeoutError as exc:
            raise ExecutableTimeoutError(command, self._timeout or 0.0) from exc
        finally:
            if proc.returncode is None:
                await _kill(proc)

        if proc.returncode != 0:
            raise ProcessExitError(proc.returncode, _decode(stderr).strip())

        tokens = _decode(stdout).split()
        if not tokens:
            raise NoOutputError()

        addrs = parse_address_tokens(tokens)
        self._log.debug("Addresses retrieved from the executable", ip_addrs=addrs)
        return addrs


def split_command(target: str) -> tuple[str, list[str]]:
    """Split `<command> [arg1 arg2 ...]` on whitespace runs."""

    fields = target.split()
    if not fields:
        raise InvalidConfigurationError(EXEC_PREFIX + target)
    return fields[0], fields[1:]


async def _kill(proc: asyncio.subprocess.Process) -> None:
    # Already exited between the check and the signal.
    with contextlib.suppress(ProcessLookupError):
        proc.kill()
    await proc.wait()


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")
