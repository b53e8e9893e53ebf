"""Exceptions raised by the address lookup.

Every failure is raised to the immediate caller with its original cause
chained; nothing is retried or logged here.
"""

from __future__ import annotations


class NetAddrsError(Exception):
    """Base class for every lookup failure."""


class DNSResolutionError(NetAddrsError):
    """The DNS lookup failed, timed out or was given a malformed name."""

    def __init__(self, hostname: str, cause: BaseException) -> None:
        self.hostname = hostname
        self.cause = cause
        super().__init__(f"failed to resolve DNS name: {hostname}: {_describe(cause)}")


class ExecutableError(NetAddrsError):
    """Base class for failures of the `exec=` strategy."""


class InvalidConfigurationError(ExecutableError):
    """`exec=` was given without a command."""

    def __init__(self, cfg: str) -> None:
        self.cfg = cfg
        super().__init__(f"no executable specified in {cfg!r}")


class ProcessLaunchError(ExecutableError):
    """The command could not be started (not found, not executable, ...)."""

    def __init__(self, command: str, cause: OSError | ValueError) -> None:
        self.command = command
        self.cause = cause
        super().__init__(_describe(cause))


class ExecutableTimeoutError(ExecutableError):
    def __init__(self, command: str, timeout: float) -> None:
        self.command = command
        self.timeout = timeout
        super().__init__(f"executable {command} did not finish within {timeout:g}s and was killed")


class ProcessExitError(ExecutableError):
    """The command exited with a non-zero status."""

    def __init__(self, exit_code: int, stderr: str) -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(f"executable failed with exit code {exit_code}: {stderr}")


class NoOutputError(ExecutableError):
    def __init__(self) -> None:
        super().__init__("executable returned no output to stdout")


class InvalidAddressError(ExecutableError):
    """A stdout token is not an IP literal (optionally with an IPv6 zone)."""

    def __init__(self, token: str, address: str) -> None:
        self.token = token
        self.address = address
        super().__init__(f"executable returned invalid IP address: {address}")


class ExecutableLookupError(NetAddrsError):
    """Wraps any `ExecutableError` raised while resolving an `exec=` config."""

    def __init__(self, reason: ExecutableError) -> None:
        self.reason = reason
        super().__init__(f"failed to retrieve IP addresses from executable: {reason}")


def _describe(cause: BaseException) -> str:
    text = str(cause)
    if text:
        return text
    return cause.__class__.__name__
