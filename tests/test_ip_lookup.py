import asyncio
import sys

import pytest

from core.domain.errors import (
    DNSResolutionError,
    ExecutableLookupError,
    InvalidAddressError,
    InvalidConfigurationError,
    NoOutputError,
    ProcessExitError,
    ProcessLaunchError,
)
from core.domain.models import ResolvedAddress
from core.services.ip_lookup import ip_addrs

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="uses /bin/sh scripts")


def _lookup(cfg, log=None, timeout=None):
    return asyncio.run(ip_addrs(cfg, log, timeout=timeout))


def test_dns_name():
    result = _lookup("localhost")

    assert result
    assert all(isinstance(address, ResolvedAddress) for address in result)


def test_dns_failure_is_not_wrapped():
    with pytest.raises(DNSResolutionError):
        _lookup("invalidDNSname.invalid")


def test_exec_prefix_must_be_leading(sink):
    # Anything not starting with "exec=" is a DNS name.
    with pytest.raises(DNSResolutionError):
        _lookup(" exec=/bin/true", sink)


@posix_only
def test_exec_addresses_in_order(make_script, sink):
    script = make_script("valid.sh", 'echo "10.0.0.1 10.0.0.2"')

    result = _lookup(f"exec={script}", sink)

    assert result == [ResolvedAddress(address="10.0.0.1"), ResolvedAddress(address="10.0.0.2")]
    assert [msg for msg, _ in sink.events] == [
        "Executing command",
        "Addresses retrieved from the executable",
    ]


@posix_only
def test_exec_ipv6_zone(make_script):
    script = make_script("zone.sh", 'echo "2001:db8::1%3"')

    assert _lookup(f"exec={script}") == [ResolvedAddress(address="2001:db8::1", zone="3")]


@posix_only
@pytest.mark.parametrize(
    ("body", "reason_type", "message"),
    [
        ('echo boom >&2\nexit 1', ProcessExitError, "executable failed with exit code 1: boom"),
        ("exit 0", NoOutputError, "executable returned no output to stdout"),
        ('echo "10.0.0.1 not-an-ip"', InvalidAddressError, "executable returned invalid IP address: not-an-ip"),
    ],
)
def test_exec_failures_are_wrapped(make_script, body, reason_type, message):
    script = make_script("script.sh", body)

    with pytest.raises(ExecutableLookupError) as info:
        _lookup(f"exec={script}")

    assert isinstance(info.value.reason, reason_type)
    assert info.value.__cause__ is info.value.reason
    assert str(info.value) == f"failed to retrieve IP addresses from executable: {message}"


def test_exec_without_command():
    with pytest.raises(ExecutableLookupError) as info:
        _lookup("exec=")

    assert isinstance(info.value.reason, InvalidConfigurationError)


@posix_only
def test_exec_not_found(tmp_path):
    with pytest.raises(ExecutableLookupError, match="not_found.sh") as info:
        _lookup(f"exec={tmp_path / 'not_found.sh'}")

    assert isinstance(info.value.reason, ProcessLaunchError)
    assert "No such file or directory" in str(info.value)


def test_missing_log_uses_discard_sink():
    assert _lookup("127.0.0.1") == [ResolvedAddress(address="127.0.0.1")]


def test_exec_null_byte_is_wrapped():
    with pytest.raises(ExecutableLookupError) as info:
        _lookup("exec=/bin/echo\x00x")

    assert isinstance(info.value.reason, ProcessLaunchError)


def test_falsy_sink_is_still_used():
    class FalsySink:
        def __init__(self):
            self.events = []

        def __bool__(self):
            return False

        def debug(self, msg, **fields):
            self.events.append(msg)

    log = FalsySink()

    _lookup("127.0.0.1", log)

    assert log.events == ["Resolved DNS name"]
