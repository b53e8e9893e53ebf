import logging

from adapters.debug_sinks import LoggingDebugSink, NullDebugSink, format_field
from core.domain.models import ResolvedAddress
from core.interfaces.debug_sink import DebugSink


def test_sinks_satisfy_protocol(sink):
    assert isinstance(LoggingDebugSink(), DebugSink)
    assert isinstance(NullDebugSink(), DebugSink)
    assert isinstance(sink, DebugSink)


def test_logging_sink_renders_key_values(caplog):
    logger = logging.getLogger("tests.netaddrs")
    caplog.set_level(logging.DEBUG, logger="tests.netaddrs")

    LoggingDebugSink(logger).debug(
        "Resolved DNS name",
        name="example.com",
        ip_addrs=[ResolvedAddress(address="10.0.0.1"), ResolvedAddress(address="fe80::1", zone="3")],
    )

    assert caplog.messages == ["Resolved DNS name name=example.com ip_addrs=[10.0.0.1 fe80::1%3]"]
    assert caplog.records[0].levelno == logging.DEBUG


def test_logging_sink_message_without_fields(caplog):
    logger = logging.getLogger("tests.netaddrs")
    caplog.set_level(logging.DEBUG, logger="tests.netaddrs")

    LoggingDebugSink(logger).debug("Executing command")

    assert caplog.messages == ["Executing command"]


def test_logging_sink_respects_level(caplog):
    logger = logging.getLogger("tests.netaddrs.quiet")
    caplog.set_level(logging.INFO, logger="tests.netaddrs.quiet")

    LoggingDebugSink(logger).debug("Executing command", command="x")

    assert caplog.records == []


def test_null_sink_discards():
    assert NullDebugSink().debug("anything", key="value") is None


def test_format_field():
    assert format_field("./addrs.sh") == "./addrs.sh"
    assert format_field([]) == "[]"
    assert format_field(["same-line", "x"]) == "[same-line x]"
    assert format_field(3) == "3"
