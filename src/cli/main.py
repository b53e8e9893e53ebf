"""CLI de netaddrs (Typer).

Uso:
    netaddrs ip "DNS name"
    netaddrs ip "exec=<executable with optional args>"

Salida:
- stdout: direcciones separadas por un espacio (`<ip>` o `<ip>%<zone>`).
- stderr: mensajes de debug (salvo `-q`) y el error, con código de salida 1.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.debug_sinks import LoggingDebugSink, NullDebugSink
from cli import doctor
from core.config import AppSettings
from core.domain.errors import NetAddrsError
from core.domain.models import ResolvedAddress
from core.interfaces.debug_sink import DebugSink
from core.services.ip_lookup import ip_addrs

USAGE = 'Usage: netaddrs ip "DNS name" or "exec=<executable with optional args>"'

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.add_typer(doctor.app, name="doctor")

_err_console = Console(stderr=True)


def build_logger(prefix: str) -> logging.Logger:
    """Logger `netaddrs` writing `<prefix>: <message>` lines to stderr."""

    logger = logging.getLogger("netaddrs")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    if not logger.handlers:
        handler = RichHandler(
            console=Console(stderr=True, soft_wrap=True),
            show_time=False,
            show_level=False,
            show_path=False,
            markup=False,
        )
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setFormatter(logging.Formatter(f"{prefix}: %(message)s"))
    return logger


def build_debug_sink(settings: AppSettings, *, quiet: bool) -> DebugSink:
    if quiet or settings.quiet:
        return NullDebugSink()
    return LoggingDebugSink(build_logger(settings.log_prefix))


def format_addresses(addresses: Iterable[ResolvedAddress]) -> str:
    return " ".join(str(address) for address in addresses)


@app.callback(help=USAGE)
def main() -> None:
    pass


@app.command()
def ip(
    config: str = typer.Argument(
        ...,
        metavar="CONFIG",
        help='DNS name, or "exec=<executable with optional args>" (arguments are split on spaces).',
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="No verbose output."),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        help="Abort the lookup after this many seconds (default: NETADDRS_TIMEOUT_SECONDS or no limit).",
    ),
) -> None:
    """Print the IP addresses described by CONFIG, separated by spaces."""

    if timeout is not None and timeout <= 0:
        raise typer.BadParameter("must be greater than 0", param_hint="--timeout")

    settings = AppSettings()
    log = build_debug_sink(settings, quiet=quiet)
    if timeout is None:
        timeout = settings.timeout_seconds

    try:
        addresses = asyncio.run(ip_addrs(config, log, timeout=timeout))
    except NetAddrsError as exc:
        _err_console.print(f"{settings.log_prefix}: {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc

    typer.echo(format_addresses(addresses))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
