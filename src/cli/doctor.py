"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import sys

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings
from core.domain.errors import NetAddrsError
from core.services.ip_lookup import ip_addrs

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_lookup(cfg: str, timeout: float) -> tuple[bool, str]:
    try:
        addresses = await ip_addrs(cfg, timeout=timeout)
    except NetAddrsError as exc:
        return False, str(exc)
    return True, " ".join(str(address) for address in addresses)


@app.command()
def run(
    host: str = typer.Option("localhost", "--host", help="DNS name used for the resolver check."),
) -> None:
    """Run baseline diagnostics for both lookup methods."""

    settings = AppSettings()
    timeout = settings.timeout_seconds or 10.0

    table = Table(title="netaddrs doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row(
        "Timeout",
        "OK",
        f"{settings.timeout_seconds:g}s" if settings.timeout_seconds else "No limit",
    )
    table.add_row("Quiet", "OK", str(settings.quiet))

    # System resolver
    ok_dns, detail_dns = asyncio.run(_check_lookup(host, timeout))
    table.add_row("DNS resolver", "OK" if ok_dns else "FAIL", detail_dns)

    # Process execution (the interpreter path must not contain spaces)
    exec_cfg = f"exec={sys.executable} -c print('127.0.0.1')"
    ok_exec, detail_exec = asyncio.run(_check_lookup(exec_cfg, timeout))
    table.add_row("Executable lookup", "OK" if ok_exec else "FAIL", detail_exec)

    _console.print(table)

    if not (ok_dns and ok_exec):
        raise typer.Exit(code=1)
