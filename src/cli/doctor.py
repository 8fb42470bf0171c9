"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import ClientSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: ClientSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get("")
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show the effective settings and check the API is reachable."""

    settings = ClientSettings()

    table = Table(title="crmkit Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    if settings.api_token:
        table.add_row("API token", "OK", "Bearer token configured")
    else:
        table.add_row("API token", "MISSING", "Requests are sent without Authorization")
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Shape checks", "STRICT" if settings.strict_shapes else "PERMISSIVE", "CRMKIT_STRICT_SHAPES")

    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = ClientSettings()
    base_url = typer.prompt("API base URL", default=settings.base_url, show_default=True).strip()
    api_token = typer.prompt("API token", hide_input=True, default="", show_default=False).strip()

    if not base_url:
        raise typer.BadParameter("base_url is required")

    env_path = write_user_env_vars(
        {
            "CRMKIT_BASE_URL": base_url,
            "CRMKIT_API_TOKEN": api_token or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
