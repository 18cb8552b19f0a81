"""Doctor commands: configuration checks and interactive login."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console

from drone_client.cli.ui_components import build_checks_table, print_banner
from drone_client.client import Client
from drone_client.core.config import DroneSettings, write_user_env_vars
from drone_client.core.errors import DroneError

app = typer.Typer(no_args_is_help=True, help="Configuration checks and login.")

_console = Console()


def build_client(settings: DroneSettings) -> Client:
    return Client.from_settings(settings)


async def _check_auth(client: Client) -> tuple[bool, str]:
    try:
        async with client:
            user = await client.get_self()
    except (DroneError, httpx.HTTPError, ValueError) as exc:
        return False, str(exc) or type(exc).__name__
    login = user.get("login") if isinstance(user, dict) else None
    return True, f"authenticated as {login}" if login else "authenticated"


@app.command()
def run() -> None:
    """Check configuration and that the token is accepted by the server."""

    settings = DroneSettings()
    print_banner(_console, settings.server)

    table = build_checks_table()
    table.add_row("Server", "OK" if settings.server else "MISSING", settings.server or "set DRONE_SERVER")
    table.add_row("Token", "OK" if settings.token else "MISSING", "set" if settings.token else "set DRONE_TOKEN")

    try:
        client = build_client(settings)
    except DroneError as exc:
        table.add_row("Config", "FAIL", exc.message)
        _console.print(table)
        raise typer.Exit(code=1)

    ok, detail = asyncio.run(_check_auth(client))
    table.add_row("API", "OK" if ok else "FAIL", detail)
    _console.print(table)
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def login() -> None:
    """Store server URL and token in the per-user config `.env`."""

    settings = DroneSettings()
    server = typer.prompt("Drone server URL", default=settings.server or "", show_default=True).strip()
    token = typer.prompt("Personal token", hide_input=True).strip()

    if not server or not token:
        raise typer.BadParameter("server URL and token are required")

    env_path = write_user_env_vars({"DRONE_SERVER": server, "DRONE_TOKEN": token})
    _console.print(f"[green]Saved Drone config to:[/green] {env_path}")
