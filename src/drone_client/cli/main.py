"""`drone-client` command line."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, Optional

import httpx
import typer
from rich.console import Console

from drone_client.adapters.plugin_params import parse as parse_plugin_params
from drone_client.cli import doctor
from drone_client.cli.ui_components import print_error, print_json
from drone_client.client import Client
from drone_client.core.errors import DroneError

app = typer.Typer(no_args_is_help=True, help="Talk to a Drone CI server from the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def build_client() -> Client:
    return Client.from_settings()


def _emit(call: Callable[[], Awaitable[Any]]) -> None:
    try:
        result = asyncio.run(call())
    except (DroneError, httpx.HTTPError, ValueError) as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1)
    print_json(_console, result)


def _with_client(call: Callable[[Client], Awaitable[Any]]) -> None:
    async def runner() -> Any:
        async with build_client() as client:
            return await call(client)

    _emit(runner)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("drone_client").setLevel(logging.DEBUG)


@app.command(name="self")
def self_() -> None:
    """Show the authenticated user."""

    _with_client(lambda client: client.get_self())


@app.command()
def repos(
    page: int = typer.Option(1, "--page", min=1),
    limit: int = typer.Option(100, "--limit", min=1),
) -> None:
    """List repositories on the server."""

    _with_client(lambda client: client.get_repos(page, limit))


@app.command()
def builds(
    owner: str,
    repo: str,
    page: int = typer.Option(1, "--page", min=1),
    limit: int = typer.Option(25, "--limit", min=1),
) -> None:
    """List builds of a repository."""

    _with_client(lambda client: client.get_builds(owner, repo, page, limit))


@app.command()
def build(owner: str, repo: str, number: int) -> None:
    _with_client(lambda client: client.get_build(owner, repo, number))


@app.command()
def logs(owner: str, repo: str, number: int, stage: int, step: int) -> None:
    """Print the log lines of one step."""

    _with_client(lambda client: client.get_logs(owner, repo, number, stage, step))


@app.command(name="plugin-params")
def plugin_params(
    raw: Optional[str] = typer.Argument(None, help="JSON parameters; read from stdin when omitted."),
) -> None:
    """Decode plugin parameters the way a build plugin receives them."""

    argv = ["--", raw] if raw is not None else []
    _emit(lambda: parse_plugin_params(argv=argv))


def run() -> None:
    app()
