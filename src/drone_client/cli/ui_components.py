"""Rich rendering helpers for the CLI.

Kept apart from the commands so that output formatting is shared and the
commands stay focused on calling the client.
"""

from __future__ import annotations

import json
from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from drone_client.core.errors import DroneError


def print_banner(console: Console, server: str | None = None) -> None:
    title = Text("drone-client", style="bold cyan")
    subtitle = Text(server or "no server configured", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_json(console: Console, data: Any) -> None:
    """Print a decoded response body as indented JSON (`null` for no body)."""

    console.print_json(json.dumps(data, ensure_ascii=False, sort_keys=True))


def print_error(console: Console, exc: Exception) -> None:
    """Print an error as a JSON object on the given console."""

    if isinstance(exc, DroneError):
        payload = exc.to_dict()
    else:
        payload = {"error": str(exc) or type(exc).__name__}
    console.print_json(json.dumps(payload, ensure_ascii=False))


def build_checks_table() -> Table:
    table = Table(title="drone-client doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
