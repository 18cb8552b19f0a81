"""Plugin parameter reader.

A build plugin receives its parameters once per process, either as the
argument following `--` on the command line or as a JSON document on stdin.
This is independent of `Client` and of the request executor.
"""

from __future__ import annotations

import asyncio
import json
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from drone_client.core.errors import PluginInputError


def parse_text(text: str) -> Any:
    """Decode plugin parameters; `json.JSONDecodeError` propagates."""

    return json.loads(text)


def find_inline_params(argv: Sequence[str]) -> str | None:
    """Return the argument after the first `--`, or `None` if there is no `--`."""

    for index, arg in enumerate(argv):
        if arg == "--":
            if index + 1 >= len(argv):
                raise PluginInputError("Expected plugin parameters after '--'")
            return argv[index + 1]
    return None


async def parse(argv: Sequence[str] | None = None, stdin: TextIO | None = None) -> Any:
    """Read the plugin parameters.

    Notes:
    - With `--` in `argv` stdin is never touched.
    - Otherwise stdin is read to end-of-stream in a worker thread; there is no
      timeout, an input that never closes keeps this waiting.
    """

    inline = find_inline_params(sys.argv if argv is None else argv)
    if inline is not None:
        return parse_text(inline)

    stream = stdin if stdin is not None else sys.stdin
    text = await asyncio.to_thread(stream.read)
    return parse_text(text)
