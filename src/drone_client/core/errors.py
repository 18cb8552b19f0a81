"""Error taxonomy for the Drone client.

Two failure channels are kept apart:
- `ValidationError` is raised synchronously, before any request is built.
- `DroneHTTPError` is raised when an awaited request gets a non-2xx status.

Transport failures (`httpx.TransportError`) and body decode failures
(`json.JSONDecodeError`) are not wrapped; they reach the caller unchanged.
"""

from __future__ import annotations

from typing import Any

import httpx


class DroneError(Exception):
    """Base class for errors raised by this library."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(DroneError, ValueError):
    """Caller input did not satisfy a scalar constraint or payload shape."""

    def __init__(self, message: str, *, field: str, constraint: str) -> None:
        super().__init__(message)
        self.field = field
        self.constraint = constraint

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["field"] = self.field
        result["constraint"] = self.constraint
        return result


class DroneHTTPError(DroneError):
    """The server answered with a status outside [200, 300)."""

    def __init__(
        self,
        status_code: int,
        *,
        headers: httpx.Headers | None = None,
        body: str = "",
    ) -> None:
        super().__init__(f"Invalid response code: {status_code}")
        self.status_code = status_code
        self.headers = headers if headers is not None else httpx.Headers()
        self.body = body

    @property
    def status(self) -> int:
        return self.status_code

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["status"] = self.status_code
        if self.body:
            result["body"] = self.body
        return result


class PluginInputError(DroneError):
    """Plugin parameters could not be located in argv."""
