"""Request executor contract.

The API surface only knows this Protocol; the concrete executor
(`drone_client.adapters.http_client.HttpRequestExecutor`) is injected, which
keeps credentials out of the endpoint code and lets tests swap in a fake.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RequestExecutor(Protocol):
    """Single choke point for outbound HTTP.

    Rules:
    - `path` is relative to the server base URL (e.g. `/api/user`).
    - `json` and `data` are mutually exclusive: JSON body vs URL-encoded form.
    - Resolves with the decoded JSON body of a 2xx response.
    """

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        ...

    async def aclose(self) -> None:
        ...
