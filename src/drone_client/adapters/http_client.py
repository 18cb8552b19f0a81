"""httpx wrapper and request executor.

`build_async_client` centralizes base URL, bearer header and timeout so every
request leaves with the same configuration. `HttpRequestExecutor` is the one
place where status codes are classified and bodies decoded.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from drone_client import __version__
from drone_client.core.config import ClientConfig
from drone_client.core.errors import DroneHTTPError

logger = logging.getLogger(__name__)


def build_async_client(
    config: ClientConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` bound to one Drone server and token."""

    headers: dict[str, str] = {
        "Authorization": f"Bearer {config.token}",
        "Accept": "application/json",
        "User-Agent": f"drone-client/{__version__}",
    }
    if extra_headers:
        headers.update(extra_headers)

    kwargs: dict[str, Any] = {
        "base_url": config.base_url,
        "headers": headers,
        "transport": transport,
    }
    if config.timeout is not None:
        kwargs["timeout"] = httpx.Timeout(config.timeout)
    return httpx.AsyncClient(**kwargs)


def _drop_none(values: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if values is None:
        return None
    return {k: v for k, v in values.items() if v is not None}


class HttpRequestExecutor:
    """`RequestExecutor` backed by a pooled `httpx.AsyncClient`.

    Outcomes of `request`:
    - 2xx: the decoded JSON body (`None` for an empty body).
    - any other status: `DroneHTTPError` with status, headers and raw body.
    - transport failures (`httpx.TransportError`) and invalid JSON
      (`json.JSONDecodeError`) propagate unchanged. Nothing is retried.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = build_async_client(config, transport=transport)

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
        params = _drop_none(params)
        logger.debug("start request %s %s params=%s", method, path, params)

        response = await self._http.request(
            method,
            path,
            params=params,
            json=json,
            data=_drop_none(data),
            headers=headers,
        )

        logger.debug("response status code %s", response.status_code)
        if response.status_code < 200 or response.status_code >= 300:
            raise DroneHTTPError(
                response.status_code,
                headers=response.headers,
                body=response.text,
            )

        if not response.content:
            return None
        return response.json()

    async def aclose(self) -> None:
        await self._http.aclose()
