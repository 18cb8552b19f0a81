"""Drone API client.

`Client` is a thin composition of the endpoint groups in
`drone_client.adapters.resources` over an injected `RequestExecutor`.

Every endpoint method is a plain function: arguments are validated when the
method is called (raising `ValidationError` right away) and the returned
awaitable performs the request. Awaiting it yields the decoded JSON body or
raises `DroneHTTPError` / the underlying transport or decode error.

Example:
    async with Client({"url": "https://drone.example.com", "token": token}) as drone:
        user = await drone.get_self()
        builds = await drone.get_builds("octocat", "hello-world", 1, 50)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from drone_client.adapters.http_client import HttpRequestExecutor
from drone_client.adapters.resources import (
    BuildResource,
    CollaboratorResource,
    CronResource,
    GlobalSecretResource,
    NodeResource,
    RepoResource,
    SecretResource,
    SystemResource,
    UserResource,
    UsersResource,
)
from drone_client.core.config import ClientConfig, DroneSettings, validate_client_config
from drone_client.core.interfaces import RequestExecutor


class Client(
    UserResource,
    RepoResource,
    BuildResource,
    SecretResource,
    CronResource,
    CollaboratorResource,
    UsersResource,
    GlobalSecretResource,
    SystemResource,
    NodeResource,
):
    """One Drone server, one token.

    Args:
        config: `ClientConfig` or a mapping with `url`, `token` and optionally
            `timeout`. Invalid values raise `ValidationError`.
        transport: optional httpx transport (e.g. `httpx.MockTransport`).
        executor: a ready-made `RequestExecutor`; replaces the httpx one.
    """

    def __init__(
        self,
        config: ClientConfig | Mapping[str, Any],
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        executor: RequestExecutor | None = None,
    ) -> None:
        self._config = validate_client_config(config)
        self._executor = executor or HttpRequestExecutor(self._config, transport=transport)

    @classmethod
    def from_settings(cls, settings: DroneSettings | None = None, **kwargs: Any) -> "Client":
        """Build a client from `DRONE_SERVER` / `DRONE_TOKEN`."""

        settings = settings or DroneSettings()
        return cls(settings.to_client_config(), **kwargs)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def aclose(self) -> None:
        await self._executor.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
