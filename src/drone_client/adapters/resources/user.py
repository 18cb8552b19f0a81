"""Endpoints of the authenticated user (`/api/user`)."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any

from drone_client.adapters.resources.base import Resource
from drone_client.core.domain.schemas import SelfRepos, SyncRepos, User
from drone_client.core.validation import validate_payload


class UserResource(Resource):
    def get_token(self) -> Awaitable[Any]:
        """Create (or fetch) the personal token of the current user."""

        return self._executor.request("POST", "/api/user/token")

    def get_self(self) -> Awaitable[Any]:
        return self._executor.request("GET", "/api/user")

    def recent_builds(self) -> Awaitable[Any]:
        """Recent builds across the repositories of the current user."""

        return self._executor.request("GET", "/api/user/builds")

    def sync_repos(self, params: SyncRepos | dict[str, Any] | None = None) -> Awaitable[Any]:
        """Synchronize the repository list with the remote SCM.

        `params` (e.g. `{"async": True}`) travels as a URL-encoded form body.
        """

        params = validate_payload(SyncRepos, params, "params")
        return self._executor.request("POST", "/api/user/repos", data=params)

    def update_self(self, user: User | dict[str, Any] | None = None) -> Awaitable[Any]:
        user = validate_payload(User, user, "self")
        return self._executor.request("PATCH", "/api/user", json=user)

    def self_repos(self, params: SelfRepos | dict[str, Any] | None = None) -> Awaitable[Any]:
        """Repositories visible to the current user; `latest` adds the latest build."""

        params = validate_payload(SelfRepos, params, "params")
        return self._executor.request("GET", "/api/user/repos", params=params)
