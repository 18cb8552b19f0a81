"""User administration (`/api/users`)."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any

from drone_client.adapters.resources.base import Resource, segment
from drone_client.core.domain.schemas import User
from drone_client.core.validation import require_string, validate_payload


class UsersResource(Resource):
    def _user_path(self, name: Any) -> str:
        name = require_string(name, "name")
        return f"/api/users/{segment(name)}"

    def get_users(self) -> Awaitable[Any]:
        return self._executor.request("GET", "/api/users")

    def get_user(self, name: str | None = None) -> Awaitable[Any]:
        return self._executor.request("GET", self._user_path(name))

    def delete_user(self, name: str | None = None) -> Awaitable[Any]:
        return self._executor.request("DELETE", self._user_path(name))

    def update_user(
        self,
        name: str | None = None,
        user: User | dict[str, Any] | None = None,
    ) -> Awaitable[Any]:
        path = self._user_path(name)
        user = validate_payload(User, user, "user", required=True)
        return self._executor.request("PATCH", path, json=user)

    def create_user(self, user: User | dict[str, Any] | None = None) -> Awaitable[Any]:
        user = validate_payload(User, user, "user", required=True)
        return self._executor.request("POST", "/api/users", json=user)

    def user_repos(self, name: str | None = None) -> Awaitable[Any]:
        """Repositories of another user (admin)."""

        return self._executor.request("GET", f"{self._user_path(name)}/repos")
