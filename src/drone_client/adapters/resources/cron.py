"""Cron job endpoints (`/api/repos/{owner}/{repo}/cron`)."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any

from drone_client.adapters.resources.base import Resource, segment
from drone_client.core.domain.schemas import Cron
from drone_client.core.validation import require_string, validate_payload


class CronResource(Resource):
    def _cron_path(self, owner: Any, repo: Any, name: Any, label: str = "name") -> str:
        path = self._repo_path(owner, repo)
        name = require_string(name, label)
        return f"{path}/cron/{segment(name)}"

    def get_crons(self, owner: str | None = None, repo: str | None = None) -> Awaitable[Any]:
        return self._executor.request("GET", f"{self._repo_path(owner, repo)}/cron")

    def get_cron(
        self,
        owner: str | None = None,
        repo: str | None = None,
        cron: str | None = None,
    ) -> Awaitable[Any]:
        return self._executor.request("GET", self._cron_path(owner, repo, cron, "cron"))

    def execute_cron(
        self,
        owner: str | None = None,
        repo: str | None = None,
        name: str | None = None,
    ) -> Awaitable[Any]:
        """Run a cron job now, outside its schedule."""

        return self._executor.request("POST", self._cron_path(owner, repo, name))

    def delete_cron(
        self,
        owner: str | None = None,
        repo: str | None = None,
        name: str | None = None,
    ) -> Awaitable[Any]:
        return self._executor.request("DELETE", self._cron_path(owner, repo, name))

    def update_cron(
        self,
        owner: str | None = None,
        repo: str | None = None,
        name: str | None = None,
        cron: Cron | dict[str, Any] | None = None,
    ) -> Awaitable[Any]:
        path = self._cron_path(owner, repo, name)
        cron = validate_payload(Cron, cron, "cron", required=True)
        return self._executor.request("PATCH", path, json=cron)

    def create_cron(
        self,
        owner: str | None = None,
        repo: str | None = None,
        cron: Cron | dict[str, Any] | None = None,
    ) -> Awaitable[Any]:
        path = self._repo_path(owner, repo)
        cron = validate_payload(Cron, cron, "cron", required=True)
        return self._executor.request("POST", f"{path}/cron", json=cron)
