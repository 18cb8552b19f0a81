"""Repository endpoints (`/api/repos`)."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any

from drone_client.adapters.resources.base import Resource
from drone_client.core.domain.schemas import RepoSettings
from drone_client.core.validation import require_boolean, require_number, validate_payload

DEFAULT_REPOS_PAGE_SIZE = 10000


class RepoResource(Resource):
    def get_repos(self, page: int = 1, limit: int = DEFAULT_REPOS_PAGE_SIZE) -> Awaitable[Any]:
        """List every repository known to the server (admin)."""

        page = require_number(page, "page")
        limit = require_number(limit, "limit")
        return self._executor.request(
            "GET",
            "/api/repos",
            params={"page": page, "per_page": limit},
        )

    def get_repo(self, owner: str | None = None, repo: str | None = None) -> Awaitable[Any]:
        return self._executor.request("GET", self._repo_path(owner, repo))

    def enable_repo(self, owner: str | None = None, repo: str | None = None) -> Awaitable[Any]:
        return self._executor.request("POST", self._repo_path(owner, repo))

    def disable_repo(
        self,
        owner: str | None = None,
        repo: str | None = None,
        remove: bool = False,
    ) -> Awaitable[Any]:
        """Disable a repository; `remove=True` deletes it instead."""

        path = self._repo_path(owner, repo)
        remove = require_boolean(remove, "remove")
        return self._executor.request("DELETE", path, params={"remove": remove})

    def chown_repo(self, owner: str | None = None, repo: str | None = None) -> Awaitable[Any]:
        """Transfer repository ownership to the current user."""

        return self._executor.request("POST", f"{self._repo_path(owner, repo)}/chown")

    def repair_repo(self, owner: str | None = None, repo: str | None = None) -> Awaitable[Any]:
        """Re-register the repository hooks."""

        return self._executor.request("POST", f"{self._repo_path(owner, repo)}/repair")

    def update_repo(
        self,
        owner: str | None = None,
        repo: str | None = None,
        settings: RepoSettings | dict[str, Any] | None = None,
    ) -> Awaitable[Any]:
        path = self._repo_path(owner, repo)
        settings = validate_payload(RepoSettings, settings, "settings")
        return self._executor.request("PATCH", path, json=settings)
