"""Repository collaborators (`/api/repos/{owner}/{repo}/collaborators`)."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any

from drone_client.adapters.resources.base import Resource, segment
from drone_client.core.validation import require_string


class CollaboratorResource(Resource):
    def _member_path(self, owner: Any, repo: Any, name: Any) -> str:
        path = self._repo_path(owner, repo)
        name = require_string(name, "name")
        return f"{path}/collaborators/{segment(name)}"

    def get_collaborators(self, owner: str | None = None, repo: str | None = None) -> Awaitable[Any]:
        return self._executor.request("GET", f"{self._repo_path(owner, repo)}/collaborators")

    def get_collaborator(
        self,
        owner: str | None = None,
        repo: str | None = None,
        name: str | None = None,
    ) -> Awaitable[Any]:
        return self._executor.request("GET", self._member_path(owner, repo, name))

    def delete_collaborator(
        self,
        owner: str | None = None,
        repo: str | None = None,
        name: str | None = None,
    ) -> Awaitable[Any]:
        return self._executor.request("DELETE", self._member_path(owner, repo, name))
