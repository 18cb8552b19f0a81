"""Shared plumbing for the endpoint mixins."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from drone_client.core.interfaces import RequestExecutor
from drone_client.core.validation import require_string


def segment(value: Any) -> str:
    """Render one path segment, percent-encoding anything reserved."""

    return quote(str(value), safe="")


class Resource:
    """Base for endpoint groups; `Client` supplies the executor."""

    _executor: RequestExecutor

    def _repo_path(self, owner: Any, repo: Any) -> str:
        owner = require_string(owner, "owner")
        repo = require_string(repo, "repo")
        return f"/api/repos/{segment(owner)}/{segment(repo)}"
