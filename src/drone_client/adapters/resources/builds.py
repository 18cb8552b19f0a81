"""Build, approval and log endpoints (`/api/repos/{owner}/{repo}/builds`)."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any

from drone_client.adapters.resources.base import Resource, segment
from drone_client.core.domain.schemas import LatestBuild, RetryBuild, StringMap, TriggerBuild
from drone_client.core.validation import require_number, require_string, validate_payload

DEFAULT_BUILDS_PAGE_SIZE = 25


class BuildResource(Resource):
    def _build_path(self, owner: Any, repo: Any, number: Any) -> str:
        path = self._repo_path(owner, repo)
        number = require_number(number, "number")
        return f"{path}/builds/{segment(number)}"

    def incomplete_builds(self) -> Awaitable[Any]:
        """Builds that are pending or running, server wide."""

        return self._executor.request("GET", "/api/builds/incomplete")

    def get_builds(
        self,
        owner: str | None = None,
        repo: str | None = None,
        page: int = 1,
        limit: int = DEFAULT_BUILDS_PAGE_SIZE,
    ) -> Awaitable[Any]:
        path = self._repo_path(owner, repo)
        page = require_number(page, "page")
        limit = require_number(limit, "limit")
        return self._executor.request(
            "GET",
            f"{path}/builds",
            params={"page": page, "per_page": limit},
        )

    def purge_builds(
        self,
        owner: str | None = None,
        repo: str | None = None,
        before: int | None = None,
    ) -> Awaitable[Any]:
        """Delete every build numbered lower than `before`."""

        path = self._repo_path(owner, repo)
        before = require_number(before, "before")
        return self._executor.request("DELETE", f"{path}/builds", params={"before": before})

    def latest_build(
        self,
        owner: str | None = None,
        repo: str | None = None,
        params: LatestBuild | dict[str, Any] | None = None,
    ) -> Awaitable[Any]:
        """Latest build, optionally narrowed by `ref` or `branch`."""

        path = self._repo_path(owner, repo)
        params = validate_payload(LatestBuild, params, "params")
        return self._executor.request("GET", f"{path}/builds/latest", params=params)

    def get_build(
        self,
        owner: str | None = None,
        repo: str | None = None,
        number: int | None = None,
    ) -> Awaitable[Any]:
        return self._executor.request("GET", self._build_path(owner, repo, number))

    def retry_build(
        self,
        owner: str | None = None,
        repo: str | None = None,
        number: int | None = None,
        params: RetryBuild | dict[str, str] | None = None,
    ) -> Awaitable[Any]:
        """Restart a build. `params` are sent as a URL-encoded form body."""

        path = self._build_path(owner, repo, number)
        params = validate_payload(RetryBuild, params, "params")
        return self._executor.request("POST", path, data=params)

    def cancel_build(
        self,
        owner: str | None = None,
        repo: str | None = None,
        number: int | None = None,
    ) -> Awaitable[Any]:
        return self._executor.request("DELETE", self._build_path(owner, repo, number))

    def promote_build(
        self,
        owner: str | None = None,
        repo: str | None = None,
        number: int | None = None,
        target: str | None = None,
        params: dict[str, str] | None = None,
    ) -> Awaitable[Any]:
        """Promote a build to `target`; `target` and `params` go in the query string."""

        path = self._build_path(owner, repo, number)
        target = require_string(target, "target")
        params = validate_payload(StringMap, params, "params")
        return self._executor.request(
            "POST",
            f"{path}/promote",
            params={"target": target, **(params or {})},
        )

    def rollback_build(
        self,
        owner: str | None = None,
        repo: str | None = None,
        number: int | None = None,
        target: str | None = None,
        params: dict[str, str] | None = None,
    ) -> Awaitable[Any]:
        """Roll `target` back to this build; `target` and `params` go in a form body."""

        path = self._build_path(owner, repo, number)
        target = require_string(target, "target")
        params = validate_payload(StringMap, params, "params")
        return self._executor.request(
            "POST",
            f"{path}/rollback",
            data={"target": target, **(params or {})},
        )

    def decline_build(
        self,
        owner: str | None = None,
        repo: str | None = None,
        number: int | None = None,
        stage: int | None = None,
    ) -> Awaitable[Any]:
        path = self._build_path(owner, repo, number)
        stage = require_number(stage, "stage")
        return self._executor.request("POST", f"{path}/decline/{segment(stage)}")

    def approve_build(
        self,
        owner: str | None = None,
        repo: str | None = None,
        number: int | None = None,
        stage: int | None = None,
    ) -> Awaitable[Any]:
        path = self._build_path(owner, repo, number)
        stage = require_number(stage, "stage")
        return self._executor.request("POST", f"{path}/approve/{segment(stage)}")

    def trigger_build(
        self,
        owner: str | None = None,
        repo: str | None = None,
        params: TriggerBuild | dict[str, Any] | None = None,
    ) -> Awaitable[Any]:
        """Start a new build, optionally for a given `branch` and `commit`."""

        path = self._repo_path(owner, repo)
        params = validate_payload(TriggerBuild, params, "params")
        return self._executor.request("POST", f"{path}/builds", params=params)

    def _logs_path(self, owner: Any, repo: Any, number: Any, stage: Any, step: Any) -> str:
        path = self._build_path(owner, repo, number)
        stage = require_number(stage, "stage")
        step = require_number(step, "step")
        return f"{path}/logs/{segment(stage)}/{segment(step)}"

    def get_logs(
        self,
        owner: str | None = None,
        repo: str | None = None,
        number: int | None = None,
        stage: int | None = None,
        step: int | None = None,
    ) -> Awaitable[Any]:
        return self._executor.request("GET", self._logs_path(owner, repo, number, stage, step))

    def delete_logs(
        self,
        owner: str | None = None,
        repo: str | None = None,
        number: int | None = None,
        stage: int | None = None,
        step: int | None = None,
    ) -> Awaitable[Any]:
        return self._executor.request("DELETE", self._logs_path(owner, repo, number, stage, step))
