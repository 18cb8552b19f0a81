"""Build queue and server statistics."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any

from drone_client.adapters.resources.base import Resource


class SystemResource(Resource):
    def get_queue(self) -> Awaitable[Any]:
        return self._executor.request("GET", "/api/queue")

    def resume_queue(self) -> Awaitable[Any]:
        return self._executor.request("POST", "/api/queue")

    def pause_queue(self) -> Awaitable[Any]:
        return self._executor.request("DELETE", "/api/queue")

    def get_system_stats(self) -> Awaitable[Any]:
        """Counters for users, repos, builds and pipelines (admin)."""

        return self._executor.request("GET", "/api/system/stats")
