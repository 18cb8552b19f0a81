"""Build node registry (`/api/nodes`)."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any

from drone_client.adapters.resources.base import Resource, segment
from drone_client.core.domain.schemas import Node
from drone_client.core.validation import require_number, validate_payload


class NodeResource(Resource):
    def _node_path(self, id: Any) -> str:
        id = require_number(id, "id")
        return f"/api/nodes/{segment(id)}"

    def get_nodes(self) -> Awaitable[Any]:
        return self._executor.request("GET", "/api/nodes")

    def get_node(self, id: int | None = None) -> Awaitable[Any]:
        return self._executor.request("GET", self._node_path(id))

    def create_node(self, node: Node | dict[str, Any] | None = None) -> Awaitable[Any]:
        node = validate_payload(Node, node, "node", required=True)
        return self._executor.request("POST", "/api/nodes", json=node)

    def delete_node(self, id: int | None = None) -> Awaitable[Any]:
        return self._executor.request("DELETE", self._node_path(id))
