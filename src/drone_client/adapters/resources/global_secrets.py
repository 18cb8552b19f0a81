"""Organization-wide secrets (`/api/secrets/{namespace}`)."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any

from drone_client.adapters.resources.base import Resource, segment
from drone_client.core.domain.schemas import Secret
from drone_client.core.validation import require_string, validate_payload


class GlobalSecretResource(Resource):
    def _namespace_path(self, namespace: Any) -> str:
        namespace = require_string(namespace, "namespace")
        return f"/api/secrets/{segment(namespace)}"

    def _global_secret_path(self, namespace: Any, name: Any) -> str:
        path = self._namespace_path(namespace)
        name = require_string(name, "name")
        return f"{path}/{segment(name)}"

    def get_all_global_secrets(self) -> Awaitable[Any]:
        return self._executor.request("GET", "/api/secrets")

    def get_global_secrets(self, namespace: str | None = None) -> Awaitable[Any]:
        return self._executor.request("GET", self._namespace_path(namespace))

    def get_global_secret(self, namespace: str | None = None, name: str | None = None) -> Awaitable[Any]:
        return self._executor.request("GET", self._global_secret_path(namespace, name))

    def delete_global_secret(self, namespace: str | None = None, name: str | None = None) -> Awaitable[Any]:
        return self._executor.request("DELETE", self._global_secret_path(namespace, name))

    def update_global_secret(
        self,
        namespace: str | None = None,
        name: str | None = None,
        secret: Secret | dict[str, Any] | None = None,
    ) -> Awaitable[Any]:
        path = self._global_secret_path(namespace, name)
        secret = validate_payload(Secret, secret, "secret")
        return self._executor.request("PATCH", path, json=secret)

    def create_global_secret(
        self,
        namespace: str | None = None,
        secret: Secret | dict[str, Any] | None = None,
    ) -> Awaitable[Any]:
        path = self._namespace_path(namespace)
        secret = validate_payload(Secret, secret, "secret")
        return self._executor.request("POST", path, json=secret)
