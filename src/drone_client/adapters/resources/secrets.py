"""Repository secrets plus the encrypt/sign helpers."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any

from drone_client.adapters.resources.base import Resource, segment
from drone_client.core.domain.schemas import Secret
from drone_client.core.validation import require_string, validate_payload


class SecretResource(Resource):
    def _secret_path(self, owner: Any, repo: Any, name: Any) -> str:
        path = self._repo_path(owner, repo)
        name = require_string(name, "name")
        return f"{path}/secrets/{segment(name)}"

    def get_secrets(self, owner: str | None = None, repo: str | None = None) -> Awaitable[Any]:
        return self._executor.request("GET", f"{self._repo_path(owner, repo)}/secrets")

    def get_secret(
        self,
        owner: str | None = None,
        repo: str | None = None,
        name: str | None = None,
    ) -> Awaitable[Any]:
        return self._executor.request("GET", self._secret_path(owner, repo, name))

    def delete_secret(
        self,
        owner: str | None = None,
        repo: str | None = None,
        name: str | None = None,
    ) -> Awaitable[Any]:
        return self._executor.request("DELETE", self._secret_path(owner, repo, name))

    def update_secret(
        self,
        owner: str | None = None,
        repo: str | None = None,
        name: str | None = None,
        secret: Secret | dict[str, Any] | None = None,
    ) -> Awaitable[Any]:
        path = self._secret_path(owner, repo, name)
        secret = validate_payload(Secret, secret, "secret", required=True)
        return self._executor.request("PATCH", path, json=secret)

    def create_secret(
        self,
        owner: str | None = None,
        repo: str | None = None,
        secret: Secret | dict[str, Any] | None = None,
    ) -> Awaitable[Any]:
        path = self._repo_path(owner, repo)
        secret = validate_payload(Secret, secret, "secret", required=True)
        return self._executor.request("POST", f"{path}/secrets", json=secret)

    def encrypt_secret(
        self,
        owner: str | None = None,
        repo: str | None = None,
        secret: str | None = None,
    ) -> Awaitable[Any]:
        """Encrypt a value for use as an inline secret in the pipeline file."""

        path = self._repo_path(owner, repo)
        secret = require_string(secret, "secret")
        return self._executor.request("POST", f"{path}/encrypt", json={"data": secret})

    def sign_config(
        self,
        owner: str | None = None,
        repo: str | None = None,
        config: str | None = None,
    ) -> Awaitable[Any]:
        """Compute the signature of a pipeline configuration."""

        path = self._repo_path(owner, repo)
        config = require_string(config, "config")
        return self._executor.request("POST", f"{path}/sign", json={"data": config})
