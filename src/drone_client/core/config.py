"""Client configuration.

Two layers:
- `ClientConfig` is the immutable contract a `Client` is built from
  (server URL + bearer token). It is validated once, at construction.
- `DroneSettings` reads the same values from the environment / `.env` files
  (pydantic-settings) for the CLI and other entry points.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import AnyHttpUrl, BaseModel, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError
from pydantic.config import ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from drone_client.core.validation import raise_validation_error, raise_validation_error_from

DEFAULT_TIMEOUT_SECONDS = 30.0


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "drone-client"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "drone-client"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "drone-client"
    return Path.home() / ".config" / "drone-client"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Write or update variables in the per-user `.env` file."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# drone-client user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class ClientConfig(BaseModel):
    """Connection settings captured by a `Client` for its whole lifetime."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    url: AnyHttpUrl = Field(
        ...,
        description="Base URL of the Drone server (http or https).",
    )
    token: StrictStr = Field(
        ...,
        min_length=1,
        description="Personal access token sent as a bearer credential.",
    )
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds; transport default when unset.",
    )

    @property
    def base_url(self) -> str:
        return str(self.url)


def validate_client_config(config: ClientConfig | Mapping[str, Any]) -> ClientConfig:
    """Coerce `config` into a `ClientConfig`, raising `ValidationError` on failure."""

    if isinstance(config, ClientConfig):
        return config
    if not isinstance(config, Mapping):
        raise_validation_error("config", "must be of type object", label="config")
    data = {k: v for k, v in config.items() if v is not None}
    try:
        return ClientConfig.model_validate(data)
    except PydanticValidationError as exc:
        raise_validation_error_from(exc, label="config")


class DroneSettings(BaseSettings):
    """Environment-backed settings (`DRONE_SERVER`, `DRONE_TOKEN`, ...)."""

    model_config = SettingsConfigDict(
        env_prefix="DRONE_",
        extra="ignore",
        case_sensitive=False,
        # Project first, then the per-user file written by `doctor login`.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    server: str | None = Field(
        default=None,
        description="Drone server URL.",
    )
    token: str | None = Field(
        default=None,
        description="Drone personal access token.",
    )
    http_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Timeout per request (seconds).",
    )

    def to_client_config(self) -> ClientConfig:
        """Build a `ClientConfig`; raises `ValidationError` on bad values."""

        return validate_client_config(
            {
                "url": self.server,
                "token": self.token,
                "timeout": self.http_timeout_seconds,
            }
        )
