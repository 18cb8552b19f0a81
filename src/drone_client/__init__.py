"""Async Python client for the Drone CI HTTP API.

Layers:
- core: configuration, errors, payload shapes and validation (no I/O)
- adapters: httpx request executor, endpoint groups, plugin parameter reader
- cli: `drone-client` command line (typer + rich)
"""

__version__ = "0.1.0"

from drone_client.adapters.plugin_params import parse as parse_plugin_params
from drone_client.client import Client
from drone_client.core.config import ClientConfig, DroneSettings
from drone_client.core.domain import (
    Build,
    Cron,
    Job,
    LatestBuild,
    Node,
    Repo,
    RepoSettings,
    RetryBuild,
    Secret,
    SelfRepos,
    SyncRepos,
    TriggerBuild,
    User,
)
from drone_client.core.errors import DroneError, DroneHTTPError, PluginInputError, ValidationError

__all__ = [
    "Build",
    "Client",
    "ClientConfig",
    "Cron",
    "DroneError",
    "DroneHTTPError",
    "DroneSettings",
    "Job",
    "LatestBuild",
    "Node",
    "PluginInputError",
    "Repo",
    "RepoSettings",
    "RetryBuild",
    "Secret",
    "SelfRepos",
    "SyncRepos",
    "TriggerBuild",
    "User",
    "ValidationError",
    "parse_plugin_params",
]
