"""Payload shapes shared by the API surface and its callers."""

from drone_client.core.domain.schemas import (
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
    StringMap,
    SyncRepos,
    TriggerBuild,
    User,
)

__all__ = [
    "Build",
    "Cron",
    "Job",
    "LatestBuild",
    "Node",
    "Repo",
    "RepoSettings",
    "RetryBuild",
    "Secret",
    "SelfRepos",
    "StringMap",
    "SyncRepos",
    "TriggerBuild",
    "User",
]
