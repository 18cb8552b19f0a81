"""Request payload shapes (Pydantic v2).

Each model is a flat, permissive contract:
- every field is optional, but a field that is present must have the declared
  type (strict mode: no string -> bool/number coercion, `bool` is not a number);
- unknown fields are accepted and passed through untouched.

Defaults are not validated by Pydantic, so an omitted field stays `None` while
an explicit `None` is reported as a type error. Annotations therefore name the
strict type only, with `Field(default=None)` marking the field optional.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import (
    AnyUrl,
    BaseModel,
    EmailStr,
    Field,
    RootModel,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    StringConstraints,
)
from pydantic.config import ConfigDict

NonEmptyStr = Annotated[StrictStr, StringConstraints(min_length=1)]
Number = Union[StrictInt, StrictFloat]
# Seconds since the epoch.
UnixTimestamp = Number

Event = Literal["push", "pull_request", "tag", "deployment"]
Status = Literal["skipped", "pending", "running", "success", "failure", "killed", "error"]
Arch = Literal[
    "freebsd_386",
    "freebsd_amd64",
    "freebsd_arm",
    "linux_386",
    "linux_amd64",
    "linux_arm",
    "linux_arm64",
    "solaris_amd64",
    "windows_386",
    "windows_amd64",
]


class Payload(BaseModel):
    model_config = ConfigDict(strict=True, extra="allow", populate_by_name=True)


class StringMap(RootModel[dict[str, NonEmptyStr]]):
    """Free-form string -> string mapping (build parameters, environment)."""

    model_config = ConfigDict(strict=True)


class RetryBuild(StringMap):
    """Parameters forwarded when retrying a build."""


class User(Payload):
    login: NonEmptyStr = Field(default=None)
    email: NonEmptyStr = Field(default=None)
    avatar: NonEmptyStr = Field(default=None)
    machine: StrictBool = Field(default=None)
    admin: StrictBool = Field(default=None)
    active: StrictBool = Field(default=None)
    syncing: StrictBool = Field(default=None)
    synced: UnixTimestamp = Field(default=None)
    created: UnixTimestamp = Field(default=None)
    updated: UnixTimestamp = Field(default=None)
    last_login: UnixTimestamp = Field(default=None)


class Repo(Payload):
    id: Number = Field(default=None)
    owner: NonEmptyStr = Field(default=None)
    name: NonEmptyStr = Field(default=None)
    full_name: NonEmptyStr = Field(default=None)
    avatar_url: AnyUrl = Field(default=None)
    link_url: AnyUrl = Field(default=None)
    clone_url: AnyUrl = Field(default=None)
    default_branch: NonEmptyStr = Field(default=None)
    timeout: StrictInt = Field(default=None)
    private: StrictBool = Field(default=None)
    trusted: StrictBool = Field(default=None)
    allow_pr: StrictBool = Field(default=None)
    allow_push: StrictBool = Field(default=None)
    allow_deploys: StrictBool = Field(default=None)
    allow_tags: StrictBool = Field(default=None)


class Build(Payload):
    id: Number = Field(default=None)
    number: Number = Field(default=None)
    event: Event = Field(default=None)
    status: Status = Field(default=None)
    enqueued_at: UnixTimestamp = Field(default=None)
    created_at: UnixTimestamp = Field(default=None)
    started_at: UnixTimestamp = Field(default=None)
    finished_at: UnixTimestamp = Field(default=None)
    commit: NonEmptyStr = Field(default=None)
    branch: NonEmptyStr = Field(default=None)
    ref: NonEmptyStr = Field(default=None)
    refspec: NonEmptyStr = Field(default=None)
    remote: NonEmptyStr = Field(default=None)
    title: NonEmptyStr = Field(default=None)
    message: NonEmptyStr = Field(default=None)
    timestamp: UnixTimestamp = Field(default=None)
    author: NonEmptyStr = Field(default=None)
    author_avatar: AnyUrl = Field(default=None)
    author_email: EmailStr = Field(default=None)
    link_url: AnyUrl = Field(default=None)


class Job(Payload):
    id: Number = Field(default=None)
    number: Number = Field(default=None)
    status: Status = Field(default=None)
    exit_code: Number = Field(default=None)
    enqueued_at: UnixTimestamp = Field(default=None)
    started_at: UnixTimestamp = Field(default=None)
    finished_at: UnixTimestamp = Field(default=None)
    environment: dict[str, NonEmptyStr] = Field(default=None)


class Node(Payload):
    id: Number = Field(default=None)
    addr: AnyUrl = Field(default=None)
    architecture: Arch = Field(default=None)
    cert: NonEmptyStr = Field(default=None)
    key: NonEmptyStr = Field(default=None)
    ca: NonEmptyStr = Field(default=None)


class Secret(Payload):
    name: NonEmptyStr = Field(default=None)
    data: NonEmptyStr = Field(default=None)
    pull_request: StrictBool = Field(default=None)
    pull_request_push: StrictBool = Field(default=None)


class Cron(Payload):
    name: NonEmptyStr = Field(default=None)
    branch: NonEmptyStr = Field(default=None)
    expr: NonEmptyStr = Field(default=None)
    target: NonEmptyStr = Field(default=None)
    disabled: StrictBool = Field(default=None)


class RepoSettings(Payload):
    visibility: NonEmptyStr = Field(default=None)
    config_path: NonEmptyStr = Field(default=None)
    trusted: StrictBool = Field(default=None)
    protected: StrictBool = Field(default=None)
    ignore_forks: StrictBool = Field(default=None)
    ignore_pull_requests: StrictBool = Field(default=None)
    auto_cancel_pull_requests: StrictBool = Field(default=None)
    auto_cancel_pushes: StrictBool = Field(default=None)
    auto_cancel_running: StrictBool = Field(default=None)
    timeout: Number = Field(default=None)
    throttle: Number = Field(default=None)
    counter: Number = Field(default=None)


class TriggerBuild(Payload):
    branch: NonEmptyStr = Field(default=None)
    commit: NonEmptyStr = Field(default=None)


class LatestBuild(Payload):
    ref: NonEmptyStr = Field(default=None)
    branch: NonEmptyStr = Field(default=None)


class SelfRepos(Payload):
    latest: StrictBool = Field(default=None)


class SyncRepos(Payload):
    async_: StrictBool = Field(default=None, alias="async")
