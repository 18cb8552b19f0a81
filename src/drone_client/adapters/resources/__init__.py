"""Endpoint groups composed into `drone_client.Client`.

Each module covers one area of the REST API and implements a mixin that
relies on `self._executor`.
"""

from drone_client.adapters.resources.builds import BuildResource
from drone_client.adapters.resources.collaborators import CollaboratorResource
from drone_client.adapters.resources.cron import CronResource
from drone_client.adapters.resources.global_secrets import GlobalSecretResource
from drone_client.adapters.resources.nodes import NodeResource
from drone_client.adapters.resources.repos import RepoResource
from drone_client.adapters.resources.secrets import SecretResource
from drone_client.adapters.resources.system import SystemResource
from drone_client.adapters.resources.user import UserResource
from drone_client.adapters.resources.users import UsersResource

__all__ = [
    "BuildResource",
    "CollaboratorResource",
    "CronResource",
    "GlobalSecretResource",
    "NodeResource",
    "RepoResource",
    "SecretResource",
    "SystemResource",
    "UserResource",
    "UsersResource",
]
