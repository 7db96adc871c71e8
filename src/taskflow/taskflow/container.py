from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from werkzeug.security import generate_password_hash

from .auth.model import DashboardUser
from .auth.repository import ConfiguredUserRepository
from .auth.service import AuthService, PermissionService
from .core.enums import Role
from .resources.client import ApiConfig, ResourceClient
from .time_entries.repository import TimeEntryRepository
from .time_entries.rest_time_entry_repository import RestTimeEntryRepository
from .time_entries.service import TimeEntryService


@dataclass(frozen=True)
class Container:
    resource_client: Optional[ResourceClient]

    users_repo: ConfiguredUserRepository
    time_entries_repo: TimeEntryRepository

    auth_service: AuthService
    permission_service: PermissionService
    time_entry_service: TimeEntryService


def build_users(raw_users: list[dict]) -> list[DashboardUser]:
    return [
        DashboardUser(
            username=str(u["username"]),
            password_hash=generate_password_hash(str(u["password"])),
            role=Role(u["role"]),
        )
        for u in raw_users
    ]


def build_container(
    *,
    api_config: dict,
    dashboard_users: list[dict],
    seed_time_entries: bool = False,
    time_entries_repo: Optional[TimeEntryRepository] = None,
) -> Container:
    client = None
    if time_entries_repo is None:
        config = ApiConfig(
            base_url=str(api_config["base_url"]),
            token=api_config.get("token") or None,
            timeout=float(api_config.get("timeout", 10)),
        )
        client = ResourceClient(config)
        time_entries_repo = RestTimeEntryRepository(client)

    users_repo = ConfiguredUserRepository(build_users(dashboard_users))

    return Container(
        resource_client=client,
        users_repo=users_repo,
        time_entries_repo=time_entries_repo,
        auth_service=AuthService(users_repo),
        permission_service=PermissionService(),
        time_entry_service=TimeEntryService(time_entries_repo, seed_if_empty=seed_time_entries),
    )
