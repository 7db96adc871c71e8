from __future__ import annotations

from typing import Iterable, Optional, Protocol

from .model import DashboardUser


class UserRepository(Protocol):
    def get_by_username(self, username: str) -> Optional[DashboardUser]:
        raise NotImplementedError


class ConfiguredUserRepository(UserRepository):
    """Dashboard accounts declared in settings (DASHBOARD_USERS)."""

    def __init__(self, users: Iterable[DashboardUser]):
        self._by_username = {u.username: u for u in users}

    def get_by_username(self, username: str) -> Optional[DashboardUser]:
        return self._by_username.get(username)
