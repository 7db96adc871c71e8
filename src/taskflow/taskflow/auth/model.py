from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class DashboardUser:
    """Login account for the admin/manager dashboard."""

    username: str
    password_hash: str
    role: Role
    is_active: bool = True
