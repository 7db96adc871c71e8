from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from werkzeug.security import check_password_hash

from ..core.enums import DASHBOARD_ROLES, ModuleKey, Role
from ..core.exceptions import AuthenticationError, AuthorizationError
from .permissions import DEFAULT_PERMISSION_MATRIX, PermissionMatrix
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    username: str
    role: Role


class AuthService:
    """Use case: authenticate a dashboard user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        if not isinstance(username, str) or not isinstance(password, str):
            raise AuthenticationError("Invalid credentials")
        username = username.strip()
        user = self._users.get_by_username(username)
        if not user or not user.is_active or user.role not in DASHBOARD_ROLES:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME'
            ok = False

        if not ok:
            logger.info("Failed login for %s", username)
            raise AuthenticationError("Invalid credentials")

        return SessionUser(username=user.username, role=user.role)


class PermissionService:
    """Holds the role -> module matrix for the running app."""

    def __init__(self, matrix: Optional[PermissionMatrix] = None):
        self._matrix = matrix or DEFAULT_PERMISSION_MATRIX

    @property
    def matrix(self) -> PermissionMatrix:
        return self._matrix

    def can_access(self, role: Role, module: ModuleKey) -> bool:
        return self._matrix.can_access(role, module)

    def require(self, role: Role, module: ModuleKey) -> None:
        if not self.can_access(role, module):
            raise AuthorizationError(f"Role {role.value} cannot access {module.value}")

    def replace_matrix(self, *, current_role: Role, data: Mapping[str, Any]) -> PermissionMatrix:
        self.require(current_role, ModuleKey.ROLES)
        self._matrix = PermissionMatrix.from_dict(data)
        logger.info("Permission matrix updated by %s", current_role.value)
        return self._matrix
