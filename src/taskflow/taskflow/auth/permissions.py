from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import ModuleKey, Role


@dataclass(frozen=True)
class PermissionMatrix:
    """Which dashboard modules each role may open.

    Immutable: `set_access` returns a new matrix so a copy loaded at login
    can be swapped atomically.
    """

    grants: Mapping[Role, frozenset[ModuleKey]]

    def can_access(self, role: Role, module: ModuleKey) -> bool:
        return module in self.grants.get(role, frozenset())

    def modules_for(self, role: Role) -> list[ModuleKey]:
        return [m for m in ModuleKey if self.can_access(role, m)]

    def set_access(self, role: Role, module: ModuleKey, enabled: bool) -> "PermissionMatrix":
        current = set(self.grants.get(role, frozenset()))
        if enabled:
            current.add(module)
        else:
            current.discard(module)
        grants = dict(self.grants)
        grants[role] = frozenset(current)
        return PermissionMatrix(grants=grants)

    def to_dict(self) -> dict[str, dict[str, bool]]:
        return {role.value: {m.value: self.can_access(role, m) for m in ModuleKey} for role in Role}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PermissionMatrix":
        """Build from `{role: {module: bool}}`; unknown roles/modules are ignored."""
        roles = {r.value: r for r in Role}
        modules = {m.value: m for m in ModuleKey}

        grants: dict[Role, frozenset[ModuleKey]] = {r: frozenset() for r in Role}
        for role_key, cells in (data or {}).items():
            role = roles.get(role_key)
            if role is None or not isinstance(cells, Mapping):
                continue
            grants[role] = frozenset(modules[k] for k, v in cells.items() if k in modules and bool(v))
        return cls(grants=grants)


DEFAULT_PERMISSION_MATRIX = PermissionMatrix(
    grants={
        Role.ADMIN: frozenset(ModuleKey),
        Role.MANAGER: frozenset(ModuleKey) - {ModuleKey.USERS, ModuleKey.ROLES},
        Role.EMPLOYEE: frozenset(
            {
                ModuleKey.DASHBOARD,
                ModuleKey.TASKS,
                ModuleKey.SCHEDULING,
                ModuleKey.TIME_TRACKING,
                ModuleKey.MESSAGING,
            }
        ),
    }
)
