from __future__ import annotations

import pytest

from src.taskflow.taskflow.auth.permissions import DEFAULT_PERMISSION_MATRIX, PermissionMatrix
from src.taskflow.taskflow.auth.service import PermissionService
from src.taskflow.taskflow.core.enums import ModuleKey, Role
from src.taskflow.taskflow.core.exceptions import AuthorizationError


def test_default_matrix():
    m = DEFAULT_PERMISSION_MATRIX

    assert all(m.can_access(Role.ADMIN, k) for k in ModuleKey)
    assert not m.can_access(Role.MANAGER, ModuleKey.USERS)
    assert not m.can_access(Role.MANAGER, ModuleKey.ROLES)
    assert m.can_access(Role.MANAGER, ModuleKey.TIME_TRACKING)
    assert m.modules_for(Role.EMPLOYEE) == [
        ModuleKey.DASHBOARD,
        ModuleKey.TASKS,
        ModuleKey.SCHEDULING,
        ModuleKey.TIME_TRACKING,
        ModuleKey.MESSAGING,
    ]


def test_set_access_returns_new_matrix():
    updated = DEFAULT_PERMISSION_MATRIX.set_access(Role.MANAGER, ModuleKey.TIME_TRACKING, False)

    assert not updated.can_access(Role.MANAGER, ModuleKey.TIME_TRACKING)
    assert DEFAULT_PERMISSION_MATRIX.can_access(Role.MANAGER, ModuleKey.TIME_TRACKING)


def test_dict_round_trip_ignores_unknown_keys():
    data = DEFAULT_PERMISSION_MATRIX.to_dict()
    data["manager"]["users"] = True
    data["manager"]["spaceships"] = True
    data["intern"] = {"dashboard": True}

    m = PermissionMatrix.from_dict(data)

    assert m.can_access(Role.MANAGER, ModuleKey.USERS)
    assert "intern" not in m.to_dict()
    assert "spaceships" not in m.to_dict()["manager"]


def test_only_roles_module_can_replace_matrix():
    svc = PermissionService()

    with pytest.raises(AuthorizationError):
        svc.replace_matrix(current_role=Role.MANAGER, data={})

    svc.replace_matrix(current_role=Role.ADMIN, data={"admin": {"roles": True}})
    assert svc.can_access(Role.ADMIN, ModuleKey.ROLES)
    assert not svc.can_access(Role.MANAGER, ModuleKey.DASHBOARD)
