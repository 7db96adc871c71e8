from __future__ import annotations

from datetime import timedelta

import pytest

from src.taskflow.taskflow.container import build_container
from src.taskflow.taskflow.core.constants import DEFAULT_SESSION_DAYS
from src.taskflow.taskflow.core.enums import ModuleKey, Role
from src.taskflow.taskflow.core.exceptions import ResourceError
from src.taskflow.taskflow.main import create_app
from src.taskflow.taskflow.time_entries.seed import SEED_ENTRIES

USERS = [
    {"username": "admin", "role": "admin", "password": "admin123"},
    {"username": "manager", "role": "manager", "password": "manager123"},
]


class InMemoryTimeEntries:
    def __init__(self, entries=()):
        self._items = {e.entry_id: e for e in entries}
        self.fail_with = None

    def list_all(self):
        if self.fail_with:
            raise self.fail_with
        return list(self._items.values())

    def create(self, entry):
        self._items[entry.entry_id] = entry
        return entry

    def update(self, entry):
        self._items[entry.entry_id] = entry
        return entry

    def delete(self, entry_id):
        self._items.pop(entry_id, None)


@pytest.fixture()
def repo():
    return InMemoryTimeEntries(SEED_ENTRIES)


@pytest.fixture()
def container(repo):
    return build_container(api_config={}, dashboard_users=USERS, time_entries_repo=repo)


@pytest.fixture()
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


def login(client, username="admin", password="admin123"):
    return client.post("/api/auth/login", json={"username": username, "password": password})


def test_requires_login(client):
    res = client.get("/api/time-entries")
    assert res.status_code == 401


def test_login_rejects_bad_password(client):
    res = login(client, password="nope")
    assert res.status_code == 401
    assert res.get_json()["error"] == "Invalid credentials"


def test_login_and_me(client):
    res = login(client, "manager", "manager123")
    assert res.status_code == 200
    body = res.get_json()
    assert body["role"] == "manager"
    assert "time_tracking" in body["modules"]
    assert "users" not in body["modules"]

    assert client.get("/api/auth/me").get_json()["username"] == "manager"

    client.post("/api/auth/logout")
    assert client.get("/api/auth/me").status_code == 401


def test_list_entries_with_filters(client):
    login(client)

    res = client.get("/api/time-entries?status=clocked-in&from=2026-02-09")

    assert res.status_code == 200
    body = res.get_json()
    assert [r["id"] for r in body["items"]] == ["2", "1"]
    assert body["summary"]["statusCounts"] == {"clockedIn": 2, "onBreak": 0, "clockedOut": 0}


def test_bad_status_filter_is_400(client):
    login(client)
    assert client.get("/api/time-entries?status=napping").status_code == 400


def test_report(client):
    login(client)

    body = client.get("/api/time-entries/report").get_json()

    assert body["weeklyTotalMinutes"] == 510
    assert body["weeklyTotal"] == "8h 30m"
    assert [d["date"] for d in body["dailyTotals"]] == ["2026-02-09", "2026-02-08"]


def test_create_clock_out_and_delete(client, repo):
    login(client)

    res = client.post(
        "/api/time-entries",
        json={"employee": "Tom Wilson", "location": "Garage", "date": "2026-02-10", "clockIn": "08:00"},
    )
    assert res.status_code == 201
    item = res.get_json()["item"]
    assert item["initials"] == "TW"
    assert item["status"] == "clocked-in"

    res = client.post(f"/api/time-entries/{item['id']}/clock-out")
    assert res.status_code == 200
    assert res.get_json()["item"]["status"] == "clocked-out"

    assert client.post(f"/api/time-entries/{item['id']}/clock-out").status_code == 400

    assert client.delete(f"/api/time-entries/{item['id']}").status_code == 200
    assert item["id"] not in [e.entry_id for e in repo.list_all()]


def test_create_validation_error(client):
    login(client)
    res = client.post("/api/time-entries", json={"employee": "Tom", "location": "Garage", "date": "2026-02-10"})
    assert res.status_code == 400


def test_upstream_error_surfaced(client, repo):
    login(client)
    repo.fail_with = ResourceError("Service unavailable", status_code=503)

    res = client.get("/api/time-entries")

    assert res.status_code == 502
    assert res.get_json()["error"] == "Service unavailable"


def test_role_without_time_tracking_is_forbidden(client, container):
    matrix = container.permission_service.matrix.set_access(Role.MANAGER, ModuleKey.TIME_TRACKING, False)

    login(client)
    assert client.put("/api/permissions", json=matrix.to_dict()).status_code == 200
    client.post("/api/auth/logout")

    login(client, "manager", "manager123")
    assert client.get("/api/time-entries").status_code == 403


def test_manager_cannot_edit_permissions(client):
    login(client, "manager", "manager123")
    assert client.put("/api/permissions", json={}).status_code == 403


def test_me_includes_module_labels(client):
    body = login(client, "manager", "manager123").get_json()

    assert body["moduleLabels"]["time_tracking"] == "Time Tracking"
    assert "users" not in body["moduleLabels"]
    assert set(body["moduleLabels"]) == set(body["modules"])


def test_session_lifetime_configured_at_startup(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)

    assert app.permanent_session_lifetime == timedelta(days=DEFAULT_SESSION_DAYS)


def test_login_with_non_object_body_is_401(client):
    assert client.post("/api/auth/login", json=["admin", "admin123"]).status_code == 401
    assert client.post("/api/auth/login", json={"username": 1, "password": 2}).status_code == 401


def test_create_with_numeric_clock_out_is_400(client):
    login(client)
    res = client.post(
        "/api/time-entries",
        json={"employee": "Tom", "location": "Garage", "date": "2026-02-10", "clockIn": "08:00", "clockOut": 1700},
    )
    assert res.status_code == 400


def test_create_with_array_body_is_400(client):
    login(client)
    res = client.post("/api/time-entries", json=["x"])
    assert res.status_code == 400
    assert res.get_json()["error"] == "Expected a JSON object"


def test_bad_date_filter_is_400(client):
    login(client)
    assert client.get("/api/time-entries?from=garbage").status_code == 400
    assert client.get("/api/time-entries/report?to=2026-02-30").status_code == 400
