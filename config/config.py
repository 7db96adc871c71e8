import os


def parse_dashboard_users(raw: str) -> list[dict]:
    """Parse `username:role:password` entries separated by commas."""
    users = []
    for chunk in (raw or "").split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        username, role, password = chunk.split(":", 2)
        users.append({"username": username.strip(), "role": role.strip(), "password": password})
    return users


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "taskflow-dev-secret"

    # REST resource API
    API_BASE_URL = os.environ.get("API_BASE_URL", os.environ.get("VITE_API_URL", "http://localhost:5000"))
    API_TOKEN = os.environ.get("API_TOKEN") or None
    API_TIMEOUT = float(os.environ.get("API_TIMEOUT", "10"))

    # Dashboard logins
    DASHBOARD_USERS = parse_dashboard_users(
        os.environ.get("DASHBOARD_USERS", "admin:admin:admin123,manager:manager:manager123")
    )

    # Dev helpers
    SEED_TIME_ENTRIES = bool(int(os.environ.get("SEED_TIME_ENTRIES", "0")))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
