from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.taskflow.taskflow.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    api_config = {
        "base_url": settings.API_BASE_URL,
        "token": getattr(settings, "API_TOKEN", None),
        "timeout": getattr(settings, "API_TIMEOUT", 10),
    }
    container = build_container(api_config=api_config, dashboard_users=list(settings.DASHBOARD_USERS))

    entries = container.time_entry_service.ensure_seeded()
    print(f"OK: {len(entries)} time entries at {api_config['base_url']}/api/time-entries")


if __name__ == "__main__":
    main()
