"""Example: use the service layer without Flask.

Controllers stay thin; the aggregation lives in the time_entries service.
"""

import importlib

from config import get_settings_module

from src.taskflow.taskflow.container import build_container
from src.taskflow.taskflow.time_entries.aggregator import format_duration
from src.taskflow.taskflow.time_entries.model import FilterState


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        api_config={"base_url": settings.API_BASE_URL, "token": getattr(settings, "API_TOKEN", None)},
        dashboard_users=list(settings.DASHBOARD_USERS),
    )
    summary = container.time_entry_service.summarize(FilterState.from_params(from_date="2026-02-01"))
    for d in summary.daily_totals:
        print(d.date, format_duration(d.minutes))
    print("Weekly total:", format_duration(summary.weekly_total_minutes))


if __name__ == "__main__":
    main()
