from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .core.constants import DEFAULT_SESSION_DAYS
from .container import Container, build_container
from .auth.controller import register as register_auth
from .time_entries.controller import register as register_time_entries


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(getattr(settings, "LOG_LEVEL", "INFO"))

    api_config = {
        "base_url": getattr(settings, "API_BASE_URL"),
        "token": getattr(settings, "API_TOKEN", None),
        "timeout": getattr(settings, "API_TIMEOUT", 10),
    }
    app.logger.debug("settings=%s api=%s", settings_module, api_config["base_url"])

    if container is None:
        container = build_container(
            api_config=api_config,
            dashboard_users=list(getattr(settings, "DASHBOARD_USERS", [])),
            seed_time_entries=bool(getattr(settings, "SEED_TIME_ENTRIES", False)),
        )

    register_auth(app, container)
    register_time_entries(app, container)

    return app
