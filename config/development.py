import os

from config.config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_BASE_URL = Config.API_BASE_URL
API_TOKEN = Config.API_TOKEN
API_TIMEOUT = Config.API_TIMEOUT

DASHBOARD_USERS = Config.DASHBOARD_USERS

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

# If enabled, an empty time-entries resource is filled with demo entries on first load
SEED_TIME_ENTRIES = bool(int(os.getenv("SEED_TIME_ENTRIES", "1")))
