import os

from config.config import parse_dashboard_users

SECRET_KEY = "test-secret"

API_BASE_URL = os.getenv("API_BASE_URL", "http://api.test")
API_TOKEN = None
API_TIMEOUT = 1.0

DASHBOARD_USERS = parse_dashboard_users("admin:admin:admin123,manager:manager:manager123")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SEED_TIME_ENTRIES = False
