import os

from config.config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_BASE_URL = Config.API_BASE_URL
API_TOKEN = Config.API_TOKEN
API_TIMEOUT = Config.API_TIMEOUT

DASHBOARD_USERS = Config.DASHBOARD_USERS

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

SEED_TIME_ENTRIES = bool(int(os.getenv("SEED_TIME_ENTRIES", "0")))
