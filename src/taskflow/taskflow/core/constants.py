"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TIME_ENTRIES_RESOURCE = "time-entries"
ENTRY_ID_PREFIX = "TIME-"
DEFAULT_SESSION_DAYS = 7
DEFAULT_API_TIMEOUT_SECONDS = 10
STATUS_FILTER_ALL = "all"
