"""Taskflow operations dashboard backend.

This package is organized by feature modules (time_entries, auth, ...)
with a thin Flask controller layer and plain service/repository layers.
"""
