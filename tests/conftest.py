"""Pytest configuration shared across all test modules.

Environment is pinned before any import of ``client_helpers.core.config`` so
settings never pick up a developer's .env file.
"""

import os

# Set before any imports that might load settings
os.environ["APP_ENV"] = "testing"

os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_FORMAT", "json")
os.environ.setdefault("HELPERS_PASSWORD_LENGTH", "12")
os.environ.setdefault("HELPERS_COUPON_LENGTH", "8")
