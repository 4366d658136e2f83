"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "snapsaver",
    "environment": "dev",
    "http": {
        "timeout_seconds": 30.0,
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
    "snapsave": {
        "api_url": "https://snapsave.app/action.php?lang=en",
        "origin": "https://snapsave.app",
        "platforms": ["Facebook", "Instagram", "TikTok"],
    },
}
