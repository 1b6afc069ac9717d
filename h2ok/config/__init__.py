"""
Configuration package for the H2Ok map client.
"""

from .settings import (
    DEFAULT_BACKEND_URL,
    Settings,
    Environment,
    LogLevel,
    MapSettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "DEFAULT_BACKEND_URL",
    "Settings",
    "Environment",
    "LogLevel",
    "MapSettings",
    "settings",
    "get_settings",
    "reload_settings",
]
