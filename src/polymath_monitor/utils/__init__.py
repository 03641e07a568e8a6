"""Utility modules for polymath-monitor."""

from .settings import Settings, get_settings, save_settings

__all__ = [
    "Settings",
    "get_settings",
    "save_settings",
]
