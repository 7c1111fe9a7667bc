"""
Configuration Module

Application configuration settings and utilities.
"""

from balnearios_ai.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
