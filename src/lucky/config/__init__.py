"""Configuration for the Lucky engine."""

from lucky.config.settings import AISettings, Settings, get_settings

__all__ = ["AISettings", "Settings", "get_settings"]
