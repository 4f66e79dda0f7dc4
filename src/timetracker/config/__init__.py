"""Configuration management."""

from timetracker.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
