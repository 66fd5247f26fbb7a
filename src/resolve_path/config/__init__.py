"""Configuration for resolve_path."""

from resolve_path.config.settings import Settings, get_settings, reset_settings

__all__ = ["Settings", "get_settings", "reset_settings"]
