"""Runtime configuration helpers."""

from .settings import ConfigurationError, Settings, build_settings, load_settings

__all__ = ["ConfigurationError", "Settings", "build_settings", "load_settings"]
