"""Configuration package for Chronicle."""

from chronicle.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
