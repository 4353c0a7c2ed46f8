"""Configuration for Fly Bird."""

from .settings import Settings, WorldConfig, get_settings

__all__ = ["Settings", "WorldConfig", "get_settings"]
