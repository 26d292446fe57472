"""Configuration."""

from reelsift.config.settings import Settings

__all__ = ["Settings"]
