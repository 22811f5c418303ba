"""Configuration module for deezerapi."""

from .settings import DeezerSettings, get_settings

__all__ = ["DeezerSettings", "get_settings"]
