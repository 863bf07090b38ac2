"""Configuration module."""
from .settings import AppSettings, get_settings, CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH

__all__ = ["AppSettings", "get_settings", "CONFIG_ENV_VAR", "DEFAULT_CONFIG_PATH"]
