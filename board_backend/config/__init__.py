"""Configuration: env-backed settings and logging setup."""

from board_backend.config.settings import Config, BoardSettings, get_config

__all__ = [
    "Config",
    "BoardSettings",
    "get_config",
]
