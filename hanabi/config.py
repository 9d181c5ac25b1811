"""
Configuration - Environment-driven settings.

Environment variables:
    HANABI_ENV              development | production (default: development)
    HANABI_LOG_LEVEL        Logging level name (default: INFO)
    HANABI_DEFAULT_PLAYERS  Player count for new games (default: 3)
    HANABI_MULTICOLOR       Include the multicolor suit (default: false)
    HANABI_SESSION_TTL      Seconds before a finished session is dropped (default: 3600)
"""

from __future__ import annotations
from dataclasses import dataclass
import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Runtime settings for hosts built on the engine."""
    env: str = "development"
    log_level: str = "INFO"
    default_players: int = 3
    multicolor: bool = False
    session_ttl: int = 3600

    @classmethod
    def from_env(cls) -> Settings:
        """Read settings from the environment."""
        return cls(
            env=os.getenv("HANABI_ENV", "development"),
            log_level=os.getenv("HANABI_LOG_LEVEL", "INFO").upper(),
            default_players=int(os.getenv("HANABI_DEFAULT_PLAYERS", "3")),
            multicolor=_env_bool("HANABI_MULTICOLOR", False),
            session_ttl=int(os.getenv("HANABI_SESSION_TTL", "3600")),
        )


def get_settings() -> Settings:
    """Build a fresh Settings from the current environment."""
    return Settings.from_env()
