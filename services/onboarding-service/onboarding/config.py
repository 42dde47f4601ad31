from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
import os


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    """Runtime configuration values shared by the onboarding components."""

    app_name: str = "onboarding-service"
    version: str = "0.1.0"
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO").upper())
    log_format: str = field(default_factory=lambda: _env("LOG_FORMAT", "standard").lower())
    default_branch_code: str = field(default_factory=lambda: _env("DEFAULT_BRANCH_CODE", "0001"))
    welcome_sender: str = field(
        default_factory=lambda: _env("WELCOME_SENDER", "welcome@bank.example.com")
    )
    welcome_subject: str = field(
        default_factory=lambda: _env("WELCOME_SUBJECT", "Welcome to your new account")
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached Settings instance for the running process."""
    return Settings()
