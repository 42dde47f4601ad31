"""Shared fixtures and recording collaborators for onboarding tests."""

from __future__ import annotations

from typing import Any

import pytest

from onboarding.config import Settings
from onboarding.domain.account import Account


class CallLog:
    """Ordered record of collaborator calls shared by the fakes."""

    def __init__(self) -> None:
        self.entries: list[tuple[str, Any]] = []

    def record(self, name: str, account: Any = None) -> None:
        self.entries.append((name, account))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.entries]


class RecordingRepository:
    """Repository double that records calls and optionally raises."""

    def __init__(self, log: CallLog, error: Exception | None = None) -> None:
        self._log = log
        self._error = error
        self.snapshots: list[bool] = []

    def create(self, account: Account) -> None:
        self._log.record("create", account)
        self.snapshots.append(account.is_enriched)
        if self._error is not None:
            raise self._error


class RecordingNotifier:
    """Notifier double that records calls and optionally raises."""

    def __init__(self, log: CallLog, error: Exception | None = None) -> None:
        self._log = log
        self._error = error

    def send_welcome(self, account: Account) -> None:
        self._log.record("send_welcome", account)
        if self._error is not None:
            raise self._error


@pytest.fixture
def settings() -> Settings:
    return Settings(
        log_level="DEBUG",
        log_format="standard",
        default_branch_code="0420",
        welcome_sender="hello@bank.example.com",
        welcome_subject="Welcome aboard",
    )


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()


@pytest.fixture
def account() -> Account:
    """A fresh account as a caller would build it."""
    return Account(holder_name="Ada Lovelace", email="ada@example.com")
