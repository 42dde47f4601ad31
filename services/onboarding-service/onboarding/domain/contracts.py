"""Capability interfaces the account service depends on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .account import Account


@runtime_checkable
class AccountRepository(Protocol):
    """Owns the persistence of onboarded accounts."""

    def create(self, account: Account) -> None:
        """Persist ``account`` or raise when it cannot be stored."""
        ...


@runtime_checkable
class NotificationService(Protocol):
    """Owns delivery of the welcome communication for an account."""

    def send_welcome(self, account: Account) -> None:
        """Dispatch the welcome message for ``account`` or raise on failure."""
        ...
