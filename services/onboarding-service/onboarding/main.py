"""Composition root wiring the account service to its collaborators."""

from __future__ import annotations

from .config import Settings, get_settings
from .domain.contracts import AccountRepository, NotificationService
from .domain.service import AccountService
from .notifications import LoggingNotificationService
from .repository import InMemoryAccountRepository


def build_account_service(
    settings: Settings | None = None,
    *,
    repository: AccountRepository | None = None,
    notifications: NotificationService | None = None,
) -> AccountService:
    """Return an ``AccountService`` using the supplied collaborators or in-memory defaults."""
    settings = settings or get_settings()
    return AccountService(
        repository if repository is not None else InMemoryAccountRepository(),
        notifications if notifications is not None else LoggingNotificationService(settings),
        settings=settings,
    )
