"""Account onboarding: enrich, persist, and welcome new accounts."""

from .domain.account import Account
from .domain.contracts import AccountRepository, NotificationService
from .domain.service import AccountService
from .main import build_account_service

__all__ = [
    "Account",
    "AccountRepository",
    "AccountService",
    "NotificationService",
    "build_account_service",
]
