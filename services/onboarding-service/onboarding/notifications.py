"""Welcome message schema and a notifier that logs instead of sending."""

from __future__ import annotations

import logging

from pydantic import BaseModel, EmailStr, ValidationError

from .config import Settings, get_settings
from .domain.account import Account
from .errors import NotificationError

logger = logging.getLogger(__name__)


class WelcomeMessage(BaseModel):
    """Validated welcome communication addressed to a new account holder."""

    account_id: str
    recipient: EmailStr
    sender: EmailStr
    subject: str
    body: str

    @classmethod
    def for_account(cls, account: Account, settings: Settings) -> "WelcomeMessage":
        """Build the welcome message for an onboarded account."""
        return cls(
            account_id=account.account_id,
            recipient=account.email,
            sender=settings.welcome_sender,
            subject=settings.welcome_subject,
            body=(
                f"Hello {account.holder_name}, your account {account.account_id} "
                f"at branch {account.branch_code} is ready."
            ),
        )


class LoggingNotificationService:
    """Notifier that renders welcome messages, logs them, and keeps an outbox."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self.outbox: list[WelcomeMessage] = []

    def send_welcome(self, account: Account) -> None:
        """Render and record the welcome message for ``account``."""
        if account.account_id is None:
            raise NotificationError("cannot welcome an account without an identifier")
        try:
            message = WelcomeMessage.for_account(account, self._settings)
        except ValidationError as exc:
            raise NotificationError(
                f"invalid welcome message for account {account.account_id}"
            ) from exc
        self.outbox.append(message)
        logger.info(
            "welcome sent to %s for account %s", message.recipient, message.account_id
        )
