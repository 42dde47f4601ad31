"""Account service orchestrating enrichment, persistence, and the welcome notification."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import uuid

from .account import Account
from .contracts import AccountRepository, NotificationService
from ..config import Settings, get_settings
from ..errors import InvalidAccountError
from ..metrics import ACCOUNTS_OPENED, STEP_FAILURES

logger = logging.getLogger(__name__)


class AccountService:
    """Onboarding workflow over injected persistence and notification capabilities."""

    def __init__(
        self,
        repository: AccountRepository,
        notifications: NotificationService,
        *,
        settings: Settings | None = None,
    ) -> None:
        """Store the collaborators used by every onboarding run."""
        self._repository = repository
        self._notifications = notifications
        self._settings = settings or get_settings()

    def open_account(self, account: Account) -> Account:
        """Enrich, persist, and welcome a newly created account.

        The steps run strictly in that order. An exception raised by the
        repository or the notifier stops the flow and reaches the caller
        unchanged, so no welcome is sent for an account that was not stored.

        Parameters
        ----------
        account:
            Account built by the caller. Internal details are filled in place.

        Returns
        -------
        Account
            The same object that was passed in, now enriched and persisted.

        Raises
        ------
        InvalidAccountError
            When ``account`` is ``None`` or not an :class:`Account`.
        """
        if account is None:
            raise InvalidAccountError("account is required")
        if not isinstance(account, Account):
            raise InvalidAccountError(
                f"expected Account, got {type(account).__name__}"
            )

        self._fill_internal_details(account)
        logger.debug("account %s enriched", account.account_id)

        try:
            self._repository.create(account)
        except Exception:
            STEP_FAILURES.labels(step="create").inc()
            logger.warning("create failed for account %s", account.account_id)
            raise
        logger.debug("account %s persisted", account.account_id)

        try:
            self._notifications.send_welcome(account)
        except Exception:
            STEP_FAILURES.labels(step="send_welcome").inc()
            logger.warning("send_welcome failed for account %s", account.account_id)
            raise

        ACCOUNTS_OPENED.inc()
        logger.info(
            "account %s opened at branch %s", account.account_id, account.branch_code
        )
        return account

    def _fill_internal_details(self, account: Account) -> None:
        # Caller-supplied identifiers are kept; opened_at always reflects this run.
        if account.account_id is None:
            account.account_id = str(uuid.uuid4())
        if account.branch_code is None:
            account.branch_code = self._settings.default_branch_code
        account.opened_at = datetime.now(timezone.utc)
