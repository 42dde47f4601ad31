from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class Account:
    """Bank account being onboarded.

    The caller supplies the holder details; ``account_id``, ``branch_code`` and
    ``opened_at`` are internal details filled in place during onboarding.
    """

    holder_name: str
    email: str
    account_id: str | None = None
    branch_code: str | None = None
    opened_at: datetime | None = None

    @property
    def is_enriched(self) -> bool:
        """Return ``True`` once every internal detail has been filled."""
        return (
            self.account_id is not None
            and self.branch_code is not None
            and self.opened_at is not None
        )
