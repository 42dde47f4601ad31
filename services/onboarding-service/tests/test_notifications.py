from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from onboarding.domain.account import Account
from onboarding.errors import NotificationError
from onboarding.notifications import LoggingNotificationService, WelcomeMessage


def test_send_welcome_records_validated_message(settings, caplog):
    notifier = LoggingNotificationService(settings)
    account = Account(
        holder_name="Ada Lovelace",
        email="ada@example.com",
        account_id="acct-1",
        branch_code="0420",
    )

    with caplog.at_level(logging.INFO, logger="onboarding.notifications"):
        notifier.send_welcome(account)

    assert len(notifier.outbox) == 1
    message = notifier.outbox[0]
    assert message.account_id == "acct-1"
    assert message.recipient == "ada@example.com"
    assert message.sender == "hello@bank.example.com"
    assert message.subject == "Welcome aboard"
    assert "Ada Lovelace" in message.body
    assert "0420" in message.body
    assert "welcome sent to ada@example.com" in caplog.text


def test_send_welcome_rejects_invalid_email(settings):
    notifier = LoggingNotificationService(settings)
    account = Account(holder_name="Bob", email="not-an-email", account_id="acct-2")

    with pytest.raises(NotificationError) as excinfo:
        notifier.send_welcome(account)

    assert isinstance(excinfo.value.__cause__, ValidationError)
    assert notifier.outbox == []


def test_send_welcome_requires_account_id(settings, account):
    notifier = LoggingNotificationService(settings)

    with pytest.raises(NotificationError):
        notifier.send_welcome(account)


def test_welcome_message_for_account_uses_settings(settings):
    account = Account(holder_name="Grace", email="grace@example.com", account_id="acct-3")

    message = WelcomeMessage.for_account(account, settings)

    assert message.sender == settings.welcome_sender
    assert message.subject == settings.welcome_subject
    assert message.model_dump()["recipient"] == "grace@example.com"
