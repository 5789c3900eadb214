"""Tests for push notifications."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.models.git import GitPushPayload
from app.services.git_notifier import GitPushNotifier, settings
from app.services.messenger import DeliveryResult, MessengerClient

PUSH = {
    "repository": {"name": "lexbot", "url": "https://git.example.com/acme/lexbot"},
    "pusher": {"name": "alex"},
    "ref": "refs/heads/main",
}


class TestGitPushNotifier:

    def test_build_message(self) -> None:
        message = GitPushNotifier.build_message(GitPushPayload.model_validate(PUSH))

        assert message == {
            "attachment": {
                "type": "template",
                "payload": {
                    "template_type": "generic",
                    "elements": [
                        {
                            "title": "alex has pushed to repo: lexbot",
                            "buttons": [
                                {
                                    "type": "web_url",
                                    "url": "https://git.example.com/acme/lexbot",
                                    "title": "View repo",
                                }
                            ],
                        }
                    ],
                },
            }
        }

    def test_missing_fields_become_empty_strings(self) -> None:
        message = GitPushNotifier.build_message(GitPushPayload.model_validate({}))
        element = message["attachment"]["payload"]["elements"][0]
        assert element["title"] == " has pushed to repo: "
        assert element["buttons"][0]["url"] == ""

    @pytest.mark.asyncio
    async def test_notify_sends_to_configured_recipient(self) -> None:
        messenger = MagicMock(spec=MessengerClient)
        messenger.send_message = AsyncMock(return_value=DeliveryResult(status_code=200))
        notifier = GitPushNotifier(messenger=messenger, recipient_id="999")

        await notifier.notify(GitPushPayload.model_validate(PUSH))

        recipient, message = messenger.send_message.await_args.args
        assert recipient == "999"
        assert message["attachment"]["payload"]["elements"][0]["title"].startswith("alex")

    def test_default_recipient_from_settings(self) -> None:
        notifier = GitPushNotifier(messenger=MagicMock(spec=MessengerClient))
        assert notifier.recipient_id == settings.GIT_NOTIFY_RECIPIENT_ID
