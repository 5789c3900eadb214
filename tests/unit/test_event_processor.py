"""Tests for the webhook event pipeline."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.models.message import WebhookPayload
from app.services.conversation import ComposedReply, EventProcessor, ReplyComposer
from app.services.messenger import DeliveryResult, MessengerClient
from tests.conftest import SENDER_ID, make_event, make_event_dict, make_text_event, make_webhook_body


def _make_processor(message: dict | None = None) -> tuple[EventProcessor, MagicMock, MagicMock]:
    composer = MagicMock(spec=ReplyComposer)
    composer.compose = AsyncMock(
        return_value=ComposedReply(strategy="echo", message=message or {"text": "hi"}),
    )
    messenger = MagicMock(spec=MessengerClient)
    messenger.send_message = AsyncMock(return_value=DeliveryResult(status_code=200, response="{}"))
    return EventProcessor(composer=composer, messenger=messenger), composer, messenger


class TestProcessEvent:

    @pytest.mark.asyncio
    async def test_message_is_composed_and_sent_to_sender(self) -> None:
        processor, composer, messenger = _make_processor({"text": "hello world"})

        result = await processor.process_event(make_text_event("hello world", sender_id="777"))

        composer.compose.assert_awaited_once_with("hello world")
        messenger.send_message.assert_awaited_once_with("777", {"text": "hello world"})
        assert result.delivered is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        ["optin", "delivery", "postback", "read", "account_linking"],
    )
    async def test_stub_events_take_no_action(self, payload: str) -> None:
        processor, composer, messenger = _make_processor()

        result = await processor.process_event(make_event(**{payload: {}}))

        assert result is None
        composer.compose.assert_not_called()
        messenger.send_message.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_event_takes_no_action(self) -> None:
        processor, composer, messenger = _make_processor()

        assert await processor.process_event(make_event()) is None
        messenger.send_message.assert_not_called()

    @pytest.mark.asyncio
    async def test_optin_with_message_is_not_answered(self) -> None:
        processor, _, messenger = _make_processor()

        await processor.process_event(make_event(optin={}, message={"text": "start"}))

        messenger.send_message.assert_not_called()

    @pytest.mark.asyncio
    async def test_message_without_text_echoes_empty_string(self) -> None:
        processor, composer, _ = _make_processor()

        await processor.process_event(make_event(message={"mid": "m_1", "attachments": []}))

        composer.compose.assert_awaited_once_with("")


class TestProcessPayload:

    @pytest.mark.asyncio
    async def test_walks_every_entry_and_event(self) -> None:
        processor, _, messenger = _make_processor()
        body = make_webhook_body(
            make_event_dict(message={"text": "a"}),
            make_event_dict(read={"watermark": 1}),
        )
        body["entry"].append({"messaging": [make_event_dict(sender_id="2", message={"text": "b"})]})

        summary = await processor.process_payload(WebhookPayload.model_validate(body))

        assert summary == {"events": 3, "replies": 2, "errors": 0}
        assert [c.args[0] for c in messenger.send_message.await_args_list] == [SENDER_ID, "2"]

    @pytest.mark.asyncio
    async def test_failing_event_does_not_stop_the_batch(self) -> None:
        processor, composer, messenger = _make_processor()
        composer.compose.side_effect = [RuntimeError("boom"), ComposedReply(strategy="echo", message={"text": "b"})]
        body = make_webhook_body(
            make_event_dict(message={"text": "a"}),
            make_event_dict(message={"text": "b"}),
        )

        summary = await processor.process_payload(WebhookPayload.model_validate(body))

        assert summary == {"events": 2, "replies": 1, "errors": 1}
        messenger.send_message.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_badly_typed_events_do_not_block_siblings(self) -> None:
        processor, composer, messenger = _make_processor()
        body = make_webhook_body(
            make_event_dict(message={"text": "hi"}),
            make_event_dict(sender_id="2", read=True),
            make_event_dict(sender_id="3", message={"text": None}),
        )

        summary = await processor.process_payload(WebhookPayload.model_validate(body))

        assert summary == {"events": 3, "replies": 2, "errors": 0}
        assert [c.args[0] for c in composer.compose.await_args_list] == ["hi", ""]
        assert [c.args[0] for c in messenger.send_message.await_args_list] == [SENDER_ID, "3"]

    @pytest.mark.asyncio
    async def test_empty_payload(self) -> None:
        processor, _, _ = _make_processor()
        summary = await processor.process_payload(WebhookPayload(object="page"))
        assert summary == {"events": 0, "replies": 0, "errors": 0}
