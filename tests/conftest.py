"""Shared test fixtures for lexbot-messenger."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from app.models.message import MessagingEvent


class RecordingTransport:
    """httpx.MockTransport wrapper that records every outbound request."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self._handler = handler
        self.transport = httpx.MockTransport(self._record)

    def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)

    @property
    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    """Build a RecordingTransport returning a fixed JSON body (or a custom handler)."""

    def _create(
        body: Any = None,
        status_code: int = 200,
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> RecordingTransport:
        if handler is None:
            def handler(request: httpx.Request) -> httpx.Response:
                return httpx.Response(status_code, json=body if body is not None else {})
        return RecordingTransport(handler)

    return _create


# --- Factory functions for test data ---

SENDER_ID = "1234567890"


def make_event_dict(sender_id: str = SENDER_ID, **payloads: Any) -> dict[str, Any]:
    event: dict[str, Any] = {
        "sender": {"id": sender_id},
        "recipient": {"id": "PAGE_ID"},
        "timestamp": 1700000000000,
    }
    event.update(payloads)
    return event


def make_event(sender_id: str = SENDER_ID, **payloads: Any) -> MessagingEvent:
    return MessagingEvent.model_validate(make_event_dict(sender_id, **payloads))


def make_text_event(text: str, sender_id: str = SENDER_ID) -> MessagingEvent:
    return make_event(sender_id, message={"mid": "m_1", "text": text})


def make_webhook_body(*events: dict[str, Any], object_type: str = "page") -> dict[str, Any]:
    return {
        "object": object_type,
        "entry": [{"id": "PAGE_ID", "time": 1700000000000, "messaging": list(events)}],
    }
