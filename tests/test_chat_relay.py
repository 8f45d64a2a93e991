from __future__ import annotations

import requests

from salary_dashboard.chat.relay import FALLBACK_REPLY, send_chat_message
from salary_dashboard.ingest.parse import SalaryApiError
from salary_dashboard.models import ChatMessage


class _Transport:
    def __init__(self, reply: str = "", exc: Exception | None = None) -> None:
        self.reply = reply
        self.exc = exc
        self.calls: list[str] = []

    def __call__(self, message: str) -> str:
        self.calls.append(message)
        if self.exc is not None:
            raise self.exc
        return self.reply


def test_blank_message_is_a_noop() -> None:
    transport = _Transport("unused")
    history = (ChatMessage(text="hello", sender="user"),)

    for blank in ("", "   ", "\n\t"):
        assert send_chat_message(history, blank, transport) == history

    assert transport.calls == []


def test_successful_reply_appends_user_and_ai_entries() -> None:
    transport = _Transport("Average salary in 2024 was $150,000.")
    out = send_chat_message((), "What was the average in 2024?", transport)

    assert transport.calls == ["What was the average in 2024?"]
    assert [(m.sender, m.text) for m in out] == [
        ("user", "What was the average in 2024?"),
        ("ai", "Average salary in 2024 was $150,000."),
    ]


def test_transport_failure_appends_single_fallback() -> None:
    transport = _Transport(exc=requests.ConnectionError("refused"))
    history = (ChatMessage(text="earlier", sender="user"), ChatMessage(text="reply", sender="ai"))

    out = send_chat_message(history, "Hi", transport)

    assert out[:2] == history
    assert [(m.sender, m.text) for m in out[2:]] == [("user", "Hi"), ("ai", FALLBACK_REPLY)]


def test_malformed_reply_uses_fallback() -> None:
    out = send_chat_message((), "Hi", _Transport(exc=SalaryApiError("no response")))
    assert out[-1] == ChatMessage(text=FALLBACK_REPLY, sender="ai")


def test_input_log_is_not_modified() -> None:
    history = [ChatMessage(text="a", sender="user")]
    send_chat_message(history, "b", _Transport("c"))
    assert len(history) == 1
