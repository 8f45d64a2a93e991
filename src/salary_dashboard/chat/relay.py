"""Single round-trip chat relay.

`send_chat_message` appends the user's question to the log, asks the
assistant through a transport callable and appends its reply, or a fixed
fallback reply when the request fails.
"""
from __future__ import annotations

import logging
from typing import Callable, Sequence

import requests  # type: ignore[import-untyped]

from salary_dashboard.ingest.parse import SalaryApiError
from salary_dashboard.models import ChatMessage

log = logging.getLogger(__name__)

FALLBACK_REPLY = "Sorry, I couldn't process your request. Please try again."

Transport = Callable[[str], str]


def send_chat_message(
    messages: Sequence[ChatMessage],
    message: str,
    transport: Transport,
) -> tuple[ChatMessage, ...]:
    """Relay `message` and return the extended chat log.

    Args:
        messages: Current log, oldest first. Not modified.
        message: Text typed by the user.
        transport: Callable sending the message and returning the reply text,
            usually `SalaryApiClient.ask`. Failures must surface as
            `requests.RequestException` or `SalaryApiError`; anything else
            propagates.

    Returns:
        The log unchanged when `message` is blank; otherwise the log plus a
        ``user`` entry and one ``ai`` entry (reply or `FALLBACK_REPLY`).
    """
    if not message or not message.strip():
        return tuple(messages)

    log_out = [*messages, ChatMessage(text=message, sender="user")]
    try:
        reply = transport(message)
    except (requests.RequestException, SalaryApiError) as exc:
        log.warning("Chat request failed: %s", exc)
        reply = FALLBACK_REPLY

    log_out.append(ChatMessage(text=reply, sender="ai"))
    return tuple(log_out)
