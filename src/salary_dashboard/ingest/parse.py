"""Parsing helpers for salary API response bodies.

`parse_salary_records` turns a decoded JSON array into validated
`SalaryRecord` models and `parse_chat_reply` extracts the assistant text from
a chat response object.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from salary_dashboard.models import SalaryRecord

log = logging.getLogger(__name__)


class SalaryApiError(RuntimeError):
    """Raised when the salary API returns a body of the wrong shape."""


def parse_salary_records(payload: Any) -> list[SalaryRecord]:
    """Validate a decoded JSON array of salary records.

    Args:
        payload: Decoded JSON body; expected to be a list of objects.

    Returns:
        List of `SalaryRecord` in response order.

    Raises:
        SalaryApiError: if the payload is not a list or any element fails
            validation.
    """
    if not isinstance(payload, list):
        raise SalaryApiError(
            f"Expected a JSON array of salary records, got {type(payload).__name__}"
        )

    records: list[SalaryRecord] = []
    for idx, item in enumerate(payload):
        try:
            records.append(SalaryRecord.model_validate(item))
        except ValidationError as exc:
            raise SalaryApiError(f"Invalid salary record at index {idx}: {exc}") from exc

    log.debug("Parsed %d salary records", len(records))
    return records


def parse_chat_reply(payload: Any) -> str:
    """Return the assistant text from a `{"response": str}` body.

    Raises:
        SalaryApiError: if `response` is missing or not a string.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("response"), str):
        raise SalaryApiError("Chat endpoint returned no 'response' text")
    return payload["response"]
