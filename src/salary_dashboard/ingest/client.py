"""HTTP client for the salary API.

`SalaryApiClient` wraps the three endpoints the dashboard consumes:

- ``GET {api_url}`` for the full dataset
- ``GET {api_url}/{work_year}`` for one year's records
- ``POST {api_url}/chat`` for assistant replies
"""

from __future__ import annotations

import logging
from typing import Any

import requests  # type: ignore[import-untyped]

from salary_dashboard.config import Settings
from salary_dashboard.ingest.parse import SalaryApiError, parse_chat_reply, parse_salary_records
from salary_dashboard.models import SalaryRecord

log = logging.getLogger(__name__)

__all__ = ["SalaryApiClient", "SalaryApiError"]


class SalaryApiClient:
    """Thin wrapper over a `requests.Session` bound to one API base URL.

    Every call is a single round trip: no retries, no caching.
    Transport failures and non-2xx statuses propagate as
    `requests.RequestException`; malformed bodies raise `SalaryApiError`.
    """

    def __init__(
        self,
        api_url: str,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "SalaryApiClient":
        return cls(settings.api_url, timeout=settings.timeout)

    def _get_json(self, url: str) -> Any:
        log.info("Fetching %s", url)
        r = self.session.get(url, headers={"Accept": "application/json"}, timeout=self.timeout)
        r.raise_for_status()
        try:
            return r.json()
        except ValueError as exc:
            raise SalaryApiError(f"Response from {url} is not valid JSON") from exc

    def fetch_salaries(self) -> list[SalaryRecord]:
        """Return the full salary dataset."""
        records = parse_salary_records(self._get_json(self.api_url))
        log.info("Fetched %d salary records", len(records))
        return records

    def fetch_year(self, work_year: int) -> list[SalaryRecord]:
        """Return the records the API holds for `work_year`.

        Filtering is done server-side; the result is not re-filtered here.
        """
        records = parse_salary_records(self._get_json(f"{self.api_url}/{int(work_year)}"))
        log.info("Fetched %d salary records for year=%d", len(records), work_year)
        return records

    def ask(self, message: str) -> str:
        """Send `message` to the chat endpoint and return the assistant text."""
        url = f"{self.api_url}/chat"
        log.info("Posting chat message (%d chars)", len(message))
        r = self.session.post(url, json={"message": message}, timeout=self.timeout)
        r.raise_for_status()
        try:
            payload = r.json()
        except ValueError as exc:
            raise SalaryApiError("Chat response is not valid JSON") from exc
        return parse_chat_reply(payload)
