"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads environment variables (including a check that `SALARY_API_URL` is an
absolute http(s) URL).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_API_URL = "http://localhost:8000/api/salaries"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    """Container for dashboard configuration read from the environment.

    Attributes:
        api_url: Base URL of the salary collection, without trailing slash.
        timeout: Per-request timeout in seconds.
        log_level: Logging level name.
    """
    api_url: str
    timeout: float
    log_level: str


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `SALARY_API_URL` is not an http(s) URL or
            `SALARY_API_TIMEOUT` is not a positive number.
    """
    api_url = (os.getenv("SALARY_API_URL") or DEFAULT_API_URL).strip().rstrip("/")
    raw_timeout = os.getenv("SALARY_API_TIMEOUT", str(DEFAULT_TIMEOUT)).strip()
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    if not api_url.startswith(("http://", "https://")):
        raise RuntimeError(
            "SALARY_API_URL must be an absolute http(s) URL. Set it in .env "
            "(example: 'http://localhost:8000/api/salaries')."
        )

    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise RuntimeError(f"SALARY_API_TIMEOUT must be a number, got {raw_timeout!r}") from exc
    if timeout <= 0:
        raise RuntimeError("SALARY_API_TIMEOUT must be greater than zero")

    return Settings(
        api_url=api_url,
        timeout=timeout,
        log_level=log_level,
    )
