"""Job-title drill-down for a single work year."""
from __future__ import annotations

from typing import Iterable, Sequence

from salary_dashboard.models import JobTitleCount, SalaryRecord

DIALOG_PAGE_SIZE = 10


def job_title_counts(records: Iterable[SalaryRecord]) -> list[JobTitleCount]:
    """Count records per job title, most frequent first.

    `records` are expected to be filtered to one year already (the API does
    that). Titles are compared verbatim, so case or whitespace variants are
    separate rows. Ties keep first-seen order.
    """
    counts: dict[str, int] = {}
    for rec in records:
        counts[rec.job_title] = counts.get(rec.job_title, 0) + 1

    # sorted() is stable and dicts keep insertion order
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [JobTitleCount(job_title=title, job_count=n) for title, n in ranked]


def top_job_titles(counts: Sequence[JobTitleCount], limit: int = DIALOG_PAGE_SIZE) -> list[JobTitleCount]:
    """Return the first `limit` ranked titles."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    return list(counts[:limit])
