"""pandas views of the aggregation outputs.

The dashboard chart, tables and the CSV export all work on DataFrames with
the column names the dashboard displays (`work_year`, `jobCount`,
`avgSalary`, `jobTitle`). Empty inputs give empty frames that still carry
those columns so downstream code can select them safely.
"""
from __future__ import annotations

from typing import Iterable

import pandas as pd

from salary_dashboard.models import JobTitleCount, SalaryRecord, YearSummary

SUMMARY_COLUMNS = ["work_year", "jobCount", "totalSalary", "avgSalary"]
JOB_TITLE_COLUMNS = ["jobTitle", "jobCount"]


def records_to_frame(records: Iterable[SalaryRecord]) -> pd.DataFrame:
    """Return raw records as a DataFrame with one column per field."""
    rows = [r.model_dump() for r in records]
    if not rows:
        return pd.DataFrame(columns=list(SalaryRecord.model_fields))
    return pd.DataFrame(rows)


def summaries_to_frame(summaries: Iterable[YearSummary], by_year: bool = True) -> pd.DataFrame:
    """Return yearly summaries as a DataFrame, sorted by `work_year` unless
    `by_year` is False (input order is kept then).

    Returns:
        pandas.DataFrame with columns `work_year`, `jobCount`, `totalSalary`,
        `avgSalary`.
    """
    rows = [s.model_dump(by_alias=True) for s in summaries]
    if not rows:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    pdf = pd.DataFrame(rows)[SUMMARY_COLUMNS]
    if not by_year:
        return pdf
    return pdf.sort_values("work_year").reset_index(drop=True)


def job_titles_to_frame(counts: Iterable[JobTitleCount]) -> pd.DataFrame:
    """Return ranked job titles as a DataFrame, preserving rank order."""
    rows = [c.model_dump(by_alias=True) for c in counts]
    if not rows:
        return pd.DataFrame(columns=JOB_TITLE_COLUMNS)
    return pd.DataFrame(rows)[JOB_TITLE_COLUMNS]


def format_usd(value: float | int | None) -> str:
    """Format a dollar amount with thousands separators, or ``N/A``."""
    if value is None or pd.isna(value):
        return "N/A"
    return f"${value:,.0f}"
