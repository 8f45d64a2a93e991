"""Yearly aggregation of salary records.

Functions in this module build the per-year summary rows shown in the trend
chart and the yearly table, plus the headline totals on the summary cards.

Expectations:
- Input: an iterable of `SalaryRecord` (the full dataset from the API).
- Outputs: `YearSummary` rows in first-seen year order; callers sort.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from salary_dashboard.models import DashboardTotals, SalaryRecord, YearSummary


@dataclass
class YearAccumulator:
    """Running totals for one work year during a single aggregation pass."""
    job_count: int = 0
    total_salary: float = 0.0

    def add(self, salary_in_usd: float) -> None:
        self.job_count += 1
        self.total_salary += salary_in_usd


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going toward +infinity.

    ``round()`` uses banker's rounding (``round(2.5) == 2``); dashboard
    averages need ``2.5 -> 3`` and ``-2.5 -> -2``.
    """
    return int(math.floor(value + 0.5))


def aggregate_by_year(records: Iterable[SalaryRecord]) -> list[YearSummary]:
    """Return one `YearSummary` per distinct `work_year` in `records`.

    Args:
        records: Salary records; consumed in a single pass.

    Returns:
        Summaries with `job_count`, `total_salary` (sum of `salary_in_usd`)
        and `avg_salary` (`round_half_up(total_salary / job_count)`).
        Empty input gives an empty list.
    """
    buckets: dict[int, YearAccumulator] = {}
    for rec in records:
        acc = buckets.get(rec.work_year)
        if acc is None:
            acc = buckets[rec.work_year] = YearAccumulator()
        acc.add(rec.salary_in_usd)

    # every bucket holds at least one record, so job_count > 0
    return [
        YearSummary(
            work_year=year,
            job_count=acc.job_count,
            total_salary=acc.total_salary,
            avg_salary=round_half_up(acc.total_salary / acc.job_count),
        )
        for year, acc in buckets.items()
    ]


def dashboard_totals(summaries: Sequence[YearSummary]) -> DashboardTotals:
    """Compute the summary-card figures from yearly summaries.

    `average_salary` is the rounded mean of the yearly averages (each year
    weighs the same regardless of its job count). With no summaries it is
    ``None`` rather than a division by zero.
    """
    if not summaries:
        return DashboardTotals(total_jobs=0, average_salary=None, years_of_data=0)

    total_jobs = sum(s.job_count for s in summaries)
    mean_of_averages = sum(s.avg_salary for s in summaries) / len(summaries)
    return DashboardTotals(
        total_jobs=total_jobs,
        average_salary=round_half_up(mean_of_averages),
        years_of_data=len(summaries),
    )


def sort_summaries(
    summaries: Iterable[YearSummary],
    by: str = "work_year",
    descending: bool = False,
) -> list[YearSummary]:
    """Return summaries sorted by one of the table columns.

    Args:
        summaries: Rows to sort.
        by: ``work_year``, ``jobCount`` or ``avgSalary`` (snake_case field
            names are accepted too).
        descending: Reverse the order.

    Raises:
        ValueError: for an unknown column.
    """
    fields = {
        "work_year": "work_year",
        "jobCount": "job_count",
        "job_count": "job_count",
        "avgSalary": "avg_salary",
        "avg_salary": "avg_salary",
    }
    if by not in fields:
        raise ValueError(f"Cannot sort summaries by {by!r}")
    attr = fields[by]
    return sorted(summaries, key=lambda s: getattr(s, attr), reverse=descending)
