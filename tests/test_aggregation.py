from __future__ import annotations

import random

import pytest

from salary_dashboard.aggregate.summaries import (
    aggregate_by_year,
    dashboard_totals,
    round_half_up,
    sort_summaries,
)
from salary_dashboard.models import SalaryRecord


def _rec(year: int, usd: float, title: str = "Data Scientist") -> SalaryRecord:
    return SalaryRecord(work_year=year, job_title=title, salary_in_usd=usd)


def test_aggregate_by_year_scenario() -> None:
    records = [_rec(2023, 100_000), _rec(2023, 120_000), _rec(2024, 150_000)]
    by_year = {s.work_year: s for s in aggregate_by_year(records)}

    assert set(by_year) == {2023, 2024}
    assert by_year[2023].job_count == 2
    assert by_year[2023].total_salary == 220_000
    assert by_year[2023].avg_salary == 110_000
    assert by_year[2024].job_count == 1
    assert by_year[2024].avg_salary == 150_000


def test_aggregate_by_year_empty_input() -> None:
    assert aggregate_by_year([]) == []


def test_job_counts_partition_the_input() -> None:
    rng = random.Random(7)
    records = [_rec(rng.choice([2020, 2021, 2022, 2023, 2024]), rng.randint(20_000, 400_000)) for _ in range(250)]
    summaries = aggregate_by_year(records)

    assert sum(s.job_count for s in summaries) == len(records)
    years = [s.work_year for s in summaries]
    assert len(years) == len(set(years))
    assert set(years) == {r.work_year for r in records}
    for s in summaries:
        expected = [r.salary_in_usd for r in records if r.work_year == s.work_year]
        assert s.job_count == len(expected)
        assert s.avg_salary == round_half_up(sum(expected) / len(expected))


def test_aggregation_is_order_independent() -> None:
    rng = random.Random(11)
    records = [_rec(rng.choice([2022, 2023, 2024]), rng.randint(1, 10) * 1_000) for _ in range(60)]
    shuffled = list(records)
    rng.shuffle(shuffled)

    def key(rows):
        return sorted((s.work_year, s.job_count, s.avg_salary) for s in rows)

    assert key(aggregate_by_year(records)) == key(aggregate_by_year(shuffled))


def test_average_rounds_half_up() -> None:
    summaries = aggregate_by_year([_rec(2024, 1), _rec(2024, 2)])
    assert summaries[0].avg_salary == 2

    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.4999) == 2
    assert round_half_up(-2.5) == -2


def test_dashboard_totals_average_of_yearly_averages() -> None:
    records = [_rec(2023, 100_000), _rec(2023, 120_000), _rec(2024, 150_000)]
    totals = dashboard_totals(aggregate_by_year(records))

    assert totals.total_jobs == 3
    assert totals.average_salary == 130_000  # (110000 + 150000) / 2
    assert totals.years_of_data == 2


def test_dashboard_totals_empty_has_no_average() -> None:
    totals = dashboard_totals(aggregate_by_year([]))

    assert totals.total_jobs == 0
    assert totals.average_salary is None
    assert totals.years_of_data == 0


def test_sort_summaries_by_table_columns() -> None:
    records = [_rec(2022, 90_000), _rec(2024, 50_000), _rec(2024, 70_000), _rec(2023, 200_000)]
    summaries = aggregate_by_year(records)

    assert [s.work_year for s in sort_summaries(summaries)] == [2022, 2023, 2024]
    assert [s.work_year for s in sort_summaries(summaries, "avgSalary", descending=True)] == [2023, 2022, 2024]
    assert sort_summaries(summaries, "jobCount", descending=True)[0].work_year == 2024


def test_sort_summaries_rejects_unknown_column() -> None:
    with pytest.raises(ValueError):
        sort_summaries([], "salary")
