from __future__ import annotations

from salary_dashboard import state as ds
from salary_dashboard.models import ChatMessage, SalaryRecord


def _rec(year: int, usd: float = 100_000, title: str = "Data Scientist") -> SalaryRecord:
    return SalaryRecord(work_year=year, job_title=title, salary_in_usd=usd)


def test_load_cycle_replaces_records() -> None:
    s = ds.load_started(ds.DashboardState())
    assert s.loading is True

    s = ds.load_succeeded(s, [_rec(2023), _rec(2024)])
    assert s.loading is False
    assert len(s.records) == 2

    s = ds.load_succeeded(s, [_rec(2022)])
    assert [r.work_year for r in s.records] == [2022]


def test_load_failure_leaves_empty_dataset() -> None:
    s = ds.load_succeeded(ds.DashboardState(), [_rec(2023)])
    s = ds.load_failed(ds.load_started(s), "connection refused")

    assert s.records == ()
    assert s.loading is False
    assert s.error == "connection refused"
    assert s.summaries == []
    assert s.totals.total_jobs == 0
    assert s.totals.average_salary is None


def test_derived_views() -> None:
    s = ds.load_succeeded(ds.DashboardState(), [_rec(2023, 100_000), _rec(2023, 120_000), _rec(2024, 150_000)])
    assert {x.work_year: x.avg_salary for x in s.summaries} == {2023: 110_000, 2024: 150_000}
    assert s.totals.total_jobs == 3


def test_drilldown_resolution_opens_dialog() -> None:
    s, token = ds.drilldown_requested(ds.DashboardState(), 2024)
    assert s.pending_year == 2024

    s = ds.drilldown_resolved(s, token, 2024, [_rec(2024, title="ML Engineer")] * 2)
    assert s.dialog_open is True
    assert s.selected_year == 2024
    assert s.pending_year is None
    assert [(c.job_title, c.job_count) for c in s.job_titles] == [("ML Engineer", 2)]

    assert ds.dialog_closed(s).dialog_open is False


def test_stale_drilldown_response_is_discarded() -> None:
    s, first = ds.drilldown_requested(ds.DashboardState(), 2023)
    s, second = ds.drilldown_requested(s, 2024)

    s = ds.drilldown_resolved(s, second, 2024, [_rec(2024)])
    after_stale = ds.drilldown_resolved(s, first, 2023, [_rec(2023)] * 5)

    assert after_stale is s
    assert after_stale.selected_year == 2024
    assert len(after_stale.year_records) == 1


def test_failed_drilldown_keeps_previous_view() -> None:
    s, token = ds.drilldown_requested(ds.DashboardState(), 2023)
    s = ds.drilldown_resolved(s, token, 2023, [_rec(2023)])
    s, token = ds.drilldown_requested(s, 2024)

    s = ds.drilldown_failed(s, token)
    assert s.pending_year is None
    assert s.selected_year == 2023


def test_stale_drilldown_failure_keeps_newer_request_pending() -> None:
    s, first = ds.drilldown_requested(ds.DashboardState(), 2023)
    s, second = ds.drilldown_requested(s, 2024)

    after = ds.drilldown_failed(s, first)
    assert after is s
    assert after.pending_year == 2024
    assert after.request_seq == second


def test_transitions_do_not_mutate() -> None:
    base = ds.DashboardState()
    ds.load_succeeded(base, [_rec(2023)])
    ds.chat_updated(base, [ChatMessage(text="hi", sender="user")])
    assert base == ds.DashboardState()
