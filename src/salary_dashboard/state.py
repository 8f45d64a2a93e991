"""Immutable dashboard state and the transitions that update it.

The Streamlit app keeps a single `DashboardState` in session state and
replaces it with the result of one transition per user event (initial load,
year selection, dialog close, chat send). Transitions never mutate; they
return a new state via `dataclasses.replace`.

Drill-down requests are tagged with an increasing token. A response is only
applied when its token is the latest one issued, so a slow earlier response
cannot overwrite a newer selection.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from salary_dashboard.aggregate.drilldown import job_title_counts
from salary_dashboard.aggregate.summaries import aggregate_by_year, dashboard_totals
from salary_dashboard.models import (
    ChatMessage,
    DashboardTotals,
    JobTitleCount,
    SalaryRecord,
    YearSummary,
)


@dataclass(frozen=True)
class DashboardState:
    """Everything the dashboard renders.

    Attributes:
        records: Full dataset from the last successful load.
        loading: True while the initial load is outstanding.
        error: Message of the last failed load, if any.
        selected_year: Year whose drill-down is displayed.
        year_records: Records backing the displayed drill-down.
        dialog_open: Whether the drill-down dialog is shown.
        pending_year: Year of the outstanding drill-down request, if any.
        request_seq: Token of the most recently issued drill-down request.
        messages: Chat log, oldest first.
    """
    records: tuple[SalaryRecord, ...] = ()
    loading: bool = False
    error: str | None = None
    selected_year: int | None = None
    year_records: tuple[SalaryRecord, ...] = ()
    dialog_open: bool = False
    pending_year: int | None = None
    request_seq: int = 0
    messages: tuple[ChatMessage, ...] = ()

    @property
    def summaries(self) -> list[YearSummary]:
        return aggregate_by_year(self.records)

    @property
    def totals(self) -> DashboardTotals:
        return dashboard_totals(self.summaries)

    @property
    def job_titles(self) -> list[JobTitleCount]:
        return job_title_counts(self.year_records)


def load_started(state: DashboardState) -> DashboardState:
    return replace(state, loading=True, error=None)


def load_succeeded(state: DashboardState, records: Sequence[SalaryRecord]) -> DashboardState:
    """Replace the dataset wholesale with `records`."""
    return replace(state, records=tuple(records), loading=False, error=None)


def load_failed(state: DashboardState, error: str) -> DashboardState:
    """Clear the dataset after a failed load; the dashboard shows empty figures."""
    return replace(state, records=(), loading=False, error=error)


def drilldown_requested(state: DashboardState, year: int) -> tuple[DashboardState, int]:
    """Register a drill-down request for `year` and return its token."""
    token = state.request_seq + 1
    return replace(state, pending_year=year, request_seq=token), token


def drilldown_resolved(
    state: DashboardState,
    token: int,
    year: int,
    records: Sequence[SalaryRecord],
) -> DashboardState:
    """Show the drill-down for `year` unless a newer request superseded it."""
    if token != state.request_seq:
        return state
    return replace(
        state,
        selected_year=year,
        year_records=tuple(records),
        dialog_open=True,
        pending_year=None,
    )


def drilldown_failed(state: DashboardState, token: int) -> DashboardState:
    """Drop the pending marker of a failed request; the previous view stays."""
    if token != state.request_seq:
        return state
    return replace(state, pending_year=None)


def dialog_closed(state: DashboardState) -> DashboardState:
    return replace(state, dialog_open=False)


def chat_updated(state: DashboardState, messages: Sequence[ChatMessage]) -> DashboardState:
    return replace(state, messages=tuple(messages))
