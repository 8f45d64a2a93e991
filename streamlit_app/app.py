from __future__ import annotations

import logging

import altair as alt
import requests
import streamlit as st

from salary_dashboard.config import get_settings
from salary_dashboard.logging_config import configure_logging
from salary_dashboard.ingest.client import SalaryApiClient, SalaryApiError
from salary_dashboard.aggregate.drilldown import DIALOG_PAGE_SIZE, top_job_titles
from salary_dashboard.aggregate.frames import format_usd, job_titles_to_frame, summaries_to_frame
from salary_dashboard.chat.relay import send_chat_message
from salary_dashboard import state as ds

log = logging.getLogger("salary_dashboard.app")

# =====================================================
# Page config
# =====================================================
st.set_page_config(page_title="ML Engineer and Data Science Salaries", layout="wide")
st.title("💼 ML Engineer and Data Science Salaries (2020-2024)")

# =====================================================
# API client (reads SALARY_API_URL from .env / environment)
# =====================================================
try:
    settings = get_settings()
except RuntimeError as exc:
    st.error(str(exc))
    st.stop()

configure_logging(None, settings.log_level)
client = SalaryApiClient.from_settings(settings)

# =====================================================
# State
# =====================================================
STATE_KEY = "dashboard_state"


def get_state() -> ds.DashboardState:
    return st.session_state.setdefault(STATE_KEY, ds.DashboardState())


def set_state(new_state: ds.DashboardState) -> None:
    st.session_state[STATE_KEY] = new_state


def load_dataset() -> None:
    """Fetch the full dataset once per session; failures leave it empty."""
    set_state(ds.load_started(get_state()))
    try:
        records = client.fetch_salaries()
    except (requests.RequestException, SalaryApiError) as exc:
        log.exception("Error fetching data")
        set_state(ds.load_failed(get_state(), str(exc)))
        return
    set_state(ds.load_succeeded(get_state(), records))


def open_year(year: int) -> None:
    """Fetch one year's records and open the drill-down dialog."""
    new_state, token = ds.drilldown_requested(get_state(), year)
    set_state(new_state)
    try:
        records = client.fetch_year(year)
    except (requests.RequestException, SalaryApiError):
        log.exception("Error fetching data for year=%d", year)
        set_state(ds.drilldown_failed(get_state(), token))
        st.toast(f"Could not load job titles for {year}.")
        return
    set_state(ds.drilldown_resolved(get_state(), token, year, records))


if "loaded" not in st.session_state:
    with st.spinner("Loading salary data..."):
        load_dataset()
    st.session_state["loaded"] = True

state = get_state()
summaries = state.summaries
totals = state.totals
df_years = summaries_to_frame(summaries)

# =====================================================
# SECTION 0 — SUMMARY CARDS
# =====================================================
c1, c2, c3 = st.columns(3)
with c1:
    st.metric("👥 Total Jobs", f"{totals.total_jobs:,}")
with c2:
    st.metric("💲 Average Salary", format_usd(totals.average_salary))
with c3:
    st.metric("📊 Years of Data", totals.years_of_data)

if state.error:
    st.caption("Salary data is currently unavailable.")

st.divider()

# =====================================================
# SECTION 1 — AVERAGE SALARY TREND
# =====================================================
st.header("📈 Average Salary Trend")

if df_years.empty:
    st.info("No salary data available.")
else:
    chart = (
        alt.Chart(df_years)
        .mark_line(point=True)
        .encode(
            x=alt.X("work_year:O", title="Year"),
            y=alt.Y("avgSalary:Q", title="Average Salary (USD)"),
            tooltip=[
                alt.Tooltip("work_year:O", title="Year"),
                alt.Tooltip("avgSalary:Q", title="Average Salary", format="$,"),
            ],
        )
        .properties(height=300)
    )
    st.altair_chart(chart, width="stretch")

st.divider()

# =====================================================
# SECTION 2 — YEARLY TABLE + DRILL-DOWN
# =====================================================
st.header("🗓️ Yearly Salary Data")
st.caption("Select a row to see detailed job titles for that year")

table = df_years[["work_year", "jobCount", "avgSalary"]]
event = st.dataframe(
    table,
    column_config={
        "work_year": st.column_config.NumberColumn("Year", format="%d"),
        "jobCount": st.column_config.NumberColumn("Number of Jobs"),
        "avgSalary": st.column_config.NumberColumn("Average Salary (USD)", format="dollar"),
    },
    hide_index=True,
    width="stretch",
    on_select="rerun",
    selection_mode="single-row",
    key="years_table",
)


@st.dialog("Job Titles", width="large")
def job_titles_dialog() -> None:
    current = get_state()
    st.subheader(f"Job Titles for {current.selected_year}")
    counts = current.job_titles
    if not counts:
        st.info("No job titles recorded for this year.")
    else:
        pages = max(1, -(-len(counts) // DIALOG_PAGE_SIZE))
        page = st.number_input("Page", min_value=1, max_value=pages, value=1, step=1)
        start = (int(page) - 1) * DIALOG_PAGE_SIZE
        st.dataframe(
            job_titles_to_frame(top_job_titles(counts[start:], DIALOG_PAGE_SIZE)),
            column_config={
                "jobTitle": "Job Title",
                "jobCount": st.column_config.NumberColumn("Number of Jobs"),
            },
            hide_index=True,
            width="stretch",
        )
    if st.button("Close"):
        set_state(ds.dialog_closed(get_state()))
        st.rerun()


# The selection survives reruns; only a changed selection opens the dialog.
selected_rows = list(event.selection.rows) if event is not None else []
if selected_rows != st.session_state.get("handled_rows", []):
    st.session_state["handled_rows"] = selected_rows
    if selected_rows:
        open_year(int(table.iloc[selected_rows[0]]["work_year"]))
        state = get_state()
        if state.dialog_open:
            job_titles_dialog()
            # dismissing with the close icon does not rerun the script
            set_state(ds.dialog_closed(get_state()))
            state = get_state()

st.divider()

# =====================================================
# SECTION 3 — ASSISTANT CHAT
# =====================================================
st.header("💬 Ask about the data")

for msg in state.messages:
    with st.chat_message("user" if msg.sender == "user" else "assistant"):
        st.write(msg.text)

prompt = st.chat_input("Ask a question about salaries...")
if prompt is not None:
    with st.spinner("Thinking..."):
        messages = send_chat_message(get_state().messages, prompt, client.ask)
    set_state(ds.chat_updated(get_state(), messages))
    st.rerun()

# =====================================================
# Footer
# =====================================================
st.caption("Salary API • pandas • Altair • Streamlit | Salary Dashboard")
