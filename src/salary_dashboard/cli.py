"""Command-line interface for the salary dashboard data.

Provides subcommands: `summary`, `drilldown`, `chat`, and `export`. Each
command is implemented as a `cmd_*` function that accepts an argparse
namespace and returns a process exit code.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import requests  # type: ignore[import-untyped]
from dotenv import load_dotenv

from salary_dashboard.config import get_settings
from salary_dashboard.logging_config import configure_logging
from salary_dashboard.ingest.client import SalaryApiClient, SalaryApiError

from salary_dashboard.aggregate.summaries import aggregate_by_year, dashboard_totals, sort_summaries
from salary_dashboard.aggregate.drilldown import job_title_counts, top_job_titles
from salary_dashboard.aggregate.frames import format_usd, job_titles_to_frame, summaries_to_frame
from salary_dashboard.chat.relay import send_chat_message

log = logging.getLogger(__name__)

SORT_COLUMNS = ["work_year", "jobCount", "avgSalary"]


def _non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _client() -> SalaryApiClient:
    return SalaryApiClient.from_settings(get_settings())


# --------------------------------------------------
# SUMMARY
# --------------------------------------------------
def cmd_summary(args: argparse.Namespace) -> int:
    """Print the yearly summary table followed by the headline totals.

    Args:
        args: argparse namespace with `sort_by` and `descending`.
    """
    try:
        records = _client().fetch_salaries()
    except (requests.RequestException, SalaryApiError):
        log.exception("Error fetching salary data")
        return 1

    summaries = sort_summaries(aggregate_by_year(records), args.sort_by, args.descending)
    totals = dashboard_totals(summaries)

    pdf = summaries_to_frame(summaries, by_year=False)
    pdf["avgSalary"] = pdf["avgSalary"].map(format_usd)

    print(pdf[["work_year", "jobCount", "avgSalary"]].to_string(index=False))
    print()
    print(f"Total jobs:     {totals.total_jobs:,}")
    print(f"Average salary: {format_usd(totals.average_salary)}")
    print(f"Years of data:  {totals.years_of_data}")
    return 0


# --------------------------------------------------
# DRILLDOWN
# --------------------------------------------------
def cmd_drilldown(args: argparse.Namespace) -> int:
    """Print the ranked job titles for one year.

    Args:
        args: argparse namespace with `year` and `limit`.
    """
    try:
        records = _client().fetch_year(args.year)
    except (requests.RequestException, SalaryApiError):
        log.exception("Error fetching salary data for year=%d", args.year)
        return 1

    counts = top_job_titles(job_title_counts(records), args.limit)
    if not counts:
        print(f"No job titles found for {args.year}.")
        return 0

    print(f"Job Titles for {args.year}")
    print(job_titles_to_frame(counts).to_string(index=False))
    return 0


# --------------------------------------------------
# CHAT
# --------------------------------------------------
def cmd_chat(args: argparse.Namespace) -> int:
    """Send one question to the assistant and print its reply."""
    messages = send_chat_message((), args.message, _client().ask)
    if not messages:
        log.warning("Empty chat message; nothing sent.")
        return 2

    print(messages[-1].text)
    return 0


# --------------------------------------------------
# EXPORT
# --------------------------------------------------
def cmd_export(args: argparse.Namespace) -> int:
    """Write the yearly summaries to a CSV file.

    Args:
        args: argparse namespace with `out`.
    """
    try:
        records = _client().fetch_salaries()
    except (requests.RequestException, SalaryApiError):
        log.exception("Error fetching salary data")
        return 1

    out: Path = args.out
    out.parent.mkdir(parents=True, exist_ok=True)
    pdf = summaries_to_frame(aggregate_by_year(records))
    pdf.to_csv(out, index=False)
    log.info("Wrote %d yearly rows to %s", len(pdf), out)
    return 0


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    The returned parser has subcommands `summary`, `drilldown`, `chat`, and
    `export` with commonly used options configured.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="salary-dashboard")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_summary = sub.add_parser("summary")
    p_summary.add_argument("--sort-by", choices=SORT_COLUMNS, default="work_year")
    p_summary.add_argument("--descending", action="store_true")
    p_summary.set_defaults(func=cmd_summary)

    p_drill = sub.add_parser("drilldown")
    p_drill.add_argument("--year", type=int, required=True)
    p_drill.add_argument("--limit", type=_non_negative_int, default=10)
    p_drill.set_defaults(func=cmd_drilldown)

    p_chat = sub.add_parser("chat")
    p_chat.add_argument("message")
    p_chat.set_defaults(func=cmd_chat)

    p_export = sub.add_parser("export")
    p_export.add_argument("--out", type=Path, default=Path("data/yearly_summaries.csv"))
    p_export.set_defaults(func=cmd_export)

    return p


def main(argv: list[str] | None = None) -> int:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(Path("logs/dashboard.log"), get_settings().log_level)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
