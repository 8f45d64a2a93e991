"""salary_dashboard package.

Contains modules for fetching salary records from the salary API, validating
them, aggregating them by work year, resolving per-year job-title drill-downs,
relaying chat questions to the assistant endpoint, and utilities for serving a
Streamlit dashboard.

Architecture:
- HTTP API → validated records → yearly summaries / drill-downs
- Pydantic models validate API payloads and derived rows
- pandas frames feed the Altair chart, tables and CSV export
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
