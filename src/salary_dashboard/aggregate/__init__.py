"""Aggregation helpers.

This package contains routines that convert validated salary records into
the small derived datasets the dashboard displays: one summary row per work
year, headline totals, ranked job titles for a drill-down year, and pandas
frames shaped for the chart, tables and CSV export.
"""
