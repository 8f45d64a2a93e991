"""Ingestion helpers for the salary API.

Provides the HTTP client for the salary collection, per-year and chat
endpoints, and parsing of JSON bodies into validated `SalaryRecord` models.
"""
