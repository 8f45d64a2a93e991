"""Pydantic models for API payloads and derived dashboard rows.

`SalaryRecord` validates what the salary API returns; the remaining models
describe the aggregation outputs consumed by the chart, tables and tests.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Sender = Literal["user", "ai"]


class SalaryRecord(BaseModel):
    """Schema for one salary observation as returned by the API.

    Attributes:
        work_year: Year the salary was paid.
        experience_level: Experience code (e.g. 'EN', 'MI', 'SE', 'EX').
        employment_type: Employment code (e.g. 'FT', 'PT', 'CT', 'FL').
        job_title: Job title exactly as reported (not normalized).
        salary: Gross salary in `salary_currency`.
        salary_currency: ISO currency code of `salary`.
        salary_in_usd: Salary converted to USD.
        employee_residence: Country code of the employee's residence.
        remote_ratio: Share of remote work, 0-100.
        company_location: Country code of the employer.
        company_size: Company size code ('S', 'M', 'L').
    """
    model_config = ConfigDict(extra="ignore", frozen=True, allow_inf_nan=False)
    work_year: int
    experience_level: str = ""
    employment_type: str = ""
    job_title: str
    salary: float = 0.0
    salary_currency: str = ""
    salary_in_usd: float
    employee_residence: str = ""
    remote_ratio: int = Field(0, ge=0, le=100)
    company_location: str = ""
    company_size: str = ""


class YearSummary(BaseModel):
    """Per-year aggregate over salary records."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
    work_year: int
    job_count: int = Field(..., ge=0, alias="jobCount")
    total_salary: float = Field(..., alias="totalSalary")
    avg_salary: int = Field(..., alias="avgSalary")


class JobTitleCount(BaseModel):
    """Number of records for one job title within a selected year."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
    job_title: str = Field(..., alias="jobTitle")
    job_count: int = Field(..., ge=1, alias="jobCount")


class DashboardTotals(BaseModel):
    """Headline numbers shown on the summary cards.

    `average_salary` is ``None`` when there is no yearly data to average.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    total_jobs: int = Field(..., ge=0)
    average_salary: int | None
    years_of_data: int = Field(..., ge=0)


class ChatMessage(BaseModel):
    """One entry of the chat log."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    text: str
    sender: Sender
