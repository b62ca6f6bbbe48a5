"""Models shared by every estimator variant."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class InputModel(BaseModel):
    """Base for estimator-state records.

    Callers must hand the pipeline finite numbers; NaN and infinity are
    rejected at construction time rather than propagated through the math.
    """

    model_config = ConfigDict(allow_inf_nan=False)


class ProjectInfo(InputModel):
    """Descriptive project metadata carried alongside the estimate."""

    project_name: str = ""
    project_location: str = ""
    project_type: str = ""
    client_name: str | None = None


class SiteCalendar(InputModel):
    """Leave and holiday calendar used to size relief staff.

    ``coverage_days_required`` is how many days per year the site must be
    staffed; the remaining fields describe what a single employee is away.
    """

    coverage_days_required: float = Field(default=365.0, ge=0)
    annual_leave_days: float = Field(default=30.0, ge=0)
    sick_leave_days: float = Field(default=10.0, ge=0)
    public_holiday_days: float = Field(default=10.0, ge=0)
    weekly_off_days: float = Field(default=52.0, ge=0)
    shift_length_hours: float = Field(default=12.0, ge=0)
    break_minutes: float = Field(default=0.0, ge=0)


class MarkupConfig(InputModel):
    """Overhead and profit layers for one cost path.

    Percentages are not bounded; negative or very large values flow
    through the arithmetic as entered.
    """

    overheads_percent: float = 10.0
    profit_markup_percent: float = 15.0
