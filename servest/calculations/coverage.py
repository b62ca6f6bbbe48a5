"""Coverage adjuster — adds relief staff so leave never leaves a post empty."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from servest.models.common import SiteCalendar

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365


@dataclass(frozen=True)
class CoverageAdjustment:
    """Active headcount grossed up by the coverage factor."""

    active: float
    coverage_factor: float
    relief_count: float
    total_with_relief: float


def effective_working_days(calendar: SiteCalendar) -> float:
    """Days per year one employee is actually on site, never below zero."""
    days = (
        DAYS_PER_YEAR
        - calendar.annual_leave_days
        - calendar.sick_leave_days
        - calendar.public_holiday_days
        - calendar.weekly_off_days
    )
    return max(0.0, days)


def effective_hours_per_shift(calendar: SiteCalendar) -> float:
    """Shift length less the unpaid break, never below zero."""
    return max(0.0, calendar.shift_length_hours - calendar.break_minutes / 60)


def coverage_factor(coverage_days_required: float, working_days: float) -> float:
    """Ratio of required coverage days to available working days.

    Falls back to 1 when no working days remain.
    """
    if working_days <= 0:
        logger.warning("No effective working days; using coverage factor 1")
        return 1.0
    return coverage_days_required / working_days


def apply_coverage_factor(active_count: float, factor: float) -> CoverageAdjustment:
    """Gross up ``active_count``; relief is fractional and never negative."""
    relief = max(0.0, active_count * factor - active_count)
    return CoverageAdjustment(
        active=active_count,
        coverage_factor=factor,
        relief_count=relief,
        total_with_relief=active_count + relief,
    )


def adjust_for_coverage(active_count: float, calendar: SiteCalendar) -> CoverageAdjustment:
    """Size relief staff for ``active_count`` against the site calendar."""
    factor = coverage_factor(
        calendar.coverage_days_required, effective_working_days(calendar)
    )
    return apply_coverage_factor(active_count, factor)
