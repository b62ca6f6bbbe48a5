"""Tests for the coverage adjuster."""

from __future__ import annotations

import logging

import pytest

from servest.calculations.coverage import (
    adjust_for_coverage,
    apply_coverage_factor,
    coverage_factor,
    effective_hours_per_shift,
    effective_working_days,
)
from servest.models.common import SiteCalendar


class TestWorkingDays:
    def test_default_calendar(self) -> None:
        # 365 - 30 - 10 - 10 - 52
        assert effective_working_days(SiteCalendar()) == 263

    def test_never_negative(self) -> None:
        calendar = SiteCalendar(annual_leave_days=200, weekly_off_days=200)
        assert effective_working_days(calendar) == 0.0

    def test_effective_hours_subtract_break(self) -> None:
        assert effective_hours_per_shift(
            SiteCalendar(shift_length_hours=12, break_minutes=60)
        ) == pytest.approx(11.0)

    def test_effective_hours_never_negative(self) -> None:
        assert effective_hours_per_shift(
            SiteCalendar(shift_length_hours=0.5, break_minutes=60)
        ) == 0.0


class TestCoverageFactor:
    def test_ratio(self) -> None:
        assert coverage_factor(365, 263) == pytest.approx(365 / 263)

    def test_zero_days_falls_back_to_one(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert coverage_factor(365, 0) == 1.0
        assert "working days" in caplog.text

    def test_identity_when_required_equals_available(self) -> None:
        calendar = SiteCalendar(coverage_days_required=263)
        adjusted = adjust_for_coverage(5.0, calendar)
        assert adjusted.coverage_factor == pytest.approx(1.0)
        assert adjusted.relief_count == pytest.approx(0.0)
        assert adjusted.total_with_relief == pytest.approx(5.0)

    def test_relief_is_fractional(self) -> None:
        adjusted = apply_coverage_factor(3.0, 1.5)
        assert adjusted.relief_count == pytest.approx(1.5)
        assert adjusted.total_with_relief == pytest.approx(4.5)

    def test_relief_never_negative(self) -> None:
        adjusted = apply_coverage_factor(4.0, 0.5)
        assert adjusted.relief_count == 0.0
        assert adjusted.total_with_relief == 4.0
