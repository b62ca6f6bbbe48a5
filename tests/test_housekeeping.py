"""End-to-end tests for the housekeeping estimator."""

from __future__ import annotations

import logging

import pytest

from servest.data.defaults import default_housekeeping_state, sample_housekeeping_state
from servest.engine import EstimationPipeline
from servest.factory import create_housekeeping_pipeline
from servest.models.enums import Bucket, EstimationMode, FleetVariance, Frequency
from servest.models.housekeeping import AreaTask, HousekeepingState, Machine, SiteConfig
from servest.models.results import HousekeepingResult


@pytest.fixture()
def pipeline() -> EstimationPipeline:
    return create_housekeeping_pipeline()


def _estimate(pipeline: EstimationPipeline, state: HousekeepingState) -> HousekeepingResult:
    result = pipeline.estimate(state)
    assert isinstance(result, HousekeepingResult)
    return result


def _with_areas(state: HousekeepingState, *areas: AreaTask) -> HousekeepingState:
    return state.model_copy(update={"areas": list(areas)})


# ---------------------------------------------------------------------------
# Worked example
# ---------------------------------------------------------------------------


class TestWorkedExample:
    """1,000 sqm daily general cleaning on the default calendar."""

    def test_headcount(self, pipeline: EstimationPipeline) -> None:
        result = _estimate(pipeline, sample_housekeeping_state())
        assert result.manual_general_count == pytest.approx(1000 / 300)
        assert result.effective_working_days == 263
        assert result.coverage_factor == pytest.approx(365 / 263)
        assert result.total_with_relief == pytest.approx(4.626, rel=1e-3)

    def test_final_price(self, pipeline: EstimationPipeline) -> None:
        result = _estimate(pipeline, sample_housekeeping_state())
        expected = (1000 / 300) * (365 / 263) * 1500 * 12 * 1.10 * 1.15
        assert result.final_price_annual == pytest.approx(expected)
        # Published worked figure, computed from a rounded headcount
        assert result.final_price_annual == pytest.approx(105_311.25, rel=1e-3)
        assert result.final_price_monthly == pytest.approx(expected / 12)

    def test_cost_breakdown(self, pipeline: EstimationPipeline) -> None:
        result = _estimate(pipeline, sample_housekeeping_state())
        assert result.cleaner_monthly_cost == 1500
        assert result.annual_machinery == 0.0
        assert result.annual_consumables_total == 0.0
        assert result.pricing.direct_cost == pytest.approx(result.annual_manpower)
        assert result.pricing.overheads == pytest.approx(result.annual_manpower * 0.10)

    def test_metadata(self, pipeline: EstimationPipeline) -> None:
        result = _estimate(pipeline, sample_housekeeping_state())
        assert result.project_name == "Sample Residential Tower"
        assert result.metadata.variant == "housekeeping"
        assert result.metadata.engine_version == "0.1.0"


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestProperties:
    def test_idempotent(self, pipeline: EstimationPipeline) -> None:
        state = sample_housekeeping_state()
        before = state.model_dump()
        first = pipeline.estimate(state)
        second = pipeline.estimate(state)
        assert first == second
        assert state.model_dump() == before

    def test_less_frequent_task_costs_less(self, pipeline: EstimationPipeline) -> None:
        base = default_housekeeping_state()
        prices = []
        for frequency in (Frequency.DAILY, Frequency.WEEKLY, Frequency.MONTHLY, Frequency.ANNUAL):
            state = _with_areas(
                base,
                AreaTask(
                    id="1", sqm=2000, frequency=frequency, bucket=Bucket.MANUAL_DETAIL
                ),
            )
            prices.append(_estimate(pipeline, state).final_price_annual)
        assert all(a > b for a, b in zip(prices, prices[1:]))

    def test_zero_workload(self, pipeline: EstimationPipeline) -> None:
        state = default_housekeeping_state().model_copy(update={"machines": []})
        result = _estimate(pipeline, state)
        assert result.total_active == 0.0
        assert result.relief_count == 0.0
        assert result.annual_manpower == 0.0
        assert result.final_price_annual == 0.0

    def test_no_tasks_prices_supervision_only(self, pipeline: EstimationPipeline) -> None:
        base = default_housekeeping_state()
        state = base.model_copy(
            update={
                "areas": [],
                "machines": [],
                "costs": base.costs.model_copy(update={"supervisor_count": 2}),
            }
        )
        result = _estimate(pipeline, state)
        assert result.total_active == 0.0
        assert result.annual_supervisors_cost == pytest.approx(3000 * 2 * 12)
        assert result.final_price_annual == pytest.approx(3000 * 2 * 12 * 1.10 * 1.15)

    def test_coverage_identity(self, pipeline: EstimationPipeline) -> None:
        state = sample_housekeeping_state().model_copy(
            update={"site": SiteConfig(coverage_days_required=263)}
        )
        result = _estimate(pipeline, state)
        assert result.relief_count == pytest.approx(0.0)
        assert result.total_with_relief == pytest.approx(result.total_active)

    def test_zero_working_days_uses_factor_one(
        self, pipeline: EstimationPipeline, caplog: pytest.LogCaptureFixture
    ) -> None:
        state = sample_housekeeping_state().model_copy(
            update={"site": SiteConfig(annual_leave_days=313)}
        )
        with caplog.at_level(logging.WARNING):
            result = _estimate(pipeline, state)
        assert result.effective_working_days == 0.0
        assert result.coverage_factor == 1.0
        assert result.total_with_relief == pytest.approx(1000 / 300)


# ---------------------------------------------------------------------------
# Machines
# ---------------------------------------------------------------------------


class TestMachines:
    @pytest.fixture()
    def state(self) -> HousekeepingState:
        return default_housekeeping_state().model_copy(
            update={
                "areas": [
                    AreaTask(
                        id="1",
                        name="Corridors",
                        sqm=19_800,
                        frequency=Frequency.DAILY,
                        bucket=Bucket.MACHINE,
                        machine_id="1",
                    )
                ],
                "machines": [
                    Machine(
                        id="1",
                        name="Scrubber",
                        quantity=1,
                        cost=15000,
                        life_years=5,
                        maintenance_percent=10,
                        sqm_per_hour=1500,
                        effective_hours_per_shift=6,
                    )
                ],
            }
        )

    def test_machine_operators_are_staffed(
        self, pipeline: EstimationPipeline, state: HousekeepingState
    ) -> None:
        result = _estimate(pipeline, state)
        assert result.machine_required_counts == {"1": pytest.approx(2.2)}
        assert result.total_active == pytest.approx(2.2)

    def test_fleet_grows_to_required(
        self, pipeline: EstimationPipeline, state: HousekeepingState
    ) -> None:
        result = _estimate(pipeline, state)
        detail = result.machine_details[0]
        assert detail.quantity_used == 3
        assert detail.variance is FleetVariance.INSUFFICIENT
        assert result.annual_depreciation == pytest.approx(9000.0)
        assert result.annual_maintenance == pytest.approx(4500.0)

    def test_unknown_machine_is_logged(
        self, pipeline: EstimationPipeline, caplog: pytest.LogCaptureFixture
    ) -> None:
        state = _with_areas(
            default_housekeeping_state(),
            AreaTask(
                id="1", sqm=500, frequency=Frequency.DAILY, bucket=Bucket.MACHINE, machine_id="x"
            ),
        )
        with caplog.at_level(logging.WARNING):
            result = _estimate(pipeline, state)
        assert "unknown machine 'x'" in caplog.text
        assert result.daily_totals[Bucket.MACHINE] == pytest.approx(500.0)


# ---------------------------------------------------------------------------
# Input-based mode
# ---------------------------------------------------------------------------


class TestInputBased:
    def test_supplied_headcount_overrides_workload(self, pipeline: EstimationPipeline) -> None:
        state = sample_housekeeping_state().model_copy(
            update={
                "site": SiteConfig(
                    estimation_mode=EstimationMode.INPUT_BASE, input_base_cleaners=10
                )
            }
        )
        result = _estimate(pipeline, state)
        assert result.estimation_mode is EstimationMode.INPUT_BASE
        assert result.total_active == 10
        assert result.manual_general_count == 0.0
        assert result.total_with_relief == pytest.approx(10 * 365 / 263)

    def test_changing_tasks_does_not_change_headcount(self, pipeline: EstimationPipeline) -> None:
        site = SiteConfig(estimation_mode=EstimationMode.INPUT_BASE, input_base_cleaners=10)
        small = sample_housekeeping_state().model_copy(update={"site": site})
        large = _with_areas(
            small,
            AreaTask(id="1", sqm=50_000, frequency=Frequency.DAILY, bucket=Bucket.MANUAL_DETAIL),
        )
        assert _estimate(pipeline, small).total_active == _estimate(pipeline, large).total_active
