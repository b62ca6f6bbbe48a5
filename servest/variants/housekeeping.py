"""Housekeeping adapter — cleaning areas, machine fleet and cleaner headcount."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from servest.calculations.coverage import adjust_for_coverage, effective_working_days
from servest.calculations.normalizer import daily_totals_by_bucket, daily_totals_by_resource
from servest.calculations.pricing import (
    apply_markup,
    consumable_costs,
    machinery_costs,
    manpower_costs,
)
from servest.calculations.requirements import (
    StaffingRequirement,
    input_based_staffing,
    machine_capacity,
    output_based_staffing,
    required_count,
)
from servest.engine import ENGINE_VERSION
from servest.models.common import MarkupConfig
from servest.models.enums import Bucket, EstimationMode
from servest.models.housekeeping import HousekeepingState
from servest.models.results import EstimateMetadata, HousekeepingResult

if TYPE_CHECKING:
    from servest.calculations.coverage import CoverageAdjustment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HousekeepingWorkload:
    """Daily-equivalent square metres per bucket and per machine."""

    daily_totals: dict[Bucket, float]
    machine_daily_totals: dict[str, float]


class HousekeepingAdapter:
    """Stage hooks for housekeeping estimates."""

    variant = "housekeeping"
    state_type = HousekeepingState

    def normalize(self, state: HousekeepingState) -> HousekeepingWorkload:
        machine_totals = daily_totals_by_resource(state.areas)

        known = {machine.id for machine in state.machines}
        for machine_id in machine_totals:
            if machine_id not in known:
                logger.warning(
                    "Areas reference unknown machine '%s'; their workload is not staffed",
                    machine_id,
                )

        return HousekeepingWorkload(
            daily_totals=daily_totals_by_bucket(state.areas),
            machine_daily_totals=machine_totals,
        )

    def requirements(
        self, state: HousekeepingState, workload: HousekeepingWorkload
    ) -> StaffingRequirement:
        machine_counts = {
            machine.id: required_count(
                workload.machine_daily_totals.get(machine.id, 0.0),
                machine_capacity(machine.sqm_per_hour, machine.effective_hours_per_shift),
            )
            for machine in state.machines
        }

        if state.site.estimation_mode is EstimationMode.INPUT_BASE:
            return input_based_staffing(state.site.input_base_cleaners, machine_counts)

        productivity = state.productivity
        bucket_counts = {
            Bucket.MANUAL_DETAIL.value: required_count(
                workload.daily_totals[Bucket.MANUAL_DETAIL],
                productivity.manual_detail_sqm_per_shift,
            ),
            Bucket.MANUAL_GENERAL.value: required_count(
                workload.daily_totals[Bucket.MANUAL_GENERAL],
                productivity.manual_general_sqm_per_shift,
            ),
        }
        return output_based_staffing(bucket_counts, machine_counts)

    def coverage(
        self, state: HousekeepingState, staffing: StaffingRequirement
    ) -> CoverageAdjustment:
        return adjust_for_coverage(staffing.total, state.site)

    def price(
        self,
        state: HousekeepingState,
        workload: HousekeepingWorkload,
        staffing: StaffingRequirement,
        coverage: CoverageAdjustment,
    ) -> HousekeepingResult:
        costs = state.costs
        headcount = coverage.total_with_relief

        manpower = manpower_costs(
            headcount,
            base_salary=costs.cleaner_salary,
            allowances=costs.benefits_allowances,
            supervisor_salary=costs.supervisor_salary,
            supervisor_count=costs.supervisor_count,
        )
        machinery = machinery_costs(
            state.machines, staffing.resource_counts, workload.machine_daily_totals
        )
        consumables = consumable_costs(
            headcount,
            per_head_per_month=costs.consumables_per_cleaner_per_month,
            per_head_per_year=costs.ppe_per_cleaner_per_year,
        )

        pricing = apply_markup(
            manpower.total + machinery.total + consumables.total,
            MarkupConfig(
                overheads_percent=costs.overheads_percent,
                profit_markup_percent=costs.profit_markup_percent,
            ),
        )

        return HousekeepingResult(
            project_name=state.project_info.project_name,
            metadata=EstimateMetadata(engine_version=ENGINE_VERSION, variant=self.variant),
            final_price_annual=pricing.selling_annual,
            final_price_monthly=pricing.selling_monthly,
            daily_totals=workload.daily_totals,
            machine_daily_totals=workload.machine_daily_totals,
            machine_required_counts=staffing.resource_counts,
            total_machine_count=sum(staffing.resource_counts.values()),
            manual_detail_count=staffing.bucket_counts.get(Bucket.MANUAL_DETAIL.value, 0.0),
            manual_general_count=staffing.bucket_counts.get(Bucket.MANUAL_GENERAL.value, 0.0),
            estimation_mode=staffing.mode,
            effective_working_days=effective_working_days(state.site),
            coverage_factor=coverage.coverage_factor,
            total_active=coverage.active,
            relief_count=coverage.relief_count,
            total_with_relief=coverage.total_with_relief,
            machine_details=machinery.details,
            cleaner_monthly_cost=manpower.monthly_per_head,
            annual_cleaners_cost=manpower.annual_staff,
            annual_supervisors_cost=manpower.annual_supervisors,
            annual_manpower=manpower.total,
            annual_depreciation=machinery.total_depreciation,
            annual_maintenance=machinery.total_maintenance,
            annual_machinery=machinery.total,
            annual_consumables=consumables.annual_consumables,
            annual_ppe=consumables.annual_ppe,
            annual_consumables_total=consumables.total,
            pricing=pricing,
        )
