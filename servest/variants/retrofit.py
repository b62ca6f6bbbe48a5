"""Retrofit adapter: one-off project work priced from hours, assets and trade packages.

Two pricing paths exist. The standard path costs the manpower plan, supplied
assets, removal, materials, supervision and logistics in-house and lets
subcontractor packages on their own markup layer. The bill-of-quantities
path prices each BOQ line instead and is used only when BOQ mode is selected
and at least one line item exists.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field

from servest.calculations.coverage import CoverageAdjustment
from servest.calculations.pricing import MONTHS_PER_YEAR, apply_markup, grand_total
from servest.calculations.requirements import StaffingRequirement, output_based_staffing
from servest.engine import ENGINE_VERSION
from servest.models.enums import PricingMode, RetrofitMode
from servest.models.results import EstimateMetadata, RetrofitResult
from servest.models.retrofit import LaborType, RetrofitState

logger = logging.getLogger(__name__)

HOURS_PER_MONTH = 208
SUPERVISION_HOURS_PER_MONTH = 160


def hourly_rate_for(labor: LaborType) -> float:
    """The labour type's hourly rate, derived from monthly cost when none is set."""
    if labor.hourly_rate:
        return labor.hourly_rate
    return ((labor.monthly_salary or 0.0) + (labor.additional_cost or 0.0)) / HOURS_PER_MONTH


def monthly_cost_for(labor: LaborType) -> float:
    monthly = (labor.monthly_salary or 0.0) + (labor.additional_cost or 0.0)
    if monthly > 0:
        return monthly
    return labor.hourly_rate * SUPERVISION_HOURS_PER_MONTH


def crew_size(hours: float, duration_days: int, shift_hours: float) -> float:
    """Full-time crew needed to deliver ``hours`` within the project window."""
    capacity = duration_days * shift_hours
    if hours <= 0 or capacity <= 0:
        return 0.0
    return hours / capacity


@dataclass(frozen=True)
class RetrofitWorkload:
    """Labour hours per labour type, from the manpower plan or the BOQ."""

    mode: RetrofitMode
    hours_by_labor_type: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class _DirectCosts:
    manpower: float = 0.0
    assets: float = 0.0
    removal: float = 0.0
    materials: float = 0.0
    supervision: float = 0.0
    logistics: float = 0.0
    other: float = 0.0
    subcontractors: float = 0.0
    categories: dict[str, float] = field(default_factory=dict)

    @property
    def in_house(self) -> float:
        return (
            self.manpower
            + self.assets
            + self.removal
            + self.materials
            + self.supervision
            + self.logistics
            + self.other
        )


class RetrofitAdapter:
    """Stage hooks for retrofit project estimates."""

    variant = "retrofit"
    state_type = RetrofitState

    @staticmethod
    def effective_mode(state: RetrofitState) -> RetrofitMode:
        if state.estimation_mode is RetrofitMode.BOQ and state.boq_line_items:
            return RetrofitMode.BOQ
        return RetrofitMode.STANDARD

    def normalize(self, state: RetrofitState) -> RetrofitWorkload:
        mode = self.effective_mode(state)
        library = {labor.id for labor in state.labor_library}
        hours: dict[str, float] = defaultdict(float)
        unknown: set[str] = set()

        def add(labor_id: str | None, amount: float) -> None:
            if not labor_id or amount <= 0:
                return
            if labor_id not in library:
                unknown.add(labor_id)
                return
            hours[labor_id] += amount

        if mode is RetrofitMode.BOQ:
            for line in state.boq_line_items:
                add(line.labor_type_id, line.labor_hours)
                add(line.supervision_type_id, line.supervision_hours)
        else:
            for item in state.manpower_items:
                if item.labor_type_id not in library:
                    unknown.add(item.labor_type_id)
                    continue
                hours[item.labor_type_id] += item.estimated_hours

        if unknown:
            logger.warning(
                "Unknown labour types are excluded from hours and cost: %s",
                ", ".join(sorted(unknown)),
            )
        return RetrofitWorkload(mode=mode, hours_by_labor_type=dict(hours))

    def requirements(self, state: RetrofitState, workload: RetrofitWorkload) -> StaffingRequirement:
        crews = {
            labor_id: crew_size(hours, state.duration_days, state.shift_length_hours)
            for labor_id, hours in workload.hours_by_labor_type.items()
        }
        return output_based_staffing({}, crews)

    def coverage(self, state: RetrofitState, staffing: StaffingRequirement) -> CoverageAdjustment:
        # Project work runs to a fixed window, so no relief is added.
        return CoverageAdjustment(
            active=staffing.total,
            coverage_factor=1.0,
            relief_count=0.0,
            total_with_relief=staffing.total,
        )

    def price(
        self,
        state: RetrofitState,
        workload: RetrofitWorkload,
        staffing: StaffingRequirement,
        coverage: CoverageAdjustment,
    ) -> RetrofitResult:
        labor = {item.id: item for item in state.labor_library}
        if workload.mode is RetrofitMode.BOQ:
            costs = self._boq_costs(state, labor)
            asset_quantity = sum(line.quantity for line in state.boq_line_items)
        else:
            costs = self._standard_costs(state, labor)
            asset_quantity = sum(asset.quantity for asset in state.assets)

        config = state.cost_config
        add_ons = config.add_on_percents()
        in_house = apply_markup(costs.in_house, config.in_house, add_ons)
        subcontract = apply_markup(costs.subcontractors, config.subcontract, add_ons)
        final_total = grand_total(in_house, subcontract)

        return RetrofitResult(
            project_name=state.project_info.project_name,
            metadata=EstimateMetadata(engine_version=ENGINE_VERSION, variant=self.variant),
            final_price_annual=final_total,
            final_price_monthly=final_total / MONTHS_PER_YEAR,
            estimation_mode=workload.mode,
            hours_by_labor_type=workload.hours_by_labor_type,
            crew_by_labor_type=staffing.resource_counts,
            total_manpower_hours=sum(workload.hours_by_labor_type.values()),
            project_duration_days=state.duration_days,
            manpower_cost=costs.manpower,
            asset_cost=costs.assets,
            removal_cost=costs.removal,
            materials_cost=costs.materials,
            supervision_cost=costs.supervision,
            logistics_cost=costs.logistics,
            subcontractor_cost=costs.subcontractors,
            other_direct_cost=costs.other,
            category_breakdown=costs.categories,
            in_house=in_house,
            subcontract=subcontract,
            total_asset_quantity=asset_quantity,
            cost_per_asset_unit=final_total / asset_quantity if asset_quantity > 0 else 0.0,
        )

    @staticmethod
    def _standard_costs(state: RetrofitState, labor: dict[str, LaborType]) -> _DirectCosts:
        manpower = 0.0
        for item in state.manpower_items:
            labor_type = labor.get(item.labor_type_id)
            if labor_type is None:
                continue
            manpower += (
                item.estimated_hours * hourly_rate_for(labor_type)
                + item.mobilization_cost
                + item.demobilization_cost
            )

        assets = sum(asset.quantity * asset.unit_cost for asset in state.assets)
        removal = sum(asset.quantity * asset.removal_cost_per_unit for asset in state.assets)
        materials = sum(m.unit_rate * m.estimated_qty for m in state.materials)
        logistics = sum(item.quantity * item.unit_rate for item in state.logistics_items)

        supervision = 0.0
        for role in state.supervision_roles:
            labor_type = labor.get(role.labor_type_id)
            if labor_type is None:
                logger.warning(
                    "Supervision role '%s' references unknown labour type '%s'",
                    role.id,
                    role.labor_type_id,
                )
                continue
            supervision += role.count * role.duration_months * monthly_cost_for(labor_type)

        subcontractors = 0.0
        for sub in state.subcontractors:
            if sub.pricing_mode is PricingMode.LUMP_SUM:
                subcontractors += sub.lump_sum_cost
            else:
                subcontractors += sub.quantity * sub.unit_cost

        return _DirectCosts(
            manpower=manpower,
            assets=assets,
            removal=removal,
            materials=materials,
            supervision=supervision,
            logistics=logistics,
            subcontractors=subcontractors,
            categories={
                "manpower": manpower,
                "assets": assets,
                "removal": removal,
                "materials": materials,
                "supervision": supervision,
                "logistics": logistics,
                "subcontractors": subcontractors,
            },
        )

    @staticmethod
    def _boq_costs(state: RetrofitState, labor: dict[str, LaborType]) -> _DirectCosts:
        def line_rate(labor_id: str | None, hours: float) -> float:
            if not labor_id or hours <= 0:
                return 0.0
            labor_type = labor.get(labor_id)
            if labor_type is None:
                return 0.0
            return hours * hourly_rate_for(labor_type)

        materials = manpower = supervision = other = subcontractors = 0.0
        categories: dict[str, float] = defaultdict(float)

        for line in state.boq_line_items:
            line_materials = line.quantity * line.unit_material_cost
            line_labor = line_rate(line.labor_type_id, line.labor_hours)
            line_supervision = line_rate(line.supervision_type_id, line.supervision_hours)
            line_direct = line.quantity * line.direct_cost
            line_subcontract = line.quantity * line.subcontractor_cost

            materials += line_materials
            manpower += line_labor
            supervision += line_supervision
            other += line_direct
            subcontractors += line_subcontract
            categories[line.category] += (
                line_materials + line_labor + line_supervision + line_direct + line_subcontract
            )

        return _DirectCosts(
            manpower=manpower,
            materials=materials,
            supervision=supervision,
            other=other,
            subcontractors=subcontractors,
            categories=dict(categories),
        )
