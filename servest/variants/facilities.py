"""Facilities-management adapter — PPM and reactive workload per technician type.

In-house labour, supervision and materials are priced on one cost path;
subcontracted assets and specialised services on another, each with its own
overhead and markup layer.
"""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field

from servest.calculations.coverage import (
    DAYS_PER_YEAR,
    CoverageAdjustment,
    apply_coverage_factor,
    coverage_factor,
    effective_hours_per_shift,
    effective_working_days,
)
from servest.calculations.normalizer import annual_occurrences, to_daily_equivalent
from servest.calculations.pricing import MONTHS_PER_YEAR, apply_markup, catalog_cost, grand_total
from servest.calculations.requirements import (
    StaffingRequirement,
    input_based_staffing,
    output_based_staffing,
    required_count,
)
from servest.engine import ENGINE_VERSION
from servest.models.enums import DeploymentModel, EstimationMode, PricingMode, Responsibility
from servest.models.facilities import FacilitiesState, TechnicianType
from servest.models.results import EstimateMetadata, FacilitiesResult, ManpowerByType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FacilitiesWorkload:
    """Daily-equivalent maintenance hours per technician type."""

    daily_hours_by_type: dict[str, float]
    critical_types: frozenset[str]
    orphaned_types: tuple[str, ...] = ()
    unknown_deployed_types: tuple[str, ...] = ()


@dataclass(frozen=True)
class FacilitiesCoverage:
    effective_working_days: float
    coverage_factor: float
    by_type: dict[str, CoverageAdjustment] = field(default_factory=dict)


def _monthly_ctc(technician: TechnicianType) -> float:
    return technician.monthly_salary + technician.additional_cost


def reactive_annual_hours(
    calls_percent: float,
    quantity: float,
    avg_hours_per_call: float,
    is_monthly_rate: bool = False,
) -> float:
    """Breakdown call-out hours per year for ``quantity`` installed units."""
    calls = (calls_percent / 100) * quantity
    hours = calls * avg_hours_per_call
    return hours * MONTHS_PER_YEAR if is_monthly_rate else hours


class FacilitiesAdapter:
    """Stage hooks for facilities-management estimates."""

    variant = "facilities"
    state_type = FacilitiesState

    def normalize(self, state: FacilitiesState) -> FacilitiesWorkload:
        asset_types = {asset.id: asset for asset in state.asset_types}
        hours: dict[str, float] = defaultdict(float)

        for inventory in state.asset_inventory:
            asset = asset_types.get(inventory.asset_type_id)
            if asset is None:
                logger.warning(
                    "Inventory '%s' references unknown asset type '%s'",
                    inventory.id,
                    inventory.asset_type_id,
                )
                continue
            if asset.responsibility is Responsibility.SUBCONTRACT:
                continue

            for task in asset.ppm_tasks:
                hours[task.technician_type_id] += to_daily_equivalent(
                    task.hours_per_visit * inventory.quantity, task.frequency
                )

            reactive = asset.reactive
            annual = reactive_annual_hours(
                reactive.reactive_calls_percent,
                inventory.quantity,
                reactive.avg_hours_per_call,
                reactive.is_monthly_rate,
            )
            if reactive.technician_type_id and annual > 0:
                hours[reactive.technician_type_id] += annual / DAYS_PER_YEAR

        critical: set[str] = set()
        referenced: set[str] = set()
        for asset in state.asset_types:
            if asset.responsibility is Responsibility.SUBCONTRACT:
                continue
            for task in asset.ppm_tasks:
                referenced.add(task.technician_type_id)
                if task.is_critical:
                    critical.add(task.technician_type_id)
            referenced.add(asset.reactive.technician_type_id)

        library = {tech.id for tech in state.technician_library}
        orphaned = tuple(sorted(t for t in referenced if t and t not in library))
        if orphaned:
            logger.warning("Tasks reference deleted technician types: %s", ", ".join(orphaned))

        unknown_deployed: tuple[str, ...] = ()
        if state.assumptions.contract_mode is EstimationMode.INPUT_BASE:
            unknown_deployed = tuple(
                sorted(
                    {
                        item.technician_type_id
                        for item in state.deployed_technicians
                        if item.technician_type_id not in library
                    }
                )
            )
            if unknown_deployed:
                logger.warning(
                    "Deployed technicians reference unknown types: %s", ", ".join(unknown_deployed)
                )

        return FacilitiesWorkload(
            daily_hours_by_type=dict(hours),
            critical_types=frozenset(critical),
            orphaned_types=orphaned,
            unknown_deployed_types=unknown_deployed,
        )

    def requirements(
        self, state: FacilitiesState, workload: FacilitiesWorkload
    ) -> StaffingRequirement:
        library = {tech.id for tech in state.technician_library}

        if state.assumptions.contract_mode is EstimationMode.INPUT_BASE:
            deployed: dict[str, float] = defaultdict(float)
            for item in state.deployed_technicians:
                if item.technician_type_id in library:
                    deployed[item.technician_type_id] += item.quantity
            counts = dict(deployed)
            return input_based_staffing(sum(counts.values()), counts)

        capacity = effective_hours_per_shift(state.assumptions)
        counts = {
            tech_id: required_count(daily_hours, capacity)
            for tech_id, daily_hours in workload.daily_hours_by_type.items()
            if tech_id in library
        }
        return output_based_staffing({}, counts)

    def coverage(
        self, state: FacilitiesState, staffing: StaffingRequirement
    ) -> FacilitiesCoverage:
        working_days = effective_working_days(state.assumptions)
        factor = coverage_factor(state.assumptions.coverage_days_required, working_days)
        return FacilitiesCoverage(
            effective_working_days=working_days,
            coverage_factor=factor,
            by_type={
                tech_id: apply_coverage_factor(active, factor)
                for tech_id, active in staffing.resource_counts.items()
            },
        )

    def _deployment_model(
        self, state: FacilitiesState, tech_id: str, workload: FacilitiesWorkload
    ) -> DeploymentModel:
        if state.assumptions.contract_mode is EstimationMode.INPUT_BASE:
            return DeploymentModel.RESIDENT
        if tech_id in workload.critical_types:
            return DeploymentModel.RESIDENT
        return DeploymentModel.ROTATING

    def price(
        self,
        state: FacilitiesState,
        workload: FacilitiesWorkload,
        staffing: StaffingRequirement,
        coverage: FacilitiesCoverage,
    ) -> FacilitiesResult:
        technicians = {tech.id: tech for tech in state.technician_library}
        shift_hours = effective_hours_per_shift(state.assumptions)
        warnings: list[str] = []
        if workload.orphaned_types:
            warnings.append(
                f"{len(workload.orphaned_types)} technician type(s) referenced by tasks "
                f"no longer exist and are excluded: {', '.join(workload.orphaned_types)}"
            )
        if workload.unknown_deployed_types:
            warnings.append(
                "Deployed technicians reference unknown technician type(s) and are excluded: "
                f"{', '.join(workload.unknown_deployed_types)}"
            )

        manpower_by_type: list[ManpowerByType] = []
        for tech_id, adjusted in coverage.by_type.items():
            tech = technicians[tech_id]
            deployment = self._deployment_model(state, tech_id, workload)
            headcount: float = (
                math.ceil(adjusted.total_with_relief)
                if deployment is DeploymentModel.RESIDENT
                else adjusted.total_with_relief
            )
            monthly_cost = headcount * _monthly_ctc(tech)
            daily_hours = (
                adjusted.active * shift_hours
                if staffing.mode is EstimationMode.INPUT_BASE
                else workload.daily_hours_by_type.get(tech_id, 0.0)
            )
            manpower_by_type.append(
                ManpowerByType(
                    technician_type_id=tech_id,
                    technician_type_name=tech.name,
                    daily_hours=daily_hours,
                    annual_hours=daily_hours * DAYS_PER_YEAR,
                    active_fte=adjusted.active,
                    relief_count=adjusted.relief_count,
                    total_with_relief=adjusted.total_with_relief,
                    deployment_model=deployment,
                    headcount=headcount,
                    monthly_cost=monthly_cost,
                    annual_cost=monthly_cost * MONTHS_PER_YEAR,
                )
            )

        support_resident = 0
        support_rotating = 0.0
        supervision_annual = 0.0
        for role in state.support_roles:
            tech = technicians.get(role.technician_type_id)
            if tech is None:
                warnings.append(
                    f"Support role '{role.id}' references unknown technician type "
                    f"'{role.technician_type_id}' and is excluded"
                )
                continue
            if role.deployment_model is DeploymentModel.RESIDENT:
                role_headcount: float = math.ceil(role.count)
                support_resident += math.ceil(role.count)
            else:
                role_headcount = role.count
                support_rotating += role.count
            supervision_annual += role_headcount * _monthly_ctc(tech) * MONTHS_PER_YEAR

        manpower_annual = sum(m.annual_cost for m in manpower_by_type)
        materials_annual = catalog_cost(state.materials_catalog, state.contract_model)
        consumables_annual = catalog_cost(state.consumables_catalog, state.contract_model)

        subcontract_assets_annual = self._subcontract_assets_cost(state)
        services_annual = self._specialized_services_cost(state)

        in_house = apply_markup(
            manpower_annual + supervision_annual + materials_annual + consumables_annual,
            state.cost_config.in_house,
        )
        subcontract = apply_markup(
            subcontract_assets_annual + services_annual,
            state.cost_config.subcontract,
        )
        final_annual = grand_total(in_house, subcontract)

        total_resident = sum(
            int(m.headcount) for m in manpower_by_type
            if m.deployment_model is DeploymentModel.RESIDENT
        )
        total_rotating = sum(
            m.headcount for m in manpower_by_type
            if m.deployment_model is DeploymentModel.ROTATING
        )
        support_headcount = support_resident + support_rotating

        return FacilitiesResult(
            project_name=state.project_info.project_name,
            metadata=EstimateMetadata(engine_version=ENGINE_VERSION, variant=self.variant),
            final_price_annual=final_annual,
            final_price_monthly=final_annual / MONTHS_PER_YEAR,
            estimation_mode=staffing.mode,
            manpower_by_type=manpower_by_type,
            effective_working_days=coverage.effective_working_days,
            coverage_factor=coverage.coverage_factor,
            total_active_fte=sum(m.active_fte for m in manpower_by_type),
            total_relief=sum(m.relief_count for m in manpower_by_type),
            total_with_relief=sum(m.total_with_relief for m in manpower_by_type),
            total_resident_headcount=total_resident,
            total_rotating_fte=total_rotating,
            support_headcount=support_headcount,
            total_in_house_headcount=total_resident + total_rotating + support_headcount,
            manpower_annual=manpower_annual,
            supervision_annual=supervision_annual,
            materials_annual=materials_annual,
            consumables_annual=consumables_annual,
            subcontract_assets_annual=subcontract_assets_annual,
            specialized_services_annual=services_annual,
            in_house=in_house,
            subcontract=subcontract,
            warnings=warnings,
        )

    @staticmethod
    def _subcontract_assets_cost(state: FacilitiesState) -> float:
        """Monthly per-unit subcontract rates for subcontracted asset types, annualised."""
        asset_types = {asset.id: asset for asset in state.asset_types}
        total = 0.0
        for inventory in state.asset_inventory:
            asset = asset_types.get(inventory.asset_type_id)
            if asset is None or asset.responsibility is not Responsibility.SUBCONTRACT:
                continue
            if inventory.unit_subcontract_cost:
                total += inventory.unit_subcontract_cost * inventory.quantity * MONTHS_PER_YEAR
        return total

    @staticmethod
    def _specialized_services_cost(state: FacilitiesState) -> float:
        total = 0.0
        for service in state.specialized_services:
            if service.pricing_mode is PricingMode.LUMP_SUM:
                if service.annual_cost is not None:
                    total += service.annual_cost
            elif service.unit_cost is not None:
                total += service.unit_cost * service.qty * annual_occurrences(service.frequency)
        return total
