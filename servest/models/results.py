"""Estimation result models produced by the servest pipeline.

Results are frozen all the way down: sequences are tuples and mappings are
read-only views, so any input change means running the pipeline again and
replacing the whole tree.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, WrapSerializer

from servest.models.enums import (
    Bucket,
    DeploymentModel,
    EstimationMode,
    FleetVariance,
    RetrofitMode,
)


K = TypeVar("K")
V = TypeVar("V")


def _read_only(value: Mapping[Any, Any]) -> Mapping[Any, Any]:
    return MappingProxyType(dict(value))


FrozenMap = Annotated[
    Mapping[K, V],
    AfterValidator(_read_only),
    WrapSerializer(lambda value, handler: handler(dict(value))),
]


class ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class CostPathPricing(ResultModel):
    """Overhead, add-on and profit layers applied to one cost path."""

    direct_cost: float
    overheads: float
    add_ons: float = 0.0
    add_on_breakdown: FrozenMap[str, float] = Field(default_factory=dict, validate_default=True)
    total_cost: float
    profit: float
    selling_annual: float
    selling_monthly: float


class EstimateMetadata(ResultModel):
    """Metadata about the estimation run."""

    engine_version: str
    variant: str


class EstimationResult(ResultModel):
    """Fields every estimator variant exposes to its collaborators."""

    project_name: str
    metadata: EstimateMetadata
    final_price_annual: float
    final_price_monthly: float

    def summary_lines(self) -> list[tuple[str, float, str]]:
        """Return ``(label, value, kind)`` rows for display; kind is money or count."""
        return [
            ("Final price (annual)", self.final_price_annual, "money"),
            ("Final price (monthly)", self.final_price_monthly, "money"),
        ]

    def to_summary_dict(self, currency: str = "AED", decimals: int = 0) -> dict[str, Any]:
        """Produce a flat summary dict with formatted strings for display."""
        from servest.formatting import format_count, format_currency

        lines = {}
        for label, value, kind in self.summary_lines():
            if kind == "money":
                lines[label] = format_currency(value, currency, decimals=decimals)
            else:
                lines[label] = format_count(value)

        return {
            "project_name": self.project_name,
            "variant": self.metadata.variant,
            "final_price_annual_formatted": format_currency(
                self.final_price_annual, currency, decimals=decimals
            ),
            "final_price_monthly_formatted": format_currency(
                self.final_price_monthly, currency, decimals=decimals
            ),
            "lines": lines,
        }

    def to_export_dict(self) -> dict[str, Any]:
        """Produce a nested dict of plain numbers for spreadsheet/PDF export."""
        return self.model_dump(mode="json")


# ---------------------------------------------------------------------------
# Housekeeping
# ---------------------------------------------------------------------------


class MachineCostDetail(ResultModel):
    """Fleet sizing and annual cost for one machine type."""

    machine_id: str
    machine_name: str
    daily_sqm: float
    required_count: float
    declared_quantity: int
    quantity_used: int
    depreciation: float
    maintenance: float
    total: float
    variance: FleetVariance


class HousekeepingResult(EstimationResult):
    """Housekeeping estimate: cleaners, relievers, fleet and price."""

    daily_totals: FrozenMap[Bucket, float]
    machine_daily_totals: FrozenMap[str, float]
    machine_required_counts: FrozenMap[str, float]
    total_machine_count: float
    manual_detail_count: float
    manual_general_count: float
    estimation_mode: EstimationMode

    effective_working_days: float
    coverage_factor: float
    total_active: float
    relief_count: float
    total_with_relief: float

    machine_details: tuple[MachineCostDetail, ...]

    cleaner_monthly_cost: float
    annual_cleaners_cost: float
    annual_supervisors_cost: float
    annual_manpower: float
    annual_depreciation: float
    annual_maintenance: float
    annual_machinery: float
    annual_consumables: float
    annual_ppe: float
    annual_consumables_total: float

    pricing: CostPathPricing

    def summary_lines(self) -> list[tuple[str, float, str]]:
        return [
            ("Active cleaners", self.total_active, "count"),
            ("Relievers", self.relief_count, "count"),
            ("Total cleaners (with relievers)", self.total_with_relief, "count"),
            ("Manpower cost", self.annual_manpower, "money"),
            ("Machinery cost", self.annual_machinery, "money"),
            ("Consumables cost", self.annual_consumables_total, "money"),
            ("Overheads", self.pricing.overheads, "money"),
            ("Total cost", self.pricing.total_cost, "money"),
            ("Profit", self.pricing.profit, "money"),
            *super().summary_lines(),
        ]


# ---------------------------------------------------------------------------
# Facilities management
# ---------------------------------------------------------------------------


class ManpowerByType(ResultModel):
    """Workload, relief and cost for one technician type."""

    technician_type_id: str
    technician_type_name: str
    daily_hours: float
    annual_hours: float
    active_fte: float
    relief_count: float
    total_with_relief: float
    deployment_model: DeploymentModel
    headcount: float
    monthly_cost: float
    annual_cost: float


class FacilitiesResult(EstimationResult):
    """FM estimate with independently priced in-house and subcontract paths."""

    estimation_mode: EstimationMode
    manpower_by_type: tuple[ManpowerByType, ...]
    effective_working_days: float
    coverage_factor: float
    total_active_fte: float
    total_relief: float
    total_with_relief: float
    total_resident_headcount: int
    total_rotating_fte: float
    support_headcount: float
    total_in_house_headcount: float

    manpower_annual: float
    supervision_annual: float
    materials_annual: float
    consumables_annual: float
    subcontract_assets_annual: float
    specialized_services_annual: float

    in_house: CostPathPricing
    subcontract: CostPathPricing
    warnings: tuple[str, ...] = ()

    def summary_lines(self) -> list[tuple[str, float, str]]:
        return [
            ("Active FTE", self.total_active_fte, "count"),
            ("In-house headcount", self.total_in_house_headcount, "count"),
            ("In-house selling", self.in_house.selling_annual, "money"),
            ("Subcontract selling", self.subcontract.selling_annual, "money"),
            *super().summary_lines(),
        ]


# ---------------------------------------------------------------------------
# Retrofit
# ---------------------------------------------------------------------------


class RetrofitResult(EstimationResult):
    """Retrofit estimate; ``final_price_annual`` is the contract total."""

    estimation_mode: RetrofitMode
    hours_by_labor_type: FrozenMap[str, float]
    crew_by_labor_type: FrozenMap[str, float]
    total_manpower_hours: float
    project_duration_days: int

    manpower_cost: float
    asset_cost: float
    removal_cost: float
    materials_cost: float
    supervision_cost: float
    logistics_cost: float
    subcontractor_cost: float
    other_direct_cost: float = 0.0
    category_breakdown: FrozenMap[str, float] = Field(default_factory=dict, validate_default=True)

    in_house: CostPathPricing
    subcontract: CostPathPricing
    total_asset_quantity: float
    cost_per_asset_unit: float

    def summary_lines(self) -> list[tuple[str, float, str]]:
        return [
            ("Manpower hours", self.total_manpower_hours, "count"),
            ("In-house direct cost", self.in_house.direct_cost, "money"),
            ("Subcontract direct cost", self.subcontract.direct_cost, "money"),
            ("Cost per asset unit", self.cost_per_asset_unit, "money"),
            *super().summary_lines(),
        ]
