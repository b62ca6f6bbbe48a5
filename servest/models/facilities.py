"""Facilities-management (MEP maintenance) estimator inputs."""

from __future__ import annotations

from pydantic import Field

from servest.models.common import InputModel, MarkupConfig, ProjectInfo, SiteCalendar
from servest.models.enums import (
    ContractModel,
    DeploymentModel,
    EstimationMode,
    Frequency,
    PricingMode,
    Responsibility,
)


class FacilitiesAssumptions(SiteCalendar):
    """Site calendar plus the FM staffing mode."""

    contract_mode: EstimationMode = EstimationMode.OUTPUT_BASE
    break_minutes: float = Field(default=60.0, ge=0)


class TechnicianType(InputModel):
    """A trade in the technician library, with its monthly cost to company."""

    id: str
    name: str = ""
    skill_tags: list[str] = Field(default_factory=list)
    monthly_salary: float = Field(default=0.0, ge=0)
    additional_cost: float = Field(default=0.0, ge=0)
    can_supervise: bool = False
    notes: str = ""


class PPMTask(InputModel):
    """A planned preventive maintenance task performed on every unit of an asset."""

    id: str
    task_name: str = ""
    frequency: Frequency
    hours_per_visit: float = Field(default=0.0, ge=0)
    technician_type_id: str = ""
    is_critical: bool = False


class ReactiveProfile(InputModel):
    """Expected breakdown call-outs for an asset type.

    ``reactive_calls_percent`` is the share of units raising a call per year,
    or per month when ``is_monthly_rate`` is set.
    """

    reactive_calls_percent: float = Field(default=0.0, ge=0)
    avg_hours_per_call: float = Field(default=0.0, ge=0)
    technician_type_id: str = ""
    is_monthly_rate: bool = False


class AssetType(InputModel):
    """A maintainable asset category with its PPM schedule."""

    id: str
    category: str = ""
    asset_name: str = ""
    standard_code: str | None = None
    ppm_tasks: list[PPMTask] = Field(default_factory=list)
    reactive: ReactiveProfile = Field(default_factory=ReactiveProfile)
    responsibility: Responsibility = Responsibility.IN_HOUSE
    notes: str = ""


class AssetInventory(InputModel):
    """Count of installed units of an asset type.

    ``unit_subcontract_cost`` is a monthly cost per unit, used only when the
    asset type is subcontracted.
    """

    id: str
    asset_type_id: str
    quantity: float = Field(default=0.0, ge=0)
    unit_subcontract_cost: float | None = Field(default=None, ge=0)
    notes: str = ""


class CatalogItem(InputModel):
    """A material or consumable line with an expected annual quantity."""

    id: str
    category: str = ""
    item: str = ""
    unit: str = ""
    unit_rate: float = Field(default=0.0, ge=0)
    expected_annual_qty: float = Field(default=0.0, ge=0)
    included: bool = True


class ContractModelConfig(InputModel):
    """Global contract model with optional per-category overrides."""

    global_model: ContractModel = ContractModel.SEMI_COMPREHENSIVE
    category_overrides: dict[str, ContractModel] = Field(default_factory=dict)
    cost_plus_handling_fee: float = 10.0

    def model_for(self, category: str) -> ContractModel:
        """Return the contract model governing items of ``category``."""
        return self.category_overrides.get(category, self.global_model)


class DeployedTechnician(InputModel):
    """Technicians supplied directly in input-based mode."""

    id: str
    technician_type_id: str
    quantity: float = Field(default=0.0, ge=0)
    notes: str = ""


class SpecializedService(InputModel):
    """A third-party service priced on the subcontract path."""

    id: str
    service_name: str = ""
    type: str = ""
    pricing_mode: PricingMode = PricingMode.LUMP_SUM
    qty: float = Field(default=0.0, ge=0)
    frequency: Frequency = Frequency.ANNUAL
    unit_cost: float | None = Field(default=None, ge=0)
    annual_cost: float | None = Field(default=None, ge=0)
    linked_asset_type_ids: list[str] = Field(default_factory=list)
    notes: str = ""


class SupportRole(InputModel):
    """Supervisory or support staff that are not workload-derived."""

    id: str
    technician_type_id: str
    count: float = Field(default=0.0, ge=0)
    deployment_model: DeploymentModel = DeploymentModel.RESIDENT


class FacilitiesCostConfig(InputModel):
    """Separate markup layers for self-performed and subcontracted work."""

    in_house: MarkupConfig = Field(default_factory=MarkupConfig)
    subcontract: MarkupConfig = Field(
        default_factory=lambda: MarkupConfig(overheads_percent=5.0, profit_markup_percent=10.0)
    )


class FacilitiesState(InputModel):
    """Complete FM estimator state handed to the pipeline."""

    project_info: ProjectInfo = Field(default_factory=ProjectInfo)
    assumptions: FacilitiesAssumptions = Field(default_factory=FacilitiesAssumptions)
    technician_library: list[TechnicianType] = Field(default_factory=list)
    deployed_technicians: list[DeployedTechnician] = Field(default_factory=list)
    asset_types: list[AssetType] = Field(default_factory=list)
    asset_inventory: list[AssetInventory] = Field(default_factory=list)
    materials_catalog: list[CatalogItem] = Field(default_factory=list)
    consumables_catalog: list[CatalogItem] = Field(default_factory=list)
    specialized_services: list[SpecializedService] = Field(default_factory=list)
    support_roles: list[SupportRole] = Field(default_factory=list)
    contract_model: ContractModelConfig = Field(default_factory=ContractModelConfig)
    cost_config: FacilitiesCostConfig = Field(default_factory=FacilitiesCostConfig)
    schema_version: int = 2
