"""Domain models for the servest estimation pipeline."""

from servest.models.common import InputModel, MarkupConfig, ProjectInfo, SiteCalendar
from servest.models.enums import (
    Bucket,
    ContractModel,
    DeploymentModel,
    EstimationMode,
    FleetVariance,
    Frequency,
    PricingMode,
    ProjectStatus,
    Responsibility,
    RetrofitMode,
)
from servest.models.facilities import (
    AssetInventory,
    AssetType,
    CatalogItem,
    ContractModelConfig,
    DeployedTechnician,
    FacilitiesAssumptions,
    FacilitiesCostConfig,
    FacilitiesState,
    PPMTask,
    ReactiveProfile,
    SpecializedService,
    SupportRole,
    TechnicianType,
)
from servest.models.housekeeping import (
    AreaTask,
    HousekeepingCosts,
    HousekeepingState,
    Machine,
    ProductivityConfig,
    SiteConfig,
)
from servest.models.results import (
    CostPathPricing,
    EstimateMetadata,
    EstimationResult,
    FacilitiesResult,
    HousekeepingResult,
    MachineCostDetail,
    ManpowerByType,
    RetrofitResult,
)
from servest.models.retrofit import (
    BOQLineItem,
    LaborType,
    LogisticsItem,
    ManpowerItem,
    RetrofitAsset,
    RetrofitCostConfig,
    RetrofitMaterial,
    RetrofitState,
    Subcontractor,
    SupervisionRole,
)

__all__ = [
    "AreaTask",
    "AssetInventory",
    "AssetType",
    "BOQLineItem",
    "Bucket",
    "CatalogItem",
    "ContractModel",
    "ContractModelConfig",
    "CostPathPricing",
    "DeployedTechnician",
    "DeploymentModel",
    "EstimateMetadata",
    "EstimationMode",
    "EstimationResult",
    "FacilitiesAssumptions",
    "FacilitiesCostConfig",
    "FacilitiesResult",
    "FacilitiesState",
    "FleetVariance",
    "Frequency",
    "HousekeepingCosts",
    "HousekeepingResult",
    "HousekeepingState",
    "InputModel",
    "LaborType",
    "LogisticsItem",
    "Machine",
    "MachineCostDetail",
    "ManpowerByType",
    "ManpowerItem",
    "MarkupConfig",
    "PPMTask",
    "PricingMode",
    "ProductivityConfig",
    "ProjectInfo",
    "ProjectStatus",
    "ReactiveProfile",
    "Responsibility",
    "RetrofitAsset",
    "RetrofitCostConfig",
    "RetrofitMaterial",
    "RetrofitMode",
    "RetrofitResult",
    "RetrofitState",
    "SiteCalendar",
    "SiteConfig",
    "SpecializedService",
    "Subcontractor",
    "SupervisionRole",
    "SupportRole",
    "TechnicianType",
]
