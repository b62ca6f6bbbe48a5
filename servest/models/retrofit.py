"""Retrofit project estimator inputs."""

from __future__ import annotations

from datetime import date

from pydantic import Field, model_validator

from servest.models.common import InputModel, MarkupConfig, ProjectInfo
from servest.models.enums import PricingMode, RetrofitMode


class LaborType(InputModel):
    """A trade in the retrofit labour library."""

    id: str
    role: str = ""
    hourly_rate: float = Field(default=0.0, ge=0)
    monthly_salary: float | None = Field(default=None, ge=0)
    additional_cost: float | None = Field(default=None, ge=0)
    notes: str = ""


class ManpowerItem(InputModel):
    """Estimated labour hours for one scope item, plus mobilisation costs."""

    id: str
    labor_type_id: str
    description: str = ""
    estimated_hours: float = Field(default=0.0, ge=0)
    mobilization_cost: float = Field(default=0.0, ge=0)
    demobilization_cost: float = Field(default=0.0, ge=0)


class RetrofitAsset(InputModel):
    """Equipment supplied by the project, with the cost of removing the old unit."""

    id: str
    name: str = ""
    description: str = ""
    quantity: float = Field(default=0.0, ge=0)
    unit_cost: float = Field(default=0.0, ge=0)
    removal_cost_per_unit: float = Field(default=0.0, ge=0)


class RetrofitMaterial(InputModel):
    id: str
    category: str = ""
    item: str = ""
    unit: str = ""
    unit_rate: float = Field(default=0.0, ge=0)
    estimated_qty: float = Field(default=0.0, ge=0)
    notes: str = ""


class Subcontractor(InputModel):
    """A trade package let to a subcontractor, priced lump sum or per unit."""

    id: str
    category: str = "other"
    description: str = ""
    pricing_mode: PricingMode = PricingMode.LUMP_SUM
    lump_sum_cost: float = Field(default=0.0, ge=0)
    quantity: float = Field(default=0.0, ge=0)
    unit_cost: float = Field(default=0.0, ge=0)


class LogisticsItem(InputModel):
    id: str
    description: str = ""
    quantity: float = Field(default=0.0, ge=0)
    unit_rate: float = Field(default=0.0, ge=0)
    notes: str = ""


class SupervisionRole(InputModel):
    id: str
    labor_type_id: str
    count: float = Field(default=0.0, ge=0)
    duration_months: float = Field(default=0.0, ge=0)


class BOQLineItem(InputModel):
    """A bill-of-quantities line with its own labour, supervision and direct costs."""

    id: str
    category: str = "Others"
    description: str = ""
    uom: str = "item"
    quantity: float = Field(default=0.0, ge=0)
    unit_material_cost: float = Field(default=0.0, ge=0)
    labor_type_id: str | None = None
    labor_hours: float = Field(default=0.0, ge=0)
    supervision_type_id: str | None = None
    supervision_hours: float = Field(default=0.0, ge=0)
    direct_cost: float = Field(default=0.0, ge=0)
    subcontractor_cost: float = Field(default=0.0, ge=0)


class RetrofitCostConfig(InputModel):
    """Markup layers plus contract add-ons charged on direct cost."""

    in_house: MarkupConfig = Field(
        default_factory=lambda: MarkupConfig(overheads_percent=15.0, profit_markup_percent=10.0)
    )
    subcontract: MarkupConfig = Field(
        default_factory=lambda: MarkupConfig(overheads_percent=5.0, profit_markup_percent=10.0)
    )
    performance_bond_percent: float = 0.0
    insurance_percent: float = 0.0
    warranty_percent: float = 0.0
    risk_contingency_percent: float = 0.0
    pm_generals_percent: float = 0.0

    def add_on_percents(self) -> dict[str, float]:
        """Return the add-on layers keyed by name."""
        return {
            "performance_bond": self.performance_bond_percent,
            "insurance": self.insurance_percent,
            "warranty": self.warranty_percent,
            "risk_contingency": self.risk_contingency_percent,
            "pm_generals": self.pm_generals_percent,
        }


class RetrofitState(InputModel):
    """Complete retrofit estimator state handed to the pipeline."""

    project_info: ProjectInfo = Field(default_factory=ProjectInfo)
    start_date: date | None = None
    end_date: date | None = None
    estimation_mode: RetrofitMode = RetrofitMode.STANDARD
    shift_length_hours: float = Field(default=8.0, ge=0)
    labor_library: list[LaborType] = Field(default_factory=list)
    manpower_items: list[ManpowerItem] = Field(default_factory=list)
    assets: list[RetrofitAsset] = Field(default_factory=list)
    materials: list[RetrofitMaterial] = Field(default_factory=list)
    subcontractors: list[Subcontractor] = Field(default_factory=list)
    supervision_roles: list[SupervisionRole] = Field(default_factory=list)
    logistics_items: list[LogisticsItem] = Field(default_factory=list)
    boq_line_items: list[BOQLineItem] = Field(default_factory=list)
    cost_config: RetrofitCostConfig = Field(default_factory=RetrofitCostConfig)

    @model_validator(mode="after")
    def end_not_before_start(self) -> RetrofitState:
        if self.start_date and self.end_date and self.end_date < self.start_date:
            msg = f"end_date {self.end_date} is before start_date {self.start_date}"
            raise ValueError(msg)
        return self

    @property
    def duration_days(self) -> int:
        """Calendar days between start and end, 0 when either is missing."""
        if self.start_date is None or self.end_date is None:
            return 0
        return (self.end_date - self.start_date).days
