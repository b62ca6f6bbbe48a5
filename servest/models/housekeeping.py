"""Housekeeping estimator inputs: cleaning areas, machines and labour costs."""

from __future__ import annotations

from pydantic import Field

from servest.models.common import InputModel, ProjectInfo, SiteCalendar
from servest.models.enums import Bucket, EstimationMode, Frequency


class AreaTask(InputModel):
    """An area cleaned on a recurring schedule.

    ``daily_frequency`` is the number of passes per day and only applies
    when ``frequency`` is daily.
    """

    id: str
    name: str = ""
    sqm: float = Field(ge=0)
    frequency: Frequency
    daily_frequency: float | None = Field(default=None, ge=0)
    bucket: Bucket
    machine_id: str | None = None


class Machine(InputModel):
    """A cleaning machine type in the fleet."""

    id: str
    name: str = ""
    quantity: int = Field(default=0, ge=0)
    cost: float = Field(default=0.0, ge=0)
    life_years: float = Field(default=0.0, ge=0)
    maintenance_percent: float = Field(default=0.0, ge=0)
    sqm_per_hour: float = Field(default=0.0, ge=0)
    effective_hours_per_shift: float = Field(default=0.0, ge=0)


class ProductivityConfig(InputModel):
    """Square metres a cleaner covers per shift for each manual bucket."""

    manual_detail_sqm_per_shift: float = Field(default=200.0, ge=0)
    manual_general_sqm_per_shift: float = Field(default=300.0, ge=0)


class HousekeepingCosts(InputModel):
    """Rates feeding the housekeeping cost breakdown."""

    cleaner_salary: float = Field(default=0.0, ge=0)
    benefits_allowances: float = Field(default=0.0, ge=0)
    supervisor_salary: float = Field(default=0.0, ge=0)
    supervisor_count: float = Field(default=0.0, ge=0)
    consumables_per_cleaner_per_month: float = Field(default=0.0, ge=0)
    ppe_per_cleaner_per_year: float = Field(default=0.0, ge=0)
    overheads_percent: float = 0.0
    profit_markup_percent: float = 0.0


class SiteConfig(SiteCalendar):
    """Site calendar plus the housekeeping staffing mode."""

    estimation_mode: EstimationMode = EstimationMode.OUTPUT_BASE
    input_base_cleaners: float = Field(default=0.0, ge=0)


class HousekeepingState(InputModel):
    """Complete housekeeping estimator state handed to the pipeline."""

    project_info: ProjectInfo = Field(default_factory=ProjectInfo)
    site: SiteConfig = Field(default_factory=SiteConfig)
    productivity: ProductivityConfig = Field(default_factory=ProductivityConfig)
    areas: list[AreaTask] = Field(default_factory=list)
    costs: HousekeepingCosts = Field(default_factory=HousekeepingCosts)
    machines: list[Machine] = Field(default_factory=list)
