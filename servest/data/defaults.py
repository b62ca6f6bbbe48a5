"""Default estimator states for a new project of each variant.

Rates are typical Gulf-region market figures (AED per month unless noted).
Every call builds fresh objects, so callers may modify the returned state
through ``model_copy(update=...)`` without affecting later calls.
"""

from __future__ import annotations

from datetime import date, timedelta

from servest.models.common import MarkupConfig, ProjectInfo
from servest.models.enums import Bucket, ContractModel, Frequency
from servest.models.facilities import (
    AssetType,
    ContractModelConfig,
    FacilitiesAssumptions,
    FacilitiesCostConfig,
    FacilitiesState,
    PPMTask,
    ReactiveProfile,
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
from servest.models.retrofit import LaborType, RetrofitCostConfig, RetrofitState

DEFAULT_RETROFIT_DURATION_DAYS = 90


# ---------------------------------------------------------------------------
# Housekeeping
# ---------------------------------------------------------------------------

_DEFAULT_AREAS: list[tuple[str, Frequency, Bucket]] = [
    ("Corridors", Frequency.DAILY, Bucket.MACHINE),
    ("Kitchens", Frequency.DAILY, Bucket.MANUAL_DETAIL),
    ("Laundries", Frequency.DAILY, Bucket.MANUAL_DETAIL),
    ("Lift Lobbies", Frequency.DAILY, Bucket.MANUAL_GENERAL),
    ("Staircases", Frequency.DAILY, Bucket.MANUAL_GENERAL),
    ("Rooftop / Interlock", Frequency.MONTHLY, Bucket.MANUAL_GENERAL),
    ("Garbage Rooms", Frequency.DAILY, Bucket.MANUAL_DETAIL),
    ("Building Circumference", Frequency.WEEKLY, Bucket.MANUAL_GENERAL),
]


def default_machines() -> list[Machine]:
    return [
        Machine(
            id="1",
            name="Scrubber",
            quantity=1,
            cost=15000,
            life_years=5,
            maintenance_percent=10,
            sqm_per_hour=1500,
            effective_hours_per_shift=6,
        ),
        Machine(
            id="2",
            name="Wet/Dry Vac",
            quantity=1,
            cost=2500,
            life_years=4,
            maintenance_percent=8,
            sqm_per_hour=800,
            effective_hours_per_shift=6,
        ),
        Machine(
            id="3",
            name="Pressure Washer",
            quantity=1,
            cost=3000,
            life_years=4,
            maintenance_percent=8,
            sqm_per_hour=1000,
            effective_hours_per_shift=6,
        ),
    ]


def default_housekeeping_state() -> HousekeepingState:
    """A blank housekeeping project: standard areas with zero area, standard fleet."""
    return HousekeepingState(
        project_info=ProjectInfo(),
        site=SiteConfig(),
        productivity=ProductivityConfig(),
        areas=[
            AreaTask(id=str(index), name=name, sqm=0, frequency=frequency, bucket=bucket)
            for index, (name, frequency, bucket) in enumerate(_DEFAULT_AREAS, start=1)
        ],
        costs=HousekeepingCosts(
            cleaner_salary=1200,
            benefits_allowances=300,
            supervisor_salary=3000,
            supervisor_count=0,
            consumables_per_cleaner_per_month=150,
            ppe_per_cleaner_per_year=250,
            overheads_percent=10,
            profit_markup_percent=15,
        ),
        machines=default_machines(),
    )


# ---------------------------------------------------------------------------
# Facilities management
# ---------------------------------------------------------------------------

_DEFAULT_TECHNICIANS: list[tuple[str, str, float, bool]] = [
    ("tech-hvac-sr", "HVAC Tech (Senior)", 4500, False),
    ("tech-hvac", "HVAC Tech", 3500, False),
    ("tech-electrical", "Electrical Tech", 3500, False),
    ("tech-plumbing", "Plumbing Tech", 3500, False),
    ("tech-multi", "Multi-skilled Tech", 3800, False),
    ("helper", "Helper", 2000, False),
    ("supervisor", "Supervisor", 5000, True),
]


def default_technician_library() -> list[TechnicianType]:
    return [
        TechnicianType(
            id=tech_id,
            name=name,
            monthly_salary=salary,
            additional_cost=300,
            can_supervise=can_supervise,
        )
        for tech_id, name, salary, can_supervise in _DEFAULT_TECHNICIANS
    ]


def _asset(
    asset_id: str,
    category: str,
    name: str,
    tasks: list[tuple[str, Frequency, float]],
    calls_percent: float,
    hours_per_call: float,
    notes: str,
) -> AssetType:
    return AssetType(
        id=asset_id,
        category=category,
        asset_name=name,
        ppm_tasks=[
            PPMTask(id=f"ppm-{i}", task_name=task, frequency=frequency, hours_per_visit=hours)
            for i, (task, frequency, hours) in enumerate(tasks, start=1)
        ],
        reactive=ReactiveProfile(
            reactive_calls_percent=calls_percent,
            avg_hours_per_call=hours_per_call,
            is_monthly_rate=True,
        ),
        notes=notes,
    )


def default_asset_types() -> list[AssetType]:
    """Starter asset library; technicians are assigned per project."""
    return [
        _asset(
            "asset-hvac-split", "HVAC", "Split AC Unit",
            [("Quarterly Service", Frequency.QUARTERLY, 1.5)], 2, 2,
            "Standard wall-mounted split units",
        ),
        _asset(
            "asset-hvac-package", "HVAC", "Package AC Unit",
            [("Quarterly Service", Frequency.QUARTERLY, 3)], 3, 4,
            "Rooftop package units",
        ),
        _asset(
            "asset-hvac-ahu", "HVAC", "Air Handling Unit (AHU)",
            [
                ("Monthly Inspection", Frequency.MONTHLY, 2),
                ("Quarterly Deep Service", Frequency.QUARTERLY, 4),
            ],
            4, 3, "Central AHU systems",
        ),
        _asset(
            "asset-elec-db", "Electrical", "Distribution Board",
            [("Quarterly Inspection", Frequency.QUARTERLY, 1)], 1, 2,
            "Main and sub distribution boards",
        ),
        _asset(
            "asset-elec-light", "Electrical", "Light Fixture",
            [("Annual Inspection", Frequency.ANNUAL, 0.1)], 0.5, 0.5,
            "All lighting fixtures",
        ),
        _asset(
            "asset-plumb-pump", "Plumbing", "Water Pump",
            [("Monthly Check", Frequency.MONTHLY, 1)], 3, 3,
            "Water supply and drainage pumps",
        ),
        _asset(
            "asset-fa-panel", "Fire Alarm", "Fire Alarm Panel",
            [("Monthly Test", Frequency.MONTHLY, 2)], 2, 2,
            "Fire alarm control panels",
        ),
        _asset(
            "asset-fa-detector", "Fire Alarm", "Smoke/Heat Detector",
            [("Semi-annual Test", Frequency.SEMIANNUAL, 0.15)], 0.2, 0.5,
            "Individual detectors",
        ),
    ]


def default_facilities_state() -> FacilitiesState:
    """A blank FM project with the standard technician library and no assets."""
    return FacilitiesState(
        project_info=ProjectInfo(),
        assumptions=FacilitiesAssumptions(break_minutes=60),
        technician_library=default_technician_library(),
        contract_model=ContractModelConfig(global_model=ContractModel.FULLY_COMPREHENSIVE),
        cost_config=FacilitiesCostConfig(
            in_house=MarkupConfig(overheads_percent=10, profit_markup_percent=15),
            subcontract=MarkupConfig(overheads_percent=5, profit_markup_percent=10),
        ),
    )


# ---------------------------------------------------------------------------
# Retrofit
# ---------------------------------------------------------------------------


def default_labor_library() -> list[LaborType]:
    return [
        LaborType(id="labor-hvac", role="HVAC Technician", hourly_rate=50),
        LaborType(id="labor-electrician", role="Electrician", hourly_rate=55),
        LaborType(id="labor-supervisor", role="Site Supervisor", hourly_rate=75),
        LaborType(id="labor-helper", role="General Helper", hourly_rate=30),
    ]


def default_retrofit_state(today: date | None = None) -> RetrofitState:
    """A blank retrofit project running 90 days from ``today``."""
    start = today or date.today()
    return RetrofitState(
        project_info=ProjectInfo(),
        start_date=start,
        end_date=start + timedelta(days=DEFAULT_RETROFIT_DURATION_DAYS),
        labor_library=default_labor_library(),
        cost_config=RetrofitCostConfig(
            in_house=MarkupConfig(overheads_percent=15, profit_markup_percent=10),
            subcontract=MarkupConfig(overheads_percent=5, profit_markup_percent=10),
            performance_bond_percent=5,
            insurance_percent=2,
            warranty_percent=3,
            risk_contingency_percent=5,
            pm_generals_percent=10,
        ),
    )


def sample_housekeeping_state() -> HousekeepingState:
    """A small worked example: 1,000 sqm of general cleaning every day.

    Priced with the default calendar, 1,200 + 300 per cleaner per month,
    10% overheads and 15% markup; no machines, consumables or PPE.
    """
    state = default_housekeeping_state()
    return state.model_copy(
        update={
            "project_info": ProjectInfo(project_name="Sample Residential Tower"),
            "areas": [
                AreaTask(
                    id="1",
                    name="Lift Lobbies",
                    sqm=1000,
                    frequency=Frequency.DAILY,
                    bucket=Bucket.MANUAL_GENERAL,
                )
            ],
            "machines": [],
            "costs": state.costs.model_copy(
                update={"consumables_per_cleaner_per_month": 0, "ppe_per_cleaner_per_year": 0}
            ),
        }
    )
