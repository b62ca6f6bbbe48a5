"""The four pure stages every estimator variant runs through."""

from servest.calculations.coverage import (
    CoverageAdjustment,
    adjust_for_coverage,
    apply_coverage_factor,
    coverage_factor,
    effective_hours_per_shift,
    effective_working_days,
)
from servest.calculations.normalizer import (
    annual_occurrences,
    daily_totals_by_bucket,
    daily_totals_by_resource,
    frequency_to_divisor,
    parse_frequency,
    to_daily_equivalent,
)
from servest.calculations.pricing import (
    apply_markup,
    catalog_cost,
    consumable_costs,
    depreciation,
    fleet_quantity,
    grand_total,
    machinery_costs,
    maintenance,
    manpower_costs,
)
from servest.calculations.requirements import (
    StaffingRequirement,
    input_based_staffing,
    machine_capacity,
    output_based_staffing,
    required_count,
)

__all__ = [
    "CoverageAdjustment",
    "StaffingRequirement",
    "adjust_for_coverage",
    "annual_occurrences",
    "apply_coverage_factor",
    "apply_markup",
    "catalog_cost",
    "consumable_costs",
    "coverage_factor",
    "daily_totals_by_bucket",
    "daily_totals_by_resource",
    "depreciation",
    "effective_hours_per_shift",
    "effective_working_days",
    "fleet_quantity",
    "frequency_to_divisor",
    "grand_total",
    "input_based_staffing",
    "machine_capacity",
    "machinery_costs",
    "maintenance",
    "manpower_costs",
    "output_based_staffing",
    "parse_frequency",
    "required_count",
    "to_daily_equivalent",
]
