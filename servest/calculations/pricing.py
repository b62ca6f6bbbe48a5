"""Cost & pricing aggregator.

Turns headcount, fleet and catalog inputs into annual cost components, then
applies the pricing cascade to each cost path:

1. **Overheads** — ``direct * overheads%``.
2. **Add-ons** — ``direct * sum(add-on%)`` (bonds, insurance, ...; retrofit only).
3. **Total cost** — direct + overheads + add-ons.
4. **Profit** — ``total * markup%``.
5. **Selling price** — total + profit, annual and per month.

In-house and subcontract paths are priced separately and only summed at the
grand total, because they carry different markup layers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from servest.models.enums import ContractModel, FleetVariance
from servest.models.results import CostPathPricing, MachineCostDetail

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from servest.models.common import MarkupConfig
    from servest.models.facilities import CatalogItem, ContractModelConfig
    from servest.models.housekeeping import Machine

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class ManpowerCosts:
    monthly_per_head: float
    annual_staff: float
    annual_supervisors: float
    total: float


@dataclass(frozen=True)
class ConsumableCosts:
    annual_consumables: float
    annual_ppe: float
    total: float


@dataclass(frozen=True)
class MachineryCosts:
    details: list[MachineCostDetail]
    total_depreciation: float
    total_maintenance: float
    total: float


# ---------------------------------------------------------------------------
# Manpower and consumables
# ---------------------------------------------------------------------------


def manpower_costs(
    headcount: float,
    base_salary: float,
    allowances: float,
    supervisor_salary: float = 0.0,
    supervisor_count: float = 0.0,
) -> ManpowerCosts:
    """Annual cost of workload staff plus a flat supervisor layer."""
    monthly_per_head = base_salary + allowances
    annual_staff = monthly_per_head * headcount * MONTHS_PER_YEAR
    annual_supervisors = supervisor_salary * supervisor_count * MONTHS_PER_YEAR
    return ManpowerCosts(
        monthly_per_head=monthly_per_head,
        annual_staff=annual_staff,
        annual_supervisors=annual_supervisors,
        total=annual_staff + annual_supervisors,
    )


def consumable_costs(
    headcount: float,
    per_head_per_month: float,
    per_head_per_year: float = 0.0,
) -> ConsumableCosts:
    """Monthly per-head consumables plus an annual per-head allowance such as PPE."""
    annual_consumables = per_head_per_month * headcount * MONTHS_PER_YEAR
    annual_ppe = per_head_per_year * headcount
    return ConsumableCosts(
        annual_consumables=annual_consumables,
        annual_ppe=annual_ppe,
        total=annual_consumables + annual_ppe,
    )


def catalog_cost(items: Iterable[CatalogItem], contract: ContractModelConfig) -> float:
    """Sum ``unit_rate * expected_annual_qty`` under each item's contract model.

    - fully comprehensive: every item is absorbed by the contractor
    - semi comprehensive: only items flagged ``included``
    - cost plus: every item, plus the handling fee
    """
    total = 0.0
    for item in items:
        base = item.unit_rate * item.expected_annual_qty
        model = contract.model_for(item.category)
        if model is ContractModel.FULLY_COMPREHENSIVE:
            total += base
        elif model is ContractModel.SEMI_COMPREHENSIVE:
            if item.included:
                total += base
        else:
            total += base * (1 + contract.cost_plus_handling_fee / 100)
    return total


# ---------------------------------------------------------------------------
# Machinery
# ---------------------------------------------------------------------------


def depreciation(purchase_cost: float, life_years: float) -> float:
    """Straight-line annual depreciation; zero when no life span is set."""
    return purchase_cost / life_years if life_years > 0 else 0.0


def maintenance(purchase_cost: float, maintenance_percent: float) -> float:
    return purchase_cost * (maintenance_percent / 100)


def fleet_quantity(declared: int, required: float) -> int:
    """Units that drive cost: the declared fleet or the whole units workload needs."""
    return max(declared, math.ceil(required))


def fleet_variance(declared: int, required: float) -> FleetVariance:
    needed = math.ceil(required)
    if declared < needed:
        return FleetVariance.INSUFFICIENT
    if declared > needed:
        return FleetVariance.EXCESS
    return FleetVariance.SUFFICIENT


def machinery_costs(
    machines: Iterable[Machine],
    required_counts: Mapping[str, float],
    daily_workload: Mapping[str, float] | None = None,
) -> MachineryCosts:
    """Depreciation and maintenance for every machine type in the fleet."""
    daily_workload = daily_workload or {}
    details: list[MachineCostDetail] = []
    total_depreciation = 0.0
    total_maintenance = 0.0

    for machine in machines:
        required = required_counts.get(machine.id, 0.0)
        quantity = fleet_quantity(machine.quantity, required)
        machine_depreciation = depreciation(machine.cost, machine.life_years) * quantity
        machine_maintenance = maintenance(machine.cost, machine.maintenance_percent) * quantity

        details.append(
            MachineCostDetail(
                machine_id=machine.id,
                machine_name=machine.name,
                daily_sqm=daily_workload.get(machine.id, 0.0),
                required_count=required,
                declared_quantity=machine.quantity,
                quantity_used=quantity,
                depreciation=machine_depreciation,
                maintenance=machine_maintenance,
                total=machine_depreciation + machine_maintenance,
                variance=fleet_variance(machine.quantity, required),
            )
        )
        total_depreciation += machine_depreciation
        total_maintenance += machine_maintenance

    return MachineryCosts(
        details=details,
        total_depreciation=total_depreciation,
        total_maintenance=total_maintenance,
        total=total_depreciation + total_maintenance,
    )


# ---------------------------------------------------------------------------
# Pricing cascade
# ---------------------------------------------------------------------------


def apply_markup(
    direct_cost: float,
    markup: MarkupConfig,
    add_on_percents: Mapping[str, float] | None = None,
) -> CostPathPricing:
    """Run the overhead / add-on / profit cascade over one cost path.

    Percentages are used as given; nothing is clamped.
    """
    overheads = direct_cost * (markup.overheads_percent / 100)
    add_on_breakdown = {
        name: direct_cost * (percent / 100)
        for name, percent in (add_on_percents or {}).items()
    }
    add_ons = sum(add_on_breakdown.values())
    total_cost = direct_cost + overheads + add_ons
    profit = total_cost * (markup.profit_markup_percent / 100)
    selling_annual = total_cost + profit

    return CostPathPricing(
        direct_cost=direct_cost,
        overheads=overheads,
        add_ons=add_ons,
        add_on_breakdown=add_on_breakdown,
        total_cost=total_cost,
        profit=profit,
        selling_annual=selling_annual,
        selling_monthly=selling_annual / MONTHS_PER_YEAR,
    )


def grand_total(*paths: CostPathPricing) -> float:
    """Combine independently priced cost paths."""
    return sum(path.selling_annual for path in paths)
