"""Upgrade saved estimator payloads to the current model shapes.

Older projects were stored as camelCase JSON with fields that have since
been renamed or moved. These helpers rewrite such payloads into plain dicts
that ``FacilitiesState.model_validate`` / ``HousekeepingState.model_validate``
accept. Missing sections are filled from the defaults provider; anything the
models do not know about is left in place and ignored at validation time.
"""

from __future__ import annotations

import copy
import logging
import re
from typing import Any

from servest.data.defaults import default_facilities_state, default_housekeeping_state
from servest.exceptions import MigrationError
from servest.models.enums import EstimationMode, Responsibility

logger = logging.getLogger(__name__)

CURRENT_FACILITIES_SCHEMA = 2
LEGACY_SHIFT_HOURS = 6

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")

# Keys whose values are user-keyed maps rather than records.
_OPAQUE_MAPS = {"category_overrides"}

_BUCKET_ALIASES = {
    "machine": "machine",
    "manual-detail": "manual_detail",
    "manual_detail": "manual_detail",
    "manual-general": "manual_general",
    "manual_general": "manual_general",
}


def to_snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub(r"_\1", name).lower()


def snake_keys(value: Any) -> Any:
    """Recursively convert mapping keys from camelCase to snake_case."""
    if isinstance(value, dict):
        converted = {}
        for key, item in value.items():
            new_key = to_snake_case(key) if isinstance(key, str) else key
            converted[new_key] = item if new_key in _OPAQUE_MAPS else snake_keys(item)
        return converted
    if isinstance(value, list):
        return [snake_keys(item) for item in value]
    return value


def _require_mapping(payload: Any, variant: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        msg = f"{variant} payload must be a mapping, got {type(payload).__name__}"
        raise MigrationError(msg)
    return snake_keys(copy.deepcopy(payload))


def _list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if not isinstance(value, list):
        value = []
    data[key] = value
    return value


def _section(data: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = data.get(key)
    return value if isinstance(value, dict) else None


def _rename(record: dict[str, Any], old: str, new: str) -> None:
    if old in record:
        value = record.pop(old)
        record.setdefault(new, value)


def _fill_zeroes(record: dict[str, Any], defaults: dict[str, Any]) -> None:
    """Replace missing or falsy values, as the saved UI state left them blank."""
    for key, value in defaults.items():
        if not record.get(key):
            record[key] = value


def _lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


# ---------------------------------------------------------------------------
# Facilities management
# ---------------------------------------------------------------------------


def _migrate_markup(section: dict[str, Any]) -> None:
    _rename(section, "markup_percent", "profit_markup_percent")


def migrate_facilities_payload(payload: Any) -> dict[str, Any]:
    """Rewrite a saved FM project into the current ``FacilitiesState`` shape.

    Raises:
        MigrationError: If ``payload`` is not a mapping.
    """
    data = _require_mapping(payload, "facilities")
    defaults = default_facilities_state()

    assumptions = _section(data, "global_assumptions") or _section(data, "assumptions")
    data.pop("global_assumptions", None)
    if assumptions is None:
        assumptions = defaults.assumptions.model_dump(mode="json")
    else:
        _rename(assumptions, "total_coverage_days_per_year", "coverage_days_required")
        _rename(assumptions, "shift_length", "shift_length_hours")
        if not assumptions.get("coverage_days_required"):
            assumptions["coverage_days_required"] = assumptions.get("working_days_per_year") or 365
        assumptions.setdefault("contract_mode", EstimationMode.OUTPUT_BASE.value)
        _fill_zeroes(
            assumptions,
            {
                "annual_leave_days": 30,
                "sick_leave_days": 10,
                "public_holiday_days": 10,
                "weekly_off_days": 52,
            },
        )
    data["assumptions"] = assumptions

    library = _list(data, "technician_library")
    for tech in library:
        if "skill_tags" not in tech or not isinstance(tech["skill_tags"], list):
            tech["skill_tags"] = []
        tech.setdefault("can_supervise", False)

    if not isinstance(data.get("deployed_technicians"), list):
        deployed = []
        if assumptions.get("contract_mode") == EstimationMode.INPUT_BASE.value:
            deployed = [
                {
                    "id": f"deployed-{tech['id']}",
                    "technician_type_id": tech["id"],
                    "quantity": tech["input_base_count"],
                }
                for tech in library
                if (tech.get("input_base_count") or 0) > 0
            ]
        data["deployed_technicians"] = deployed

    supervisory = data.pop("supervisory", None)
    if "support_roles" not in data:
        roles = []
        if isinstance(supervisory, dict) and not (
            supervisory.get("mode") or supervisory.get("manual_count")
        ):
            roles = supervisory.get("support_roles") or []
        data["support_roles"] = roles

    inventory = _list(data, "asset_inventory")
    for asset in _list(data, "asset_types"):
        tasks = asset.get("ppm_tasks")
        asset["ppm_tasks"] = tasks if isinstance(tasks, list) else []
        for task in asset["ppm_tasks"]:
            task["technician_type_id"] = task.get("technician_type_id") or ""
            task["frequency"] = _lower(task.get("frequency"))

        reactive = asset.get("reactive")
        if not isinstance(reactive, dict):
            reactive = {}
        if "estimated_calls_per_year" in reactive:
            legacy_calls = reactive.pop("estimated_calls_per_year")
            if not reactive.get("reactive_calls_percent"):
                reactive["reactive_calls_percent"] = legacy_calls or 0
        asset["reactive"] = {
            "technician_type_id": reactive.get("technician_type_id") or "",
            "reactive_calls_percent": reactive.get("reactive_calls_percent") or 0,
            "avg_hours_per_call": reactive.get("avg_hours_per_call") or 0,
            "is_monthly_rate": bool(reactive.get("is_monthly_rate", False)),
        }

        if not asset.get("responsibility"):
            owned = next(
                (inv for inv in inventory if inv.get("asset_type_id") == asset.get("id")),
                None,
            )
            asset["responsibility"] = (
                owned.get("responsibility") if owned else None
            ) or Responsibility.IN_HOUSE.value

    for inv in inventory:
        inv.pop("responsibility", None)

    _list(data, "materials_catalog")
    _list(data, "consumables_catalog")

    for service in _list(data, "specialized_services"):
        service.setdefault("linked_asset_type_ids", [])
        if "frequency" in service:
            service["frequency"] = _lower(service["frequency"])
        if "monthly_cost" in service and service.get("annual_cost") is None:
            monthly = service.pop("monthly_cost")
            service["annual_cost"] = (monthly or 0) * 12

    contract = _section(data, "contract_model")
    if contract is None:
        data["contract_model"] = defaults.contract_model.model_dump(mode="json")
    else:
        _rename(contract, "global", "global_model")
        if not contract.get("category_overrides"):
            contract["category_overrides"] = {}

    cost_config = _section(data, "cost_config")
    if cost_config is None:
        data["cost_config"] = defaults.cost_config.model_dump(mode="json")
    else:
        for path in ("in_house", "subcontract"):
            section = _section(cost_config, path)
            if section is not None:
                _migrate_markup(section)

    if _section(data, "project_info") is None:
        data["project_info"] = {}

    previous = data.get("schema_version")
    if previous != CURRENT_FACILITIES_SCHEMA:
        logger.debug(
            "Migrated facilities payload from schema %s to %s", previous, CURRENT_FACILITIES_SCHEMA
        )
    data["schema_version"] = CURRENT_FACILITIES_SCHEMA
    return data


# ---------------------------------------------------------------------------
# Housekeeping
# ---------------------------------------------------------------------------


def migrate_housekeeping_payload(payload: Any) -> dict[str, Any]:
    """Rewrite a saved housekeeping project into the current ``HousekeepingState`` shape.

    Raises:
        MigrationError: If ``payload`` is not a mapping.
    """
    data = _require_mapping(payload, "housekeeping")
    defaults = default_housekeeping_state()

    if _section(data, "project_info") is None:
        data["project_info"] = {}

    site = _section(data, "site")
    if site is None:
        data["site"] = defaults.site.model_dump(mode="json")
    else:
        _rename(site, "total_coverage_days_per_year", "coverage_days_required")
        site.setdefault("estimation_mode", EstimationMode.OUTPUT_BASE.value)
        if site.get("input_base_cleaners") is None:
            site["input_base_cleaners"] = 0
        _fill_zeroes(
            site,
            {
                "coverage_days_required": 365,
                "annual_leave_days": 30,
                "sick_leave_days": 10,
                "public_holiday_days": 10,
                "weekly_off_days": 52,
                "shift_length_hours": 12,
            },
        )

    productivity = _section(data, "productivity")
    if productivity is None:
        data["productivity"] = defaults.productivity.model_dump(mode="json")
    else:
        if "detailed_cleaning_sqm_per_hour" in productivity:
            hourly = productivity.pop("detailed_cleaning_sqm_per_hour")
            productivity["manual_detail_sqm_per_shift"] = hourly * LEGACY_SHIFT_HOURS
        if "standard_cleaning_sqm_per_hour" in productivity:
            hourly = productivity.pop("standard_cleaning_sqm_per_hour")
            productivity["manual_general_sqm_per_shift"] = hourly * LEGACY_SHIFT_HOURS
        productivity.pop("high_level_cleaning_sqm_per_hour", None)

    for area in _list(data, "areas"):
        area["frequency"] = _lower(area.get("frequency"))
        bucket = area.get("bucket")
        if isinstance(bucket, str):
            area["bucket"] = _BUCKET_ALIASES.get(bucket.lower(), bucket)

    costs = _section(data, "costs")
    if costs is None:
        data["costs"] = defaults.costs.model_dump(mode="json")
    else:
        _rename(costs, "cleaner_monthly_salary", "cleaner_salary")
        if "cleaner_benefits_percent" in costs:
            percent = costs.pop("cleaner_benefits_percent")
            if costs.get("cleaner_salary"):
                costs["benefits_allowances"] = round(costs["cleaner_salary"] * percent / 100)
        _rename(costs, "profit_margin_percent", "profit_markup_percent")
        for key, value in defaults.costs.model_dump().items():
            if costs.get(key) is None:
                costs[key] = value

    _list(data, "machines")
    return data
