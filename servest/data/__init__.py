"""Defaults, library merging and legacy payload migration."""

from servest.data.defaults import (
    default_asset_types,
    default_facilities_state,
    default_housekeeping_state,
    default_labor_library,
    default_machines,
    default_retrofit_state,
    default_technician_library,
    sample_housekeeping_state,
)
from servest.data.library import merge_by_key, merge_technician_library
from servest.data.migration import migrate_facilities_payload, migrate_housekeeping_payload

__all__ = [
    "default_asset_types",
    "default_facilities_state",
    "default_housekeeping_state",
    "default_labor_library",
    "default_machines",
    "default_retrofit_state",
    "default_technician_library",
    "merge_by_key",
    "merge_technician_library",
    "migrate_facilities_payload",
    "migrate_housekeeping_payload",
    "sample_housekeeping_state",
]
