"""Variant adapters plugged into the generic estimation pipeline."""

from servest.variants.facilities import FacilitiesAdapter
from servest.variants.housekeeping import HousekeepingAdapter
from servest.variants.retrofit import RetrofitAdapter

__all__ = [
    "FacilitiesAdapter",
    "HousekeepingAdapter",
    "RetrofitAdapter",
]
