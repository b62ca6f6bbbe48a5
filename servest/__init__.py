"""Servest service-contract cost estimation.

Usage::

    from servest import create_housekeeping_pipeline, default_housekeeping_state

    pipeline = create_housekeeping_pipeline()
    result = pipeline.estimate(default_housekeeping_state())
"""

from servest.data.defaults import (
    default_facilities_state,
    default_housekeeping_state,
    default_retrofit_state,
    default_technician_library,
)
from servest.engine import EstimationPipeline, VariantAdapter
from servest.exceptions import (
    EstimationError,
    InvalidFrequencyError,
    InvalidTransitionError,
    MigrationError,
    ServestError,
)
from servest.factory import (
    create_facilities_pipeline,
    create_housekeeping_pipeline,
    create_pipeline_for,
    create_retrofit_pipeline,
)
from servest.models.enums import EstimationMode, Frequency, ProjectStatus
from servest.models.facilities import FacilitiesState
from servest.models.housekeeping import HousekeepingState
from servest.models.results import (
    CostPathPricing,
    EstimationResult,
    FacilitiesResult,
    HousekeepingResult,
    RetrofitResult,
)
from servest.models.retrofit import RetrofitState

__all__ = [
    "CostPathPricing",
    "EstimationError",
    "EstimationMode",
    "EstimationPipeline",
    "EstimationResult",
    "FacilitiesResult",
    "FacilitiesState",
    "Frequency",
    "HousekeepingResult",
    "HousekeepingState",
    "InvalidFrequencyError",
    "InvalidTransitionError",
    "MigrationError",
    "ProjectStatus",
    "RetrofitResult",
    "RetrofitState",
    "ServestError",
    "VariantAdapter",
    "create_facilities_pipeline",
    "create_housekeeping_pipeline",
    "create_pipeline_for",
    "create_retrofit_pipeline",
    "default_facilities_state",
    "default_housekeeping_state",
    "default_retrofit_state",
    "default_technician_library",
]
