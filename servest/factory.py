"""Factory functions for creating pre-configured EstimationPipeline instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from servest.engine import EstimationPipeline
from servest.exceptions import EstimationError
from servest.models.facilities import FacilitiesState
from servest.models.housekeeping import HousekeepingState
from servest.models.retrofit import RetrofitState
from servest.variants.facilities import FacilitiesAdapter
from servest.variants.housekeeping import HousekeepingAdapter
from servest.variants.retrofit import RetrofitAdapter

if TYPE_CHECKING:
    from pydantic import BaseModel


def create_housekeeping_pipeline() -> EstimationPipeline:
    """Create a pipeline for housekeeping estimates.

    Example::

        from servest import create_housekeeping_pipeline, default_housekeeping_state

        pipeline = create_housekeeping_pipeline()
        result = pipeline.estimate(default_housekeeping_state())
    """
    return EstimationPipeline(HousekeepingAdapter())


def create_facilities_pipeline() -> EstimationPipeline:
    return EstimationPipeline(FacilitiesAdapter())


def create_retrofit_pipeline() -> EstimationPipeline:
    return EstimationPipeline(RetrofitAdapter())


def create_pipeline_for(state: BaseModel) -> EstimationPipeline:
    """Pick the pipeline matching the type of ``state``.

    Raises:
        EstimationError: If ``state`` is not an estimator state.
    """
    if isinstance(state, HousekeepingState):
        return create_housekeeping_pipeline()
    if isinstance(state, FacilitiesState):
        return create_facilities_pipeline()
    if isinstance(state, RetrofitState):
        return create_retrofit_pipeline()
    msg = f"No estimation pipeline for {type(state).__name__}"
    raise EstimationError(msg)
