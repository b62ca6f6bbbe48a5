"""Generic estimation pipeline shared by every servest variant.

The EstimationPipeline runs the same four stages for housekeeping,
facilities-management and retrofit estimates:

1. **Normalize** — recurring tasks become daily-equivalent workload.
2. **Requirements** — workload becomes active headcount (or the contracted
   headcount is taken as given in input-based mode).
3. **Coverage** — active headcount is grossed up with relief staff.
4. **Price** — headcount, fleet and catalogs become cost paths, overheads,
   profit and the final selling price.

Each variant supplies a VariantAdapter implementing the four stage hooks.
Data flows strictly forward: every hook receives only the outputs of the
stages before it. The pipeline holds no state between calls, so running it
twice on the same input produces equal results.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from servest.exceptions import EstimationError

if TYPE_CHECKING:
    from pydantic import BaseModel

    from servest.models.results import EstimationResult

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


class VariantAdapter(Protocol):
    """Stage hooks a domain variant plugs into the pipeline."""

    variant: str
    state_type: type[BaseModel]

    def normalize(self, state: Any) -> Any:
        """Stage 1: derive daily-equivalent workload from the state."""
        ...

    def requirements(self, state: Any, workload: Any) -> Any:
        """Stage 2: derive active resource counts from the workload."""
        ...

    def coverage(self, state: Any, staffing: Any) -> Any:
        """Stage 3: add relief staff to the active counts."""
        ...

    def price(self, state: Any, workload: Any, staffing: Any, coverage: Any) -> EstimationResult:
        """Stage 4: cost everything and apply the pricing cascade."""
        ...


class EstimationPipeline:
    """Runs a VariantAdapter's four stages in order.

    Args:
        adapter: The variant whose entities the pipeline estimates.

    Example::

        from servest.variants.housekeeping import HousekeepingAdapter

        pipeline = EstimationPipeline(HousekeepingAdapter())
        result = pipeline.estimate(state)
    """

    def __init__(self, adapter: VariantAdapter) -> None:
        self._adapter = adapter

    @property
    def variant(self) -> str:
        return self._adapter.variant

    def estimate(self, state: BaseModel) -> EstimationResult:
        """Produce a fresh estimation result for ``state``.

        The state is never mutated.

        Raises:
            EstimationError: If ``state`` is not the adapter's state type.
            InvalidFrequencyError: If a task carries an unknown frequency.
        """
        adapter = self._adapter
        if not isinstance(state, adapter.state_type):
            msg = (
                f"{adapter.variant} pipeline expects {adapter.state_type.__name__}, "
                f"got {type(state).__name__}"
            )
            raise EstimationError(msg)

        workload = adapter.normalize(state)
        logger.debug("%s: workload normalised", adapter.variant)

        staffing = adapter.requirements(state, workload)
        logger.debug("%s: active headcount %.4f", adapter.variant, staffing.total)

        coverage = adapter.coverage(state, staffing)
        logger.debug("%s: coverage applied", adapter.variant)

        result = adapter.price(state, workload, staffing, coverage)
        logger.debug(
            "%s: final annual price %.2f", adapter.variant, result.final_price_annual
        )
        return result
