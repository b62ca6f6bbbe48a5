"""Resource requirement calculator — workload to headcount.

Counts are continuous: 3.33 cleaners is a meaningful answer and is carried
forward unrounded. A zero or missing capacity yields a count of zero rather
than an error, since it means no productivity has been configured yet.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from servest.models.enums import EstimationMode


@dataclass(frozen=True)
class StaffingRequirement:
    """Active headcount before relief staffing.

    ``bucket_counts`` holds labour derived from manual buckets and
    ``resource_counts`` labour (or units) tied to individual machines or
    technician types.
    """

    mode: EstimationMode
    total: float
    bucket_counts: dict[str, float] = field(default_factory=dict)
    resource_counts: dict[str, float] = field(default_factory=dict)


def required_count(daily_workload: float, capacity_rate: float | None) -> float:
    """Return how many resources cover ``daily_workload`` at ``capacity_rate``."""
    if not capacity_rate or capacity_rate <= 0:
        return 0.0
    return daily_workload / capacity_rate


def machine_capacity(throughput_per_hour: float, effective_hours_per_shift: float) -> float:
    """Area one machine operator covers in a shift."""
    return throughput_per_hour * effective_hours_per_shift


def output_based_staffing(
    bucket_counts: dict[str, float],
    resource_counts: dict[str, float],
) -> StaffingRequirement:
    """Total headcount is the sum of every workload-derived count."""
    total = sum(bucket_counts.values()) + sum(resource_counts.values())
    return StaffingRequirement(
        mode=EstimationMode.OUTPUT_BASE,
        total=total,
        bucket_counts=dict(bucket_counts),
        resource_counts=dict(resource_counts),
    )


def input_based_staffing(
    supplied_count: float,
    resource_counts: dict[str, float] | None = None,
) -> StaffingRequirement:
    """Total headcount is the contractually fixed figure.

    ``resource_counts`` is carried for fleet sizing only and does not
    contribute to the total.
    """
    return StaffingRequirement(
        mode=EstimationMode.INPUT_BASE,
        total=supplied_count,
        resource_counts=dict(resource_counts or {}),
    )
