"""Unit normalizer — converts recurring tasks into daily-equivalent workload.

A task of 700 sqm cleaned weekly and one of 100 sqm cleaned daily both
represent 100 sqm of work per day. Normalising every task to this
daily-equivalent rate lets workloads with different frequencies be summed
per resource bucket and per machine.
"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

from servest.exceptions import InvalidFrequencyError
from servest.models.enums import Bucket, Frequency

if TYPE_CHECKING:
    from collections.abc import Iterable

    from servest.models.housekeeping import AreaTask

# Fixed day counts; a month is 30 days and a half-year 182.
_FREQUENCY_DIVISORS: dict[Frequency, int] = {
    Frequency.DAILY: 1,
    Frequency.WEEKLY: 7,
    Frequency.BIWEEKLY: 14,
    Frequency.MONTHLY: 30,
    Frequency.QUARTERLY: 90,
    Frequency.SEMIANNUAL: 182,
    Frequency.ANNUAL: 365,
}

# Visits per year, used when a service is priced per visit.
_ANNUAL_OCCURRENCES: dict[Frequency, int] = {
    Frequency.DAILY: 365,
    Frequency.WEEKLY: 52,
    Frequency.BIWEEKLY: 26,
    Frequency.MONTHLY: 12,
    Frequency.QUARTERLY: 4,
    Frequency.SEMIANNUAL: 2,
    Frequency.ANNUAL: 1,
}


def parse_frequency(value: Frequency | str) -> Frequency:
    """Coerce ``value`` to a Frequency, case-insensitively.

    Raises:
        InvalidFrequencyError: If the value names no known frequency.
    """
    if isinstance(value, Frequency):
        return value
    if isinstance(value, str):
        try:
            return Frequency(value.strip().lower())
        except ValueError:
            pass
    raise InvalidFrequencyError(value)


def frequency_to_divisor(frequency: Frequency | str) -> int:
    """Return the number of days one occurrence of ``frequency`` spans."""
    return _FREQUENCY_DIVISORS[parse_frequency(frequency)]


def annual_occurrences(frequency: Frequency | str) -> int:
    """Return how many times per year a task at ``frequency`` happens."""
    return _ANNUAL_OCCURRENCES[parse_frequency(frequency)]


def to_daily_equivalent(
    quantity: float,
    frequency: Frequency | str,
    repetitions: float | None = None,
) -> float:
    """Normalise ``quantity`` performed at ``frequency`` to a per-day rate.

    ``repetitions`` is the number of passes per day. It is honoured only for
    daily tasks; any other frequency, or a missing or zero count, uses 1.
    """
    freq = parse_frequency(frequency)
    divisor = _FREQUENCY_DIVISORS[freq]
    multiplier = repetitions if freq is Frequency.DAILY and repetitions else 1
    return (quantity / divisor) * multiplier


def daily_totals_by_bucket(tasks: Iterable[AreaTask]) -> dict[Bucket, float]:
    """Sum daily-equivalent area per bucket; every bucket appears in the result."""
    totals: dict[Bucket, float] = {bucket: 0.0 for bucket in Bucket}
    for task in tasks:
        totals[task.bucket] += to_daily_equivalent(
            task.sqm, task.frequency, task.daily_frequency
        )
    return totals


def daily_totals_by_resource(
    tasks: Iterable[AreaTask],
    bucket: Bucket = Bucket.MACHINE,
) -> dict[str, float]:
    """Sum daily-equivalent area per machine id.

    Only tasks in ``bucket`` that name a machine contribute, since each
    machine serves its own subset of areas.
    """
    totals: dict[str, float] = defaultdict(float)
    for task in tasks:
        if task.bucket == bucket and task.machine_id:
            totals[task.machine_id] += to_daily_equivalent(
                task.sqm, task.frequency, task.daily_frequency
            )
    return dict(totals)
