"""Time alignment of meal times against a glucose series."""

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from datetime import datetime

from glycemic_response.core.meal_impact.models import GlucoseSample

DEFAULT_TOLERANCE_MINUTES = 60


def find_closest_sample(
    samples: Sequence[GlucoseSample],
    target: datetime,
    tolerance_minutes: float = DEFAULT_TOLERANCE_MINUTES,
) -> GlucoseSample | None:
    """Find the sample closest in time to ``target``.

    Args:
        samples: Candidate samples, normally sorted by timestamp.
        target: Reference instant.
        tolerance_minutes: Largest acceptable distance from ``target``.

    Returns:
        The closest sample within tolerance, the earliest-listed one on
        ties, or None if the set is empty or nothing is close enough.
    """
    max_seconds = tolerance_minutes * 60
    closest: GlucoseSample | None = None
    min_diff = float("inf")

    for sample in samples:
        diff = abs((sample.timestamp - target).total_seconds())
        if diff < min_diff and diff <= max_seconds:
            min_diff = diff
            closest = sample

    return closest


def sort_samples(samples: Sequence[GlucoseSample]) -> list[GlucoseSample]:
    """Return the samples in ascending time order (stable for equal timestamps)."""
    return sorted(samples, key=lambda s: s.timestamp)


def slice_window(
    samples: Sequence[GlucoseSample],
    start: datetime,
    end: datetime,
    timestamps: Sequence[datetime] | None = None,
) -> list[GlucoseSample]:
    """Return the samples with ``start <= timestamp <= end``.

    ``samples`` must already be sorted by timestamp. Callers slicing the
    same series repeatedly can pass its precomputed ``timestamps``.
    """
    if timestamps is None:
        timestamps = [s.timestamp for s in samples]
    lo = bisect_left(timestamps, start)
    hi = bisect_right(timestamps, end)
    return list(samples[lo:hi])
