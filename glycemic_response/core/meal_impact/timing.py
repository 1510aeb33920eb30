"""Per-meal-type timing analysis.

Buckets each meal type's responses by local hour of day and reports the
hours with the lowest and highest mean rise. Meal types without enough
history get static guidance flagged with ``sample_size == 0``.
"""

from collections import defaultdict
from collections.abc import Sequence
from datetime import datetime, tzinfo
from statistics import fmean

from glycemic_response.core.meal_impact.constants import (
    DEFAULT_MEAL_TIMING,
    DEFAULT_THRESHOLDS,
    AnalysisThresholds,
)
from glycemic_response.core.meal_impact.enums import MealType
from glycemic_response.core.meal_impact.models import MealResponse, OptimalMealTiming


def format_hour(hour: int) -> str:
    """Format an hour of day as a 12-hour clock label, e.g. ``7:00 PM``."""
    h = hour % 24
    if h == 0:
        return "12:00 AM"
    if h == 12:
        return "12:00 PM"
    if h < 12:
        return f"{h}:00 AM"
    return f"{h - 12}:00 PM"


def local_hour(moment: datetime, tz: tzinfo | None = None) -> int:
    return moment.astimezone(tz).hour if tz is not None else moment.hour


def default_timing(meal_type: MealType) -> OptimalMealTiming:
    """Static timing guidance for a meal type with no usable history."""
    for default_type, time_range, best, worst, recommendation in DEFAULT_MEAL_TIMING:
        if default_type == meal_type:
            return OptimalMealTiming(
                meal_type=meal_type,
                optimal_time_range=time_range,
                avg_glucose_response=0.0,
                best_hour=best,
                worst_hour=worst,
                recommendation=recommendation,
                sample_size=0,
                is_default=True,
            )
    raise ValueError(f"No default timing for meal type {meal_type!r}")


def timing_recommendation(
    meal_type: MealType,
    best_hour: int,
    rise_gap: float,
    consistent_gap: float,
) -> str:
    if abs(rise_gap) < consistent_gap:
        return f"Your {meal_type} timing is consistent - keep it up!"
    return (
        f"Try having {meal_type} around {format_hour(best_hour)} "
        "for better glucose response"
    )


def hourly_average_rise(
    responses: Sequence[MealResponse],
    min_samples: int,
    tz: tzinfo | None = None,
) -> dict[int, float]:
    """Mean rise per local hour, for hours with at least ``min_samples`` meals."""
    buckets: dict[int, list[float]] = defaultdict(list)
    for response in responses:
        buckets[local_hour(response.meal_time, tz)].append(response.glucose_rise)
    return {
        hour: fmean(rises)
        for hour, rises in sorted(buckets.items())
        if len(rises) >= min_samples
    }


def optimize_meal_timing(
    responses: Sequence[MealResponse],
    thresholds: AnalysisThresholds = DEFAULT_THRESHOLDS,
    tz: tzinfo | None = None,
) -> list[OptimalMealTiming]:
    """Find the best and worst hour of day for each meal type.

    Args:
        responses: Qualifying meal responses.
        thresholds: Minimum responses per meal type and per hour bucket.
        tz: Zone for hour-of-day bucketing; None uses each timestamp's own.

    Returns:
        One record per meal type, in breakfast/lunch/dinner/snack order.
    """
    results = []
    for meal_type in MealType:
        typed = [r for r in responses if r.meal_type == meal_type]
        if len(typed) < thresholds.min_timing_responses:
            results.append(default_timing(meal_type))
            continue

        hourly = hourly_average_rise(typed, thresholds.min_hour_samples, tz)
        if not hourly:
            results.append(default_timing(meal_type))
            continue

        best_hour = min(hourly, key=hourly.__getitem__)
        worst_hour = max(hourly, key=hourly.__getitem__)

        results.append(
            OptimalMealTiming(
                meal_type=meal_type,
                optimal_time_range=f"{format_hour(best_hour)} - {format_hour(best_hour + 1)}",
                avg_glucose_response=round(fmean(r.glucose_rise for r in typed), 1),
                best_hour=best_hour,
                worst_hour=worst_hour,
                recommendation=timing_recommendation(
                    meal_type,
                    best_hour,
                    hourly[best_hour] - hourly[worst_hour],
                    thresholds.consistent_timing_gap_mgdl,
                ),
                sample_size=len(typed),
                best_hour_avg_rise=round(hourly[best_hour], 1),
                worst_hour_avg_rise=round(hourly[worst_hour], 1),
            )
        )

    return results
