"""Post-meal glucose response curve extraction.

For one meal, looks at the glucose samples from shortly before the meal
to a few hours after it and derives baseline, peak, rise, return time
and the excursion area above baseline. Meals without enough surrounding
data produce no record at all rather than a guessed one.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta

from glycemic_response.core.meal_impact.alignment import (
    find_closest_sample,
    slice_window,
    sort_samples,
)
from glycemic_response.core.meal_impact.constants import (
    DEFAULT_THRESHOLDS,
    RESPONSE_RATING_TIERS,
    AnalysisThresholds,
)
from glycemic_response.core.meal_impact.enums import ResponseRating
from glycemic_response.core.meal_impact.models import (
    GlucoseSample,
    MealEvent,
    MealResponse,
)

UNNAMED_MEAL = "Unnamed meal"
MAX_NAME_FOODS = 3


def _minutes_between(start: datetime, end: datetime) -> int:
    return round((end - start).total_seconds() / 60)


def rate_response(
    rise: float,
    peak: float,
    tiers: Sequence[tuple[ResponseRating, float, float]] = RESPONSE_RATING_TIERS,
) -> ResponseRating:
    """Rate a response from its rise and absolute peak.

    Both the rise and the peak must be within a tier's bounds; tiers are
    tried in order and anything that fits none is poor.
    """
    for rating, max_rise, max_peak in tiers:
        if rise <= max_rise and peak <= max_peak:
            return rating
    return ResponseRating.poor


def calculate_auc(
    samples: Sequence[GlucoseSample],
    baseline: float,
) -> float:
    """Trapezoidal area of glucose above baseline, in mg/dL x minutes.

    Values below baseline count as zero, so the result is never negative.
    """
    auc = 0.0
    for prev, curr in zip(samples, samples[1:]):
        minutes = (curr.timestamp - prev.timestamp).total_seconds() / 60
        above_prev = max(0.0, prev.value - baseline)
        above_curr = max(0.0, curr.value - baseline)
        auc += (above_prev + above_curr) / 2 * minutes
    return round(auc, 1)


def find_return_sample(
    samples: Sequence[GlucoseSample],
    peak: GlucoseSample,
    threshold: float,
) -> GlucoseSample | None:
    """Find where glucose crosses back down to ``threshold`` after the peak.

    The match is the first sample after the peak at or below the
    threshold whose predecessor was still above it.
    """
    for prev, curr in zip(samples, samples[1:]):
        if (
            curr.timestamp > peak.timestamp
            and curr.value <= threshold
            and prev.value > threshold
        ):
            return curr
    return None


def build_meal_name(foods: Sequence[str], notes: str | None = None) -> str:
    """Name a meal after its first few foods, falling back to notes."""
    if foods:
        return ", ".join(foods[:MAX_NAME_FOODS])
    return notes or UNNAMED_MEAL


def extract_meal_response(
    meal: MealEvent,
    samples: Sequence[GlucoseSample],
    thresholds: AnalysisThresholds = DEFAULT_THRESHOLDS,
) -> MealResponse | None:
    """Build the glucose response record for one meal.

    Args:
        meal: The meal event.
        samples: Glucose samples covering at least the meal's window, in
            any order.
        thresholds: Window, tolerance and band settings.

    Returns:
        The MealResponse, or None when the window holds too few samples
        or no baseline sample lies near the pre-meal reference time.
    """
    meal_time = meal.timestamp
    baseline_time = meal_time - timedelta(minutes=thresholds.window_before_minutes)
    window_end = meal_time + timedelta(minutes=thresholds.window_after_minutes)

    window = slice_window(sort_samples(samples), baseline_time, window_end)
    if len(window) < thresholds.min_window_samples:
        return None

    baseline = find_closest_sample(
        window, baseline_time, thresholds.baseline_tolerance_minutes
    )
    if baseline is None:
        return None

    reading_1hr = find_closest_sample(
        window,
        meal_time + timedelta(hours=1),
        thresholds.checkpoint_tolerance_minutes,
    )
    reading_2hr = find_closest_sample(
        window,
        meal_time + timedelta(hours=2),
        thresholds.checkpoint_tolerance_minutes,
    )

    # max() keeps the first of equal values
    peak = max(window, key=lambda s: s.value)
    rise = peak.value - baseline.value

    returned = find_return_sample(
        window, peak, baseline.value + thresholds.return_band_mgdl
    )

    return MealResponse(
        meal_id=meal.id,
        meal_name=build_meal_name(meal.foods, meal.notes),
        meal_type=meal.meal_type,
        meal_time=meal_time,
        total_carbs=meal.total_carbs,
        glucose_before=baseline.value,
        glucose_1hr=reading_1hr.value if reading_1hr else None,
        glucose_2hr=reading_2hr.value if reading_2hr else None,
        glucose_peak=peak.value,
        peak_time_minutes=_minutes_between(meal_time, peak.timestamp),
        glucose_rise=rise,
        time_to_return=(
            _minutes_between(meal_time, returned.timestamp) if returned else None
        ),
        area_under_curve=calculate_auc(window, baseline.value),
        response_rating=rate_response(rise, peak.value),
        foods=meal.foods,
    )
