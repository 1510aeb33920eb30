"""Meal response aggregation over a lookback window."""

from collections.abc import Iterable, Sequence
from datetime import timedelta

from glycemic_response.core.meal_impact.alignment import slice_window, sort_samples
from glycemic_response.core.meal_impact.constants import (
    DEFAULT_THRESHOLDS,
    AnalysisThresholds,
)
from glycemic_response.core.meal_impact.models import (
    GlucoseSample,
    MealEvent,
    MealResponse,
)
from glycemic_response.core.meal_impact.response_curve import extract_meal_response


def build_meal_responses(
    meals: Iterable[MealEvent],
    samples: Sequence[GlucoseSample],
    thresholds: AnalysisThresholds = DEFAULT_THRESHOLDS,
) -> tuple[MealResponse, ...]:
    """Extract a response for every meal with enough surrounding data.

    The glucose series is sorted once and sliced per meal, so one fetch
    covering all meal windows is enough.

    Args:
        meals: Meals in the lookback window.
        samples: Glucose samples spanning every meal window.
        thresholds: Analysis thresholds.

    Returns:
        Qualifying responses, newest meal first. Meals that lack data
        are simply absent.
    """
    ordered = sort_samples(samples)
    timestamps = [s.timestamp for s in ordered]
    before = timedelta(minutes=thresholds.window_before_minutes)
    after = timedelta(minutes=thresholds.window_after_minutes)

    responses = []
    for meal in meals:
        window = slice_window(
            ordered, meal.timestamp - before, meal.timestamp + after, timestamps
        )
        response = extract_meal_response(meal, window, thresholds)
        if response is not None:
            responses.append(response)

    responses.sort(key=lambda r: r.meal_time, reverse=True)
    return tuple(responses)
