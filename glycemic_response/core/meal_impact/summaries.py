"""Daily meal summaries and head-to-head meal comparison."""

import datetime as dt
from collections import defaultdict
from collections.abc import Sequence
from statistics import fmean

from glycemic_response.core.meal_impact.constants import (
    DEFAULT_THRESHOLDS,
    AnalysisThresholds,
)
from glycemic_response.core.meal_impact.enums import ComparisonChoice
from glycemic_response.core.meal_impact.insights import GOOD_RATINGS
from glycemic_response.core.meal_impact.models import (
    ComparedMeal,
    DailyMealSummary,
    MealComparison,
    MealResponse,
)
from glycemic_response.core.meal_impact.ranking import calculate_response_score


def summarize_days(
    responses: Sequence[MealResponse],
    tz: dt.tzinfo | None = None,
) -> list[DailyMealSummary]:
    """Summarize meal responses per local calendar day, newest day first."""
    by_day: dict[dt.date, list[MealResponse]] = defaultdict(list)
    for response in responses:
        moment = response.meal_time.astimezone(tz) if tz is not None else response.meal_time
        by_day[moment.date()].append(response)

    summaries = []
    for day, meals in sorted(by_day.items(), reverse=True):
        best = min(meals, key=calculate_response_score)
        worst = max(meals, key=calculate_response_score)
        in_range = sum(1 for m in meals if m.response_rating in GOOD_RATINGS)
        summaries.append(
            DailyMealSummary(
                date=day,
                total_meals=len(meals),
                total_carbs=round(sum(m.total_carbs for m in meals), 1),
                avg_glucose_response=round(fmean(m.glucose_rise for m in meals), 1),
                best_meal=best.meal_name,
                worst_meal=worst.meal_name if len(meals) > 1 else None,
                in_range_meals_pct=round(in_range / len(meals) * 100),
            )
        )
    return summaries


def _matches(response: MealResponse, query: str) -> bool:
    needle = query.lower()
    return needle in response.meal_name.lower() or any(
        needle in food.lower() for food in response.foods
    )


def _compared(name: str, meals: Sequence[MealResponse]) -> ComparedMeal:
    return ComparedMeal(
        name=name,
        avg_glucose_rise=round(fmean(m.glucose_rise for m in meals), 1),
        avg_peak_time=round(fmean(m.peak_time_minutes for m in meals), 1),
        occurrences=len(meals),
    )


def compare_meals(
    responses: Sequence[MealResponse],
    name_a: str,
    name_b: str,
    thresholds: AnalysisThresholds = DEFAULT_THRESHOLDS,
) -> MealComparison | None:
    """Compare the average response to two meals or foods.

    Each name is matched case-insensitively against meal names and food
    names. Returns None unless both sides match enough meals.
    """
    meals_a = [r for r in responses if _matches(r, name_a)]
    meals_b = [r for r in responses if _matches(r, name_b)]
    if (
        len(meals_a) < thresholds.min_comparison_matches
        or len(meals_b) < thresholds.min_comparison_matches
    ):
        return None

    side_a = _compared(name_a, meals_a)
    side_b = _compared(name_b, meals_b)
    rise_diff = fmean(m.glucose_rise for m in meals_a) - fmean(
        m.glucose_rise for m in meals_b
    )
    peak_diff = fmean(m.peak_time_minutes for m in meals_a) - fmean(
        m.peak_time_minutes for m in meals_b
    )

    recommended = ComparisonChoice.equal
    reasoning = "Both options have similar glucose impact"
    if abs(rise_diff) > thresholds.comparison_rise_gap_mgdl:
        if rise_diff < 0:
            recommended, lower = ComparisonChoice.a, name_a
        else:
            recommended, lower = ComparisonChoice.b, name_b
        reasoning = f"{lower} causes {round(abs(rise_diff))} mg/dL less glucose rise"

    return MealComparison(
        meal_a=side_a,
        meal_b=side_b,
        glucose_rise_diff=round(rise_diff, 1),
        peak_time_diff=round(peak_diff, 1),
        recommended=recommended,
        reasoning=reasoning,
    )
