"""Best/worst meal ranking by a composite response score."""

from collections.abc import Sequence

from glycemic_response.core.meal_impact.constants import (
    FAST_PEAK_MINUTES,
    FAST_PEAK_PENALTY,
    HIGH_PEAK_MGDL,
    HIGH_PEAK_WEIGHT,
    SLOW_RETURN_MINUTES,
    SLOW_RETURN_PENALTY,
)
from glycemic_response.core.meal_impact.models import (
    BestWorstMeals,
    MealRanking,
    MealResponse,
)


def calculate_response_score(response: MealResponse) -> float:
    """Score a meal response; lower is better.

    Starts from the raw rise and adds penalties for a peak above 180
    mg/dL, a peak within 30 minutes and a return slower than 180 minutes.
    """
    score = response.glucose_rise

    if response.glucose_peak > HIGH_PEAK_MGDL:
        score += (response.glucose_peak - HIGH_PEAK_MGDL) * HIGH_PEAK_WEIGHT
    if response.peak_time_minutes < FAST_PEAK_MINUTES:
        score += FAST_PEAK_PENALTY
    if response.time_to_return is not None and response.time_to_return > SLOW_RETURN_MINUTES:
        score += SLOW_RETURN_PENALTY

    return score


def _to_ranking(rank: int, response: MealResponse, score: float) -> MealRanking:
    return MealRanking(
        rank=rank,
        meal_id=response.meal_id,
        meal_name=response.meal_name,
        meal_type=response.meal_type,
        total_carbs=response.total_carbs,
        glucose_response_score=round(score, 1),
        foods=response.foods,
        date=response.meal_time.date(),
    )


def rank_meals(responses: Sequence[MealResponse], limit: int = 5) -> BestWorstMeals:
    """Pick the ``limit`` best and worst meals.

    Both lists are ranked from 1: best[0] has the lowest score, worst[0]
    the highest.
    """
    if limit <= 0 or not responses:
        return BestWorstMeals()

    scored = sorted(
        ((calculate_response_score(r), r) for r in responses),
        key=lambda pair: pair[0],
    )

    best = tuple(
        _to_ranking(i, r, score) for i, (score, r) in enumerate(scored[:limit], start=1)
    )
    worst = tuple(
        _to_ranking(i, r, score)
        for i, (score, r) in enumerate(reversed(scored[-limit:]), start=1)
    )
    return BestWorstMeals(best=best, worst=worst)
