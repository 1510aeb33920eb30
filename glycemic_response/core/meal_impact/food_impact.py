"""Per-food glucose impact scoring.

Groups meal responses by the foods they contain, averages the observed
rise and peak time per food, and looks for the companion foods that
coincide with the gentlest and harshest responses.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from statistics import fmean

from glycemic_response.core.meal_impact.constants import (
    CONFIDENCE_TIERS,
    DEFAULT_THRESHOLDS,
    FAST_ONSET_MINUTES,
    FAST_ONSET_POINTS,
    IMPACT_RATING_TIERS,
    MAX_RISE_COMPONENT,
    MID_ONSET_POINTS,
    RISE_COMPONENT_WEIGHT,
    SLOW_ONSET_MINUTES,
    AnalysisThresholds,
)
from glycemic_response.core.meal_impact.enums import Confidence, ImpactRating
from glycemic_response.core.meal_impact.models import (
    FoodImpactScore,
    FoodServing,
    MealResponse,
)


def calculate_impact_score(avg_rise: float, avg_peak_time: float) -> int:
    """Combine rise magnitude (80%) and onset speed (20%) into 0-100.

    Fast onset scores the full speed points, slow onset none, anything
    in between half.
    """
    rise_component = min(MAX_RISE_COMPONENT, (avg_rise / 100) * RISE_COMPONENT_WEIGHT)
    if avg_peak_time < FAST_ONSET_MINUTES:
        onset_component = FAST_ONSET_POINTS
    elif avg_peak_time > SLOW_ONSET_MINUTES:
        onset_component = 0.0
    else:
        onset_component = MID_ONSET_POINTS
    return max(0, min(100, round(rise_component + onset_component)))


def rate_impact(score: float) -> ImpactRating:
    for rating, upper in IMPACT_RATING_TIERS:
        if score < upper:
            return rating
    return ImpactRating.high


def rate_confidence(occurrences: int) -> Confidence:
    for confidence, minimum in CONFIDENCE_TIERS:
        if occurrences >= minimum:
            return confidence
    return Confidence.low


def find_pairings(
    pairings: dict[str, list[float]],
    min_samples: int,
) -> tuple[str | None, str | None]:
    """Pick the companion foods with the lowest and highest mean rise.

    Only companions seen together at least ``min_samples`` times count.
    Returns (best, worst); either may be None.
    """
    best: str | None = None
    worst: str | None = None
    best_avg = float("inf")
    worst_avg = float("-inf")

    for partner, rises in pairings.items():
        if len(rises) < min_samples:
            continue
        avg = fmean(rises)
        if avg < best_avg:
            best_avg, best = avg, partner
        if avg > worst_avg:
            worst_avg, worst = avg, partner

    return best, worst


def _carbs_by_food(servings: Iterable[FoodServing]) -> dict[str, list[float]]:
    lookup: dict[str, list[float]] = defaultdict(list)
    for serving in servings:
        if serving.carbs:
            lookup[serving.food_name].append(serving.carbs)
    return lookup


def score_food_impacts(
    responses: Sequence[MealResponse],
    servings: Iterable[FoodServing] = (),
    thresholds: AnalysisThresholds = DEFAULT_THRESHOLDS,
) -> list[FoodImpactScore]:
    """Score every food seen in enough qualifying meals.

    Args:
        responses: Qualifying meal responses.
        servings: Per-serving carbs from the meal-ingredient store.
        thresholds: Minimum food and pairing sample counts.

    Returns:
        Food scores sorted by impact score, gentlest first.
    """
    rises: dict[str, list[float]] = defaultdict(list)
    peak_times: dict[str, list[float]] = defaultdict(list)
    pairings: dict[str, dict[str, list[float]]] = defaultdict(lambda: defaultdict(list))

    for response in responses:
        # A food listed twice in one meal is still one occurrence
        foods = list(dict.fromkeys(response.foods))
        for food in foods:
            rises[food].append(response.glucose_rise)
            peak_times[food].append(response.peak_time_minutes)
            for other in foods:
                if other != food:
                    pairings[food][other].append(response.glucose_rise)

    carbs = _carbs_by_food(servings)

    scores = []
    for food, food_rises in rises.items():
        occurrences = len(food_rises)
        if occurrences < thresholds.min_food_occurrences:
            continue

        avg_rise = fmean(food_rises)
        avg_peak_time = fmean(peak_times[food])
        food_carbs = carbs.get(food)
        best, worst = find_pairings(pairings[food], thresholds.min_pairing_samples)
        impact_score = calculate_impact_score(avg_rise, avg_peak_time)

        scores.append(
            FoodImpactScore(
                food_name=food,
                occurrences=occurrences,
                avg_glucose_rise=round(avg_rise, 1),
                avg_peak_time=round(avg_peak_time, 1),
                avg_carbs_per_serving=round(fmean(food_carbs), 1) if food_carbs else 0.0,
                impact_score=impact_score,
                impact_rating=rate_impact(impact_score),
                best_pairing=best,
                worst_pairing=worst,
                confidence=rate_confidence(occurrences),
            )
        )

    scores.sort(key=lambda s: s.impact_score)
    return scores
