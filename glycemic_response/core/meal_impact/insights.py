"""Descriptive meal pattern insights.

Turns food scores, timing records and the raw responses into short
templated statements. Every insight has a minimum-sample rule; when the
rule is not met the insight is left out rather than weakened.
"""

from collections.abc import Sequence
from statistics import fmean

from glycemic_response.core.meal_impact.constants import (
    DEFAULT_THRESHOLDS,
    AnalysisThresholds,
)
from glycemic_response.core.meal_impact.enums import (
    ImpactRating,
    InsightCategory,
    InsightType,
    ResponseRating,
)
from glycemic_response.core.meal_impact.models import (
    FoodImpactScore,
    MealPatternInsight,
    MealResponse,
    OptimalMealTiming,
)
from glycemic_response.core.meal_impact.timing import format_hour

GOOD_RATINGS = frozenset({ResponseRating.excellent, ResponseRating.good})


def _food_list_insight(
    foods: Sequence[FoodImpactScore],
    insight_type: InsightType,
    title: str,
    description: str,
    tip: str,
) -> MealPatternInsight:
    avg_rise = fmean(f.avg_glucose_rise for f in foods)
    return MealPatternInsight(
        insight_type=insight_type,
        category=InsightCategory.food_combination,
        title=title,
        description=f"{', '.join(f.food_name for f in foods)} {description}",
        supporting_data=f"Average glucose rise: {round(avg_rise)} mg/dL",
        actionable_tip=tip,
    )


def food_insights(
    food_scores: Sequence[FoodImpactScore],
    thresholds: AnalysisThresholds = DEFAULT_THRESHOLDS,
) -> list[MealPatternInsight]:
    """Low-impact foods, high-impact foods and effective pairings."""
    insights = []
    frequent = [
        f for f in food_scores if f.occurrences >= thresholds.min_insight_food_occurrences
    ]

    low = [f for f in frequent if f.impact_rating == ImpactRating.low]
    if low:
        insights.append(
            _food_list_insight(
                low[: thresholds.max_insight_foods],
                InsightType.positive,
                "Foods That Work Well For You",
                "consistently show minimal glucose impact",
                "Consider incorporating these foods more regularly as glucose-friendly options",
            )
        )

    high = sorted(
        (f for f in frequent if f.impact_rating == ImpactRating.high),
        key=lambda f: f.impact_score,
        reverse=True,
    )
    if high:
        insights.append(
            _food_list_insight(
                high[: thresholds.max_insight_foods],
                InsightType.negative,
                "Foods That Cause Larger Glucose Spikes",
                "tend to cause higher glucose responses",
                "Try pairing these with protein or fiber, or reduce portion sizes",
            )
        )

    paired = [f for f in frequent if f.best_pairing]
    for food in paired[: thresholds.max_pairing_insights]:
        insights.append(
            MealPatternInsight(
                insight_type=InsightType.positive,
                category=InsightCategory.food_combination,
                title="Effective Food Pairing",
                description=(
                    f"{food.food_name} paired with {food.best_pairing} "
                    "shows better glucose response"
                ),
                supporting_data=f"Based on {food.occurrences} meals",
                actionable_tip=(
                    f"When eating {food.food_name}, consider adding {food.best_pairing}"
                ),
            )
        )

    return insights


def hour_distance(a: int, b: int) -> int:
    """Hours between two hours of day, going the short way round midnight."""
    d = abs(a - b) % 24
    return min(d, 24 - d)


def timing_insights(
    timing: Sequence[OptimalMealTiming],
    thresholds: AnalysisThresholds = DEFAULT_THRESHOLDS,
) -> list[MealPatternInsight]:
    """Meal types whose best and worst hours differ clearly in mean rise.

    The gap comes from the record's own hour buckets, so it always
    describes the same meals as ``sample_size`` and the recommendation.
    """
    insights = []
    for t in timing:
        if t.is_default or t.sample_size < thresholds.min_timing_insight_samples:
            continue
        if t.best_hour_avg_rise is None or t.worst_hour_avg_rise is None:
            continue
        if hour_distance(t.best_hour, t.worst_hour) < thresholds.min_timing_insight_hour_gap:
            continue

        gap = t.worst_hour_avg_rise - t.best_hour_avg_rise
        if gap < thresholds.min_timing_insight_rise_gap_mgdl:
            continue

        insights.append(
            MealPatternInsight(
                insight_type=InsightType.neutral,
                category=InsightCategory.timing,
                title=f"Optimal {t.meal_type.capitalize()} Timing",
                description=(
                    f"Your {t.meal_type} shows better glucose response around "
                    f"{format_hour(t.best_hour)}"
                ),
                supporting_data=(
                    f"Based on {t.sample_size} meals; {round(gap)} mg/dL lower "
                    "average rise than at the least favourable hour"
                ),
                actionable_tip=t.recommendation,
            )
        )
    return insights


def meal_quality_insights(
    responses: Sequence[MealResponse],
    thresholds: AnalysisThresholds = DEFAULT_THRESHOLDS,
) -> list[MealPatternInsight]:
    """Praise a history where most meals were rated excellent or good."""
    if not responses:
        return []

    good = sum(1 for r in responses if r.response_rating in GOOD_RATINGS)
    if good <= len(responses) * thresholds.good_meal_share:
        return []

    return [
        MealPatternInsight(
            insight_type=InsightType.positive,
            category=InsightCategory.meal_type,
            title="Great Meal Choices",
            description=(
                f"{round(good / len(responses) * 100)}% of your meals have good "
                "glucose responses"
            ),
            supporting_data=f"{good} out of {len(responses)} meals",
            actionable_tip="Keep up the great work with your food choices!",
        )
    ]


def synthesize_insights(
    responses: Sequence[MealResponse],
    food_scores: Sequence[FoodImpactScore],
    timing: Sequence[OptimalMealTiming],
    thresholds: AnalysisThresholds = DEFAULT_THRESHOLDS,
) -> list[MealPatternInsight]:
    """Compose all insight kinds in a fixed order: food, timing, meal quality."""
    return [
        *food_insights(food_scores, thresholds),
        *timing_insights(timing, thresholds),
        *meal_quality_insights(responses, thresholds),
    ]
