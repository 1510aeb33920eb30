"""Glucose-meal response analytics.

Correlates logged meals with the surrounding glucose series. Dataflow
is one-way:

1. Response curve extraction per meal (baseline, peak, rise, return
   time, excursion area)
2. Aggregation over a lookback window (newest meal first)
3. Food impact scoring, meal ranking and timing analysis, each an
   independent read-only pass over the aggregated responses
4. Pattern insights composed from the three analyses

Everything here is synchronous and side-effect free; fetching the meal
and glucose snapshot is the caller's job (see
glycemic_response.services.meal_impact).

IMPORTANT: These are descriptive summaries of observed history. They do
not diagnose, do not predict glucose and do not recommend medication
changes.
"""

from glycemic_response.core.meal_impact.aggregator import build_meal_responses
from glycemic_response.core.meal_impact.alignment import find_closest_sample
from glycemic_response.core.meal_impact.constants import (
    DEFAULT_THRESHOLDS,
    AnalysisThresholds,
)
from glycemic_response.core.meal_impact.enums import (
    ComparisonChoice,
    Confidence,
    ImpactRating,
    InsightCategory,
    InsightType,
    MealType,
    ResponseRating,
)
from glycemic_response.core.meal_impact.food_impact import score_food_impacts
from glycemic_response.core.meal_impact.insights import synthesize_insights
from glycemic_response.core.meal_impact.models import (
    BestWorstMeals,
    DailyMealSummary,
    FoodImpactScore,
    FoodServing,
    GlucoseSample,
    MealComparison,
    MealEvent,
    MealPatternInsight,
    MealRanking,
    MealResponse,
    OptimalMealTiming,
)
from glycemic_response.core.meal_impact.ranking import rank_meals
from glycemic_response.core.meal_impact.response_curve import extract_meal_response
from glycemic_response.core.meal_impact.summaries import compare_meals, summarize_days
from glycemic_response.core.meal_impact.timing import optimize_meal_timing

__all__ = [
    "DEFAULT_THRESHOLDS",
    "AnalysisThresholds",
    "BestWorstMeals",
    "ComparisonChoice",
    "Confidence",
    "DailyMealSummary",
    "FoodImpactScore",
    "FoodServing",
    "GlucoseSample",
    "ImpactRating",
    "InsightCategory",
    "InsightType",
    "MealComparison",
    "MealEvent",
    "MealPatternInsight",
    "MealRanking",
    "MealResponse",
    "MealType",
    "OptimalMealTiming",
    "ResponseRating",
    "build_meal_responses",
    "compare_meals",
    "extract_meal_response",
    "find_closest_sample",
    "optimize_meal_timing",
    "rank_meals",
    "score_food_impacts",
    "summarize_days",
    "synthesize_insights",
]
