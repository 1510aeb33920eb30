"""Meal impact analysis service.

Fetches a fresh meal/glucose snapshot from the store for every call and
runs the pure analytics in glycemic_response.core.meal_impact over it.
Nothing is cached or persisted between calls. A failed store read fails
the whole call; there is no partial-result fallback and no retry here.
"""

import uuid
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

from glycemic_response.config import settings
from glycemic_response.core.meal_impact import (
    DEFAULT_THRESHOLDS,
    AnalysisThresholds,
    BestWorstMeals,
    DailyMealSummary,
    FoodImpactScore,
    MealComparison,
    MealPatternInsight,
    MealResponse,
    OptimalMealTiming,
    build_meal_responses,
    optimize_meal_timing,
    rank_meals,
    score_food_impacts,
    summarize_days,
    synthesize_insights,
)
from glycemic_response.core.meal_impact import compare_meals as compare_meal_responses
from glycemic_response.logging_config import get_logger
from glycemic_response.services.meal_store import MealStore

logger = get_logger(__name__)


def _analysis_tz() -> ZoneInfo:
    return ZoneInfo(settings.analysis_timezone)


async def load_meal_responses(
    store: MealStore,
    user_id: uuid.UUID,
    days: int,
    thresholds: AnalysisThresholds = DEFAULT_THRESHOLDS,
    now: datetime | None = None,
) -> tuple[MealResponse, ...]:
    """Fetch meals and glucose for the lookback window and build responses.

    Glucose is fetched once, spanning every meal's evaluation window,
    rather than once per meal.

    Args:
        store: Meal/glucose store.
        user_id: User's UUID.
        days: Lookback window in days.
        thresholds: Analysis thresholds.
        now: End of the lookback window (defaults to the current time).

    Returns:
        Qualifying responses, newest meal first.

    Raises:
        Whatever the store raises; the failure is logged and re-raised.
    """
    now = now or datetime.now(UTC)
    since = now - timedelta(days=days)

    try:
        meals = await store.get_meals(user_id, since)
        if not meals:
            return ()

        meal_times = [m.timestamp for m in meals]
        readings = await store.get_glucose_readings(
            user_id,
            min(meal_times) - timedelta(minutes=thresholds.window_before_minutes),
            max(meal_times) + timedelta(minutes=thresholds.window_after_minutes),
        )
    except Exception:
        logger.exception(
            "Failed to load meal snapshot",
            user_id=str(user_id),
            days=days,
        )
        raise

    responses = build_meal_responses(meals, readings, thresholds)

    logger.info(
        "Meal responses built",
        user_id=str(user_id),
        days=days,
        meals=len(meals),
        readings=len(readings),
        qualifying=len(responses),
    )
    return responses


async def get_meal_responses(
    store: MealStore,
    user_id: uuid.UUID,
    days: int | None = None,
) -> list[MealResponse]:
    """Per-meal glucose responses for the lookback window, newest first."""
    days = days or settings.meal_response_days
    return list(await load_meal_responses(store, user_id, days))


async def _score_foods(
    store: MealStore,
    user_id: uuid.UUID,
    responses: tuple[MealResponse, ...],
) -> list[FoodImpactScore]:
    if not responses:
        return []
    try:
        servings = await store.get_food_servings(user_id)
    except Exception:
        logger.exception("Failed to load food servings", user_id=str(user_id))
        raise
    return score_food_impacts(responses, servings, DEFAULT_THRESHOLDS)


async def get_food_impact_scores(
    store: MealStore,
    user_id: uuid.UUID,
    days: int | None = None,
) -> list[FoodImpactScore]:
    """Impact score for each food seen in at least two qualifying meals."""
    days = days or settings.food_impact_days
    responses = await load_meal_responses(store, user_id, days)
    scores = await _score_foods(store, user_id, responses)

    logger.info(
        "Food impact scores computed",
        user_id=str(user_id),
        days=days,
        foods=len(scores),
    )
    return scores


async def get_best_and_worst_meals(
    store: MealStore,
    user_id: uuid.UUID,
    limit: int = 5,
) -> BestWorstMeals:
    """The ``limit`` best and worst meals of the ranking window."""
    responses = await load_meal_responses(store, user_id, settings.meal_ranking_days)
    return rank_meals(responses, limit)


async def get_optimal_meal_timing(
    store: MealStore,
    user_id: uuid.UUID,
) -> list[OptimalMealTiming]:
    """Best and worst hour of day per meal type, or static defaults."""
    responses = await load_meal_responses(store, user_id, settings.meal_timing_days)
    return optimize_meal_timing(responses, DEFAULT_THRESHOLDS, _analysis_tz())


async def get_meal_pattern_insights(
    store: MealStore,
    user_id: uuid.UUID,
) -> list[MealPatternInsight]:
    """Descriptive insights from food scores, timing and recent responses.

    One snapshot covers the longer timing window; food scores and the
    meal-quality insight use only the more recent insight window.
    """
    now = datetime.now(UTC)
    snapshot_days = max(settings.pattern_insight_days, settings.meal_timing_days)
    snapshot = await load_meal_responses(store, user_id, snapshot_days, now=now)

    recent_since = now - timedelta(days=settings.pattern_insight_days)
    recent = tuple(r for r in snapshot if r.meal_time >= recent_since)

    food_scores = await _score_foods(store, user_id, recent)
    timing = optimize_meal_timing(snapshot, DEFAULT_THRESHOLDS, _analysis_tz())
    insights = synthesize_insights(recent, food_scores, timing, DEFAULT_THRESHOLDS)

    logger.info(
        "Meal pattern insights generated",
        user_id=str(user_id),
        responses=len(recent),
        insights=len(insights),
    )
    return insights


async def get_daily_meal_summaries(
    store: MealStore,
    user_id: uuid.UUID,
    days: int | None = None,
) -> list[DailyMealSummary]:
    """One summary per day with qualifying meals, newest day first."""
    days = days or settings.daily_summary_days
    responses = await load_meal_responses(store, user_id, days)
    return summarize_days(responses, _analysis_tz())


async def compare_meals(
    store: MealStore,
    user_id: uuid.UUID,
    name_a: str,
    name_b: str,
) -> MealComparison | None:
    """Compare two meal/food searches; None if either lacks enough meals."""
    responses = await load_meal_responses(
        store, user_id, settings.meal_comparison_days
    )
    return compare_meal_responses(responses, name_a, name_b, DEFAULT_THRESHOLDS)
