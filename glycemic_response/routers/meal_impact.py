"""Meal impact router.

Read-only endpoints exposing per-meal glucose responses, food impact
scores, meal rankings, timing analysis and pattern insights. Every
request recomputes from the current meal/glucose data.
"""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status

from glycemic_response.core.meal_impact.models import BestWorstMeals, MealComparison
from glycemic_response.schemas.meal_impact import (
    DailyMealSummaryListResponse,
    ErrorResponse,
    FoodImpactListResponse,
    MealInsightsResponse,
    MealResponseListResponse,
    MealTimingResponse,
)
from glycemic_response.services.meal_impact import (
    compare_meals,
    get_best_and_worst_meals,
    get_daily_meal_summaries,
    get_food_impact_scores,
    get_meal_pattern_insights,
    get_meal_responses,
    get_optimal_meal_timing,
)
from glycemic_response.services.meal_store import MealStore, get_meal_store

router = APIRouter(prefix="/api/users/{user_id}/meal-impact", tags=["meal-impact"])


@router.get("/responses", response_model=MealResponseListResponse)
async def list_meal_responses(
    user_id: uuid.UUID,
    store: MealStore = Depends(get_meal_store),
    days: int | None = Query(default=None, ge=1, le=365),
) -> MealResponseListResponse:
    """Glucose response curve summary for each qualifying meal."""
    responses = await get_meal_responses(store, user_id, days)
    return MealResponseListResponse(responses=responses, total=len(responses))


@router.get("/foods", response_model=FoodImpactListResponse)
async def list_food_impact_scores(
    user_id: uuid.UUID,
    store: MealStore = Depends(get_meal_store),
    days: int | None = Query(default=None, ge=1, le=365),
) -> FoodImpactListResponse:
    """Impact score per food seen in at least two qualifying meals."""
    scores = await get_food_impact_scores(store, user_id, days)
    return FoodImpactListResponse(foods=scores, total=len(scores))


@router.get("/rankings", response_model=BestWorstMeals)
async def get_meal_rankings(
    user_id: uuid.UUID,
    store: MealStore = Depends(get_meal_store),
    limit: int = Query(default=5, ge=1, le=50),
) -> BestWorstMeals:
    """Best and worst meals by composite response score."""
    return await get_best_and_worst_meals(store, user_id, limit)


@router.get("/timing", response_model=MealTimingResponse)
async def get_meal_timing(
    user_id: uuid.UUID,
    store: MealStore = Depends(get_meal_store),
) -> MealTimingResponse:
    """Best and worst hour of day per meal type."""
    timing = await get_optimal_meal_timing(store, user_id)
    return MealTimingResponse(timing=timing)


@router.get("/insights", response_model=MealInsightsResponse)
async def get_meal_insights(
    user_id: uuid.UUID,
    store: MealStore = Depends(get_meal_store),
) -> MealInsightsResponse:
    """Descriptive meal pattern insights."""
    insights = await get_meal_pattern_insights(store, user_id)
    return MealInsightsResponse(insights=insights)


@router.get("/daily", response_model=DailyMealSummaryListResponse)
async def list_daily_summaries(
    user_id: uuid.UUID,
    store: MealStore = Depends(get_meal_store),
    days: int | None = Query(default=None, ge=1, le=365),
) -> DailyMealSummaryListResponse:
    """Per-day meal totals and response summary."""
    summaries = await get_daily_meal_summaries(store, user_id, days)
    return DailyMealSummaryListResponse(days=summaries)


@router.get(
    "/compare",
    response_model=MealComparison,
    responses={
        200: {"description": "Meal comparison"},
        404: {"model": ErrorResponse, "description": "Not enough matching meals"},
    },
)
async def compare_two_meals(
    user_id: uuid.UUID,
    store: MealStore = Depends(get_meal_store),
    meal_a: str = Query(..., min_length=1, max_length=100),
    meal_b: str = Query(..., min_length=1, max_length=100),
) -> MealComparison:
    """Compare the average glucose response to two meals or foods."""
    comparison = await compare_meals(store, user_id, meal_a, meal_b)
    if comparison is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Not enough matching meals to compare",
        )
    return comparison
