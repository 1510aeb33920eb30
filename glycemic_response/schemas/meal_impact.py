"""Meal impact response schemas.

List envelopes around the engine's records for the HTTP surface.
"""

from pydantic import BaseModel, Field

from glycemic_response.core.meal_impact.models import (
    DailyMealSummary,
    FoodImpactScore,
    MealPatternInsight,
    MealResponse,
    OptimalMealTiming,
)


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str = Field(..., description="Error message")


class MealResponseListResponse(BaseModel):
    """Per-meal glucose responses, newest meal first."""

    responses: list[MealResponse]
    total: int = Field(..., description="Number of qualifying meals")


class FoodImpactListResponse(BaseModel):
    """Food impact scores, gentlest food first."""

    foods: list[FoodImpactScore]
    total: int


class MealTimingResponse(BaseModel):
    """One timing record per meal type."""

    timing: list[OptimalMealTiming]


class MealInsightsResponse(BaseModel):
    insights: list[MealPatternInsight]


class DailyMealSummaryListResponse(BaseModel):
    """Daily summaries, newest day first."""

    days: list[DailyMealSummary]
