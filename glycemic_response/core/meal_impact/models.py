"""Meal impact Pydantic models.

Pure data models: the read-only inputs handed over by the meal and
glucose stores, and the derived records the engine produces. No
database dependencies. Everything is frozen; derived records are
rebuilt on every analysis and never persisted.
"""

import datetime as dt
import uuid

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from glycemic_response.core.meal_impact.enums import (
    ComparisonChoice,
    Confidence,
    ImpactRating,
    InsightCategory,
    InsightType,
    MealType,
    ResponseRating,
)

# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class GlucoseSample(BaseModel):
    """A glucose value (mg/dL) at a point in time."""

    model_config = ConfigDict(frozen=True)

    value: float
    timestamp: AwareDatetime


class MealEvent(BaseModel):
    """A logged meal with its foods in entry order."""

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID
    meal_type: MealType
    timestamp: AwareDatetime
    total_carbs: float = 0.0
    foods: tuple[str, ...] = ()
    notes: str | None = None


class FoodServing(BaseModel):
    """Carbohydrates recorded for one serving of a named food."""

    model_config = ConfigDict(frozen=True)

    food_name: str
    carbs: float | None = None


# ---------------------------------------------------------------------------
# Derived records
# ---------------------------------------------------------------------------


class MealResponse(BaseModel):
    """Observed glucose response to one meal.

    ``glucose_rise`` is always ``glucose_peak - glucose_before``;
    ``peak_time_minutes`` and ``time_to_return`` are offsets from the
    meal time.
    """

    model_config = ConfigDict(frozen=True)

    meal_id: uuid.UUID
    meal_name: str
    meal_type: MealType
    meal_time: AwareDatetime
    total_carbs: float
    glucose_before: float
    glucose_1hr: float | None = None
    glucose_2hr: float | None = None
    glucose_peak: float
    peak_time_minutes: int
    glucose_rise: float
    time_to_return: int | None = None
    area_under_curve: float = Field(ge=0, description="mg/dL x minutes above baseline")
    response_rating: ResponseRating
    foods: tuple[str, ...] = ()


class FoodImpactScore(BaseModel):
    """Aggregated glucose impact of one food across meals."""

    model_config = ConfigDict(frozen=True)

    food_name: str
    occurrences: int = Field(ge=1)
    avg_glucose_rise: float
    avg_peak_time: float
    avg_carbs_per_serving: float
    impact_score: int = Field(ge=0, le=100)
    impact_rating: ImpactRating
    best_pairing: str | None = None
    worst_pairing: str | None = None
    confidence: Confidence


class MealRanking(BaseModel):
    """A meal's position in a best or worst list (rank 1 is the extreme)."""

    model_config = ConfigDict(frozen=True)

    rank: int = Field(ge=1)
    meal_id: uuid.UUID
    meal_name: str
    meal_type: MealType
    total_carbs: float
    glucose_response_score: float
    foods: tuple[str, ...] = ()
    date: dt.date


class BestWorstMeals(BaseModel):
    model_config = ConfigDict(frozen=True)

    best: tuple[MealRanking, ...] = ()
    worst: tuple[MealRanking, ...] = ()


class OptimalMealTiming(BaseModel):
    """Best and worst observed hour of day for a meal type.

    Static guidance is flagged with ``is_default`` and ``sample_size == 0``.
    """

    model_config = ConfigDict(frozen=True)

    meal_type: MealType
    optimal_time_range: str
    avg_glucose_response: float
    best_hour: int = Field(ge=0, le=23)
    worst_hour: int = Field(ge=0, le=23)
    recommendation: str
    sample_size: int = Field(ge=0)
    is_default: bool = False
    # Mean rise in the best and worst hour buckets; None for defaults
    best_hour_avg_rise: float | None = None
    worst_hour_avg_rise: float | None = None


class MealPatternInsight(BaseModel):
    """A short descriptive statement backed by observed data."""

    model_config = ConfigDict(frozen=True)

    insight_type: InsightType
    category: InsightCategory
    title: str
    description: str
    supporting_data: str
    actionable_tip: str


class DailyMealSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: dt.date
    total_meals: int
    total_carbs: float
    avg_glucose_response: float
    best_meal: str | None = None
    worst_meal: str | None = None
    in_range_meals_pct: int = Field(ge=0, le=100)


class ComparedMeal(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    avg_glucose_rise: float
    avg_peak_time: float
    occurrences: int


class MealComparison(BaseModel):
    """Side-by-side average response of two meal or food searches."""

    model_config = ConfigDict(frozen=True)

    meal_a: ComparedMeal
    meal_b: ComparedMeal
    glucose_rise_diff: float
    peak_time_diff: float
    recommended: ComparisonChoice
    reasoning: str
