"""Meal impact analysis thresholds and lookup tables.

Every numeric cut-off used by the engine lives in AnalysisThresholds so
callers (and tests) can pass a tuned copy instead of patching module
globals. The rating tables are immutable tuples walked in order.
"""

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from glycemic_response.core.meal_impact.enums import (
    Confidence,
    ImpactRating,
    MealType,
    ResponseRating,
)


class AnalysisThresholds(BaseModel):
    """Named cut-offs for every meal impact component."""

    model_config = ConfigDict(frozen=True)

    # Response curve window around the meal time (minutes)
    window_before_minutes: int = Field(default=30, ge=0)
    window_after_minutes: int = Field(default=180, gt=0)
    min_window_samples: int = Field(default=2, ge=2)

    # Closest-sample tolerances (minutes)
    baseline_tolerance_minutes: int = Field(default=60, gt=0)
    checkpoint_tolerance_minutes: int = Field(default=30, gt=0)

    # A post-peak sample within this band of baseline counts as "returned"
    return_band_mgdl: float = Field(default=20.0, ge=0)

    # Food impact scoring
    min_food_occurrences: int = Field(default=2, ge=1)
    min_pairing_samples: int = Field(default=2, ge=1)

    # Timing optimizer
    min_timing_responses: int = Field(default=3, ge=1)
    min_hour_samples: int = Field(default=2, ge=1)
    consistent_timing_gap_mgdl: float = Field(default=20.0, ge=0)

    # Pattern insights
    min_insight_food_occurrences: int = Field(default=3, ge=1)
    max_insight_foods: int = Field(default=3, ge=1)
    max_pairing_insights: int = Field(default=2, ge=0)
    min_timing_insight_samples: int = Field(default=5, ge=1)
    min_timing_insight_hour_gap: int = Field(default=2, ge=0)
    min_timing_insight_rise_gap_mgdl: float = Field(default=20.0, ge=0)
    good_meal_share: float = Field(default=0.6, ge=0, le=1)

    # Meal comparison
    min_comparison_matches: int = Field(default=2, ge=1)
    comparison_rise_gap_mgdl: float = Field(default=15.0, ge=0)


DEFAULT_THRESHOLDS: Final[AnalysisThresholds] = AnalysisThresholds()

# (rating, max rise, max peak), both bounds inclusive, first match wins
RESPONSE_RATING_TIERS: Final[tuple[tuple[ResponseRating, float, float], ...]] = (
    (ResponseRating.excellent, 30, 140),
    (ResponseRating.good, 50, 160),
    (ResponseRating.moderate, 80, 180),
)

# (rating, exclusive upper bound of impact score)
IMPACT_RATING_TIERS: Final[tuple[tuple[ImpactRating, float], ...]] = (
    (ImpactRating.low, 40),
    (ImpactRating.moderate, 70),
)

# (confidence, minimum occurrences)
CONFIDENCE_TIERS: Final[tuple[tuple[Confidence, int], ...]] = (
    (Confidence.high, 10),
    (Confidence.medium, 5),
)

# Impact score components
MAX_RISE_COMPONENT: Final[float] = 100.0
RISE_COMPONENT_WEIGHT: Final[float] = 80.0
FAST_ONSET_MINUTES: Final[float] = 30.0
SLOW_ONSET_MINUTES: Final[float] = 90.0
FAST_ONSET_POINTS: Final[float] = 20.0
MID_ONSET_POINTS: Final[float] = 10.0

# Meal ranking penalties
HIGH_PEAK_MGDL: Final[float] = 180.0
HIGH_PEAK_WEIGHT: Final[float] = 0.5
FAST_PEAK_MINUTES: Final[int] = 30
FAST_PEAK_PENALTY: Final[float] = 10.0
SLOW_RETURN_MINUTES: Final[int] = 180
SLOW_RETURN_PENALTY: Final[float] = 20.0

# Static timing guidance used when a meal type lacks history:
# (meal type, time range, best hour, worst hour, recommendation)
DEFAULT_MEAL_TIMING: Final[tuple[tuple[MealType, str, int, int, str], ...]] = (
    (
        MealType.breakfast,
        "7:00 AM - 9:00 AM",
        8,
        10,
        "Eating breakfast within 1-2 hours of waking typically helps maintain stable glucose",
    ),
    (
        MealType.lunch,
        "12:00 PM - 1:00 PM",
        12,
        15,
        "A consistent lunch time helps establish predictable glucose patterns",
    ),
    (
        MealType.dinner,
        "6:00 PM - 7:00 PM",
        18,
        21,
        "Earlier dinners (3+ hours before bed) often result in better overnight glucose",
    ),
    (
        MealType.snack,
        "3:00 PM - 4:00 PM",
        15,
        22,
        "Afternoon snacks can help prevent late-day glucose dips",
    ),
)
