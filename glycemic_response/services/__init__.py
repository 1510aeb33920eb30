# Business Logic Services
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

__all__ = [
    "MealStore",
    "compare_meals",
    "get_best_and_worst_meals",
    "get_daily_meal_summaries",
    "get_food_impact_scores",
    "get_meal_pattern_insights",
    "get_meal_responses",
    "get_meal_store",
    "get_optimal_meal_timing",
]
