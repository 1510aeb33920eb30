# Database Models
from glycemic_response.models.base import Base, TimestampMixin
from glycemic_response.models.glucose import GlucoseReading
from glycemic_response.models.meal import MealFood, MealLog, MealLogType

__all__ = [
    "Base",
    "GlucoseReading",
    "MealFood",
    "MealLog",
    "MealLogType",
    "TimestampMixin",
]
