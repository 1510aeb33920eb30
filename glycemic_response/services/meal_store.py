"""Read-only access to logged meals and glucose readings.

The analytics engine depends only on the three queries below; all of
them map ORM rows onto the engine's frozen input models.
"""

import uuid
from datetime import datetime

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from glycemic_response.core.meal_impact.enums import MealType
from glycemic_response.core.meal_impact.models import (
    FoodServing,
    GlucoseSample,
    MealEvent,
)
from glycemic_response.database import get_db
from glycemic_response.models.glucose import GlucoseReading
from glycemic_response.models.meal import MealFood, MealLog


def _to_meal_event(meal: MealLog) -> MealEvent:
    return MealEvent(
        id=meal.id,
        meal_type=MealType(meal.meal_type.value),
        timestamp=meal.meal_time,
        total_carbs=meal.total_carbs or 0.0,
        foods=tuple(food.food_name for food in meal.foods),
        notes=meal.notes,
    )


class MealStore:
    """Queries the meal and glucose tables for one database session.

    A session must not be used concurrently, so callers await each
    query in turn.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_meals(self, user_id: uuid.UUID, since: datetime) -> list[MealEvent]:
        """Meals logged at or after ``since``, newest first, foods loaded."""
        result = await self.db.execute(
            select(MealLog)
            .options(selectinload(MealLog.foods))
            .where(
                MealLog.user_id == user_id,
                MealLog.meal_time >= since,
            )
            .order_by(MealLog.meal_time.desc())
        )
        return [_to_meal_event(meal) for meal in result.scalars().all()]

    async def get_glucose_readings(
        self,
        user_id: uuid.UUID,
        start: datetime,
        end: datetime,
    ) -> list[GlucoseSample]:
        """Readings with ``start <= timestamp <= end``, oldest first."""
        result = await self.db.execute(
            select(GlucoseReading.reading_timestamp, GlucoseReading.value)
            .where(
                GlucoseReading.user_id == user_id,
                GlucoseReading.reading_timestamp >= start,
                GlucoseReading.reading_timestamp <= end,
            )
            .order_by(GlucoseReading.reading_timestamp)
        )
        return [GlucoseSample(timestamp=row[0], value=row[1]) for row in result.all()]

    async def get_food_servings(self, user_id: uuid.UUID) -> list[FoodServing]:
        """Every logged food serving for the user with its carbs."""
        result = await self.db.execute(
            select(MealFood.food_name, MealFood.carbs)
            .join(MealLog, MealFood.meal_log_id == MealLog.id)
            .where(MealLog.user_id == user_id)
        )
        return [FoodServing(food_name=row[0], carbs=row[1]) for row in result.all()]


def get_meal_store(db: AsyncSession = Depends(get_db)) -> MealStore:
    """FastAPI dependency providing a MealStore bound to the request session."""
    return MealStore(db)
