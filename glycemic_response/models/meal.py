"""Meal log models.

A MealLog is one logged eating event; its MealFood rows are the foods
eaten, in the order the user entered them.
"""

import enum
import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum, Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from glycemic_response.models.base import Base, TimestampMixin


class MealLogType(str, enum.Enum):
    """Meal type chosen when the meal was logged."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class MealLog(Base, TimestampMixin):
    """A logged meal with its total carbohydrates."""

    __tablename__ = "meal_logs"

    __table_args__ = (Index("ix_meal_logs_user_meal_time", "user_id", "meal_time"),)

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        nullable=False,
        index=True,
    )

    meal_type: Mapped[MealLogType] = mapped_column(
        Enum(
            MealLogType,
            name="mealtype",
            values_callable=lambda e: [member.value for member in e],
        ),
        nullable=False,
    )

    meal_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    # Grams of carbohydrate
    total_carbs: Mapped[float | None] = mapped_column(
        Float,
        nullable=True,
    )

    notes: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    foods: Mapped[list["MealFood"]] = relationship(
        back_populates="meal_log",
        cascade="all, delete-orphan",
        order_by="MealFood.position",
    )

    def __repr__(self) -> str:
        return f"<MealLog(user_id={self.user_id}, type={self.meal_type.value}, time={self.meal_time})>"


class MealFood(Base):
    """One food item within a logged meal."""

    __tablename__ = "meal_foods"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    meal_log_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("meal_logs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    food_name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )

    # Grams of carbohydrate in this serving
    carbs: Mapped[float | None] = mapped_column(
        Float,
        nullable=True,
    )

    # Entry order within the meal
    position: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )

    meal_log = relationship("MealLog", back_populates="foods")

    def __repr__(self) -> str:
        return f"<MealFood(food_name={self.food_name!r}, carbs={self.carbs})>"
