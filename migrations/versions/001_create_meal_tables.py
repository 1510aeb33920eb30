"""Create glucose_readings, meal_logs and meal_foods tables.

Revision ID: 001
Revises:
Create Date: 2026-03-01

"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_meal_tables"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")


def upgrade() -> None:
    op.create_table(
        "glucose_readings",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("value", sa.Integer(), nullable=False),
        sa.Column("reading_timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("source", sa.String(50), nullable=False, server_default="cgm"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_glucose_readings_user_id", "glucose_readings", ["user_id"])
    op.create_index(
        "ix_glucose_readings_user_timestamp",
        "glucose_readings",
        ["user_id", "reading_timestamp"],
    )

    meal_type = postgresql.ENUM(*MEAL_TYPES, name="mealtype")
    meal_type.create(op.get_bind())

    op.create_table(
        "meal_logs",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "meal_type",
            postgresql.ENUM(*MEAL_TYPES, name="mealtype", create_type=False),
            nullable=False,
        ),
        sa.Column("meal_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("total_carbs", sa.Float(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_meal_logs_user_id", "meal_logs", ["user_id"])
    op.create_index("ix_meal_logs_user_meal_time", "meal_logs", ["user_id", "meal_time"])

    op.create_table(
        "meal_foods",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("meal_log_id", sa.UUID(), nullable=False),
        sa.Column("food_name", sa.String(200), nullable=False),
        sa.Column("carbs", sa.Float(), nullable=True),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(
            ["meal_log_id"],
            ["meal_logs.id"],
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_meal_foods_meal_log_id", "meal_foods", ["meal_log_id"])


def downgrade() -> None:
    op.drop_index("ix_meal_foods_meal_log_id")
    op.drop_table("meal_foods")

    op.drop_index("ix_meal_logs_user_meal_time")
    op.drop_index("ix_meal_logs_user_id")
    op.drop_table("meal_logs")
    op.execute("DROP TYPE IF EXISTS mealtype")

    op.drop_index("ix_glucose_readings_user_timestamp")
    op.drop_index("ix_glucose_readings_user_id")
    op.drop_table("glucose_readings")
