"""Tests for per-meal-type timing analysis."""

import uuid
from datetime import UTC, datetime, timedelta, timezone

import pytest

from glycemic_response.core.meal_impact.constants import AnalysisThresholds
from glycemic_response.core.meal_impact.enums import MealType
from glycemic_response.core.meal_impact.models import MealResponse
from glycemic_response.core.meal_impact.response_curve import rate_response
from glycemic_response.core.meal_impact.timing import (
    default_timing,
    format_hour,
    hourly_average_rise,
    optimize_meal_timing,
)


def _response(
    hour: int,
    rise: float,
    meal_type: MealType = MealType.breakfast,
    day: int = 0,
    tz: timezone = UTC,
) -> MealResponse:
    meal_time = datetime(2026, 3, 1, hour, 0, tzinfo=tz) + timedelta(days=day)
    return MealResponse(
        meal_id=uuid.uuid4(),
        meal_name="oatmeal",
        meal_type=meal_type,
        meal_time=meal_time,
        total_carbs=40,
        glucose_before=100,
        glucose_peak=100 + rise,
        peak_time_minutes=50,
        glucose_rise=rise,
        area_under_curve=0,
        response_rating=rate_response(rise, 100 + rise),
        foods=("oatmeal",),
    )


def _by_type(timing):
    return {t.meal_type: t for t in timing}


class TestFormatHour:
    """Tests for format_hour."""

    @pytest.mark.parametrize(
        ("hour", "expected"),
        [
            (0, "12:00 AM"),
            (7, "7:00 AM"),
            (11, "11:00 AM"),
            (12, "12:00 PM"),
            (13, "1:00 PM"),
            (23, "11:00 PM"),
            (24, "12:00 AM"),
        ],
    )
    def test_labels(self, hour, expected):
        assert format_hour(hour) == expected


class TestHourlyAverageRise:
    """Tests for hourly_average_rise."""

    def test_buckets_below_minimum_dropped(self):
        responses = [
            _response(7, 30),
            _response(7, 50, day=1),
            _response(9, 80, day=2),
        ]

        assert hourly_average_rise(responses, min_samples=2) == {7: 40}

    def test_zone_conversion(self):
        """08:00 UTC is 10:00 at UTC+2."""
        plus_two = timezone(timedelta(hours=2))
        responses = [_response(8, 30), _response(8, 50, day=1)]

        assert hourly_average_rise(responses, 1, plus_two) == {10: 40}


class TestOptimizeMealTiming:
    """Tests for optimize_meal_timing."""

    def test_one_record_per_meal_type_in_order(self):
        timing = optimize_meal_timing([])

        assert [t.meal_type for t in timing] == [
            MealType.breakfast,
            MealType.lunch,
            MealType.dinner,
            MealType.snack,
        ]
        assert all(t.is_default and t.sample_size == 0 for t in timing)

    def test_single_dinner_gets_default(self):
        responses = [_response(19, 40, meal_type=MealType.dinner)]

        dinner = _by_type(optimize_meal_timing(responses))[MealType.dinner]

        assert dinner == default_timing(MealType.dinner)
        assert dinner.sample_size == 0
        assert dinner.best_hour == 18
        assert dinner.worst_hour == 21
        assert dinner.optimal_time_range == "6:00 PM - 7:00 PM"
        assert dinner.best_hour_avg_rise is None

    def test_computed_breakfast(self):
        responses = [
            _response(7, 30),
            _response(7, 40, day=1),
            _response(9, 80, day=2),
            _response(9, 90, day=3),
        ]

        breakfast = _by_type(optimize_meal_timing(responses))[MealType.breakfast]

        assert breakfast.is_default is False
        assert breakfast.best_hour == 7
        assert breakfast.worst_hour == 9
        assert breakfast.sample_size == 4
        assert breakfast.avg_glucose_response == 60
        assert breakfast.best_hour_avg_rise == 35
        assert breakfast.worst_hour_avg_rise == 85
        assert breakfast.optimal_time_range == "7:00 AM - 8:00 AM"
        assert breakfast.recommendation == (
            "Try having breakfast around 7:00 AM for better glucose response"
        )

    def test_consistent_timing_message(self):
        responses = [
            _response(7, 30),
            _response(7, 40, day=1),
            _response(9, 45, day=2),
            _response(9, 50, day=3),
        ]

        breakfast = _by_type(optimize_meal_timing(responses))[MealType.breakfast]

        assert breakfast.recommendation == "Your breakfast timing is consistent - keep it up!"

    def test_no_bucket_with_two_samples_gets_default(self):
        responses = [_response(6, 30), _response(8, 40, day=1), _response(10, 50, day=2)]

        breakfast = _by_type(optimize_meal_timing(responses))[MealType.breakfast]

        assert breakfast.is_default is True
        assert breakfast.sample_size == 0

    def test_single_qualifying_hour(self):
        responses = [_response(8, 30), _response(8, 50, day=1), _response(11, 90, day=2)]

        breakfast = _by_type(optimize_meal_timing(responses))[MealType.breakfast]

        assert breakfast.best_hour == breakfast.worst_hour == 8
        assert breakfast.recommendation == "Your breakfast timing is consistent - keep it up!"
        # every breakfast counts toward the average, not just the bucketed ones
        assert breakfast.avg_glucose_response == 56.7

    def test_meal_types_are_independent(self):
        responses = [
            _response(12, 50, meal_type=MealType.lunch),
            _response(12, 60, meal_type=MealType.lunch, day=1),
            _response(12, 70, meal_type=MealType.lunch, day=2),
            _response(8, 30),
        ]

        timing = _by_type(optimize_meal_timing(responses))

        assert timing[MealType.lunch].sample_size == 3
        assert timing[MealType.lunch].best_hour == 12
        assert timing[MealType.breakfast].is_default is True

    def test_best_hour_bucketed_in_analysis_zone(self):
        """Meals at 05:00 and 07:00 UTC land at 07:00 and 09:00 in UTC+2."""
        plus_two = timezone(timedelta(hours=2))
        responses = [
            _response(5, 20),
            _response(5, 30, day=1),
            _response(7, 80, day=2),
            _response(7, 90, day=3),
        ]

        breakfast = _by_type(optimize_meal_timing(responses, tz=plus_two))[MealType.breakfast]

        assert breakfast.best_hour == 7
        assert breakfast.worst_hour == 9

    def test_custom_thresholds(self):
        thresholds = AnalysisThresholds(min_timing_responses=1, min_hour_samples=1)

        breakfast = _by_type(
            optimize_meal_timing([_response(8, 30)], thresholds)
        )[MealType.breakfast]

        assert breakfast.is_default is False
        assert breakfast.sample_size == 1
