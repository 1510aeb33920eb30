"""Tests for best/worst meal ranking."""

import uuid
from datetime import UTC, date, datetime, timedelta

import pytest

from glycemic_response.core.meal_impact.enums import MealType
from glycemic_response.core.meal_impact.models import MealResponse
from glycemic_response.core.meal_impact.ranking import (
    calculate_response_score,
    rank_meals,
)
from glycemic_response.core.meal_impact.response_curve import rate_response

_START = datetime(2026, 3, 1, 8, 0, tzinfo=UTC)


def _response(
    rise: float,
    *,
    before: float = 100,
    peak_time: int = 60,
    time_to_return: int | None = None,
    day: int = 0,
    name: str | None = None,
) -> MealResponse:
    peak = before + rise
    return MealResponse(
        meal_id=uuid.uuid4(),
        meal_name=name or f"meal rising {rise}",
        meal_type=MealType.breakfast,
        meal_time=_START + timedelta(days=day),
        total_carbs=30,
        glucose_before=before,
        glucose_peak=peak,
        peak_time_minutes=peak_time,
        glucose_rise=rise,
        time_to_return=time_to_return,
        area_under_curve=0,
        response_rating=rate_response(rise, peak),
        foods=("toast",),
    )


class TestCalculateResponseScore:
    """Tests for calculate_response_score."""

    def test_plain_rise(self):
        assert calculate_response_score(_response(40)) == 40

    def test_high_peak_penalty(self):
        """Peak 200 adds half of the 20 mg/dL above 180."""
        assert calculate_response_score(_response(60, before=140)) == 70

    def test_peak_at_threshold_not_penalised(self):
        assert calculate_response_score(_response(80, before=100)) == 80

    def test_fast_peak_penalty(self):
        assert calculate_response_score(_response(40, peak_time=29)) == 50
        assert calculate_response_score(_response(40, peak_time=30)) == 40

    def test_slow_return_penalty(self):
        assert calculate_response_score(_response(40, time_to_return=181)) == 60
        assert calculate_response_score(_response(40, time_to_return=180)) == 40
        assert calculate_response_score(_response(40, time_to_return=None)) == 40

    def test_penalties_stack(self):
        response = _response(100, before=120, peak_time=20, time_to_return=200)
        # 100 + (220 - 180) * 0.5 + 10 + 20
        assert calculate_response_score(response) == 150


class TestRankMeals:
    """Tests for rank_meals."""

    def test_best_and_worst_ordering(self):
        responses = [_response(rise, day=i) for i, rise in enumerate([50, 10, 70, 30, 90, 20])]

        result = rank_meals(responses, limit=3)

        assert [r.glucose_response_score for r in result.best] == [10, 20, 30]
        # peak 190 adds (190 - 180) * 0.5
        assert [r.glucose_response_score for r in result.worst] == [95, 70, 50]
        assert [r.rank for r in result.best] == [1, 2, 3]
        assert [r.rank for r in result.worst] == [1, 2, 3]

    def test_best_is_minimum_and_worst_is_maximum(self):
        responses = [_response(rise, day=i) for i, rise in enumerate([45, 15, 85, 60])]
        scores = [calculate_response_score(r) for r in responses]

        result = rank_meals(responses)

        assert result.best[0].glucose_response_score == min(scores)
        assert result.worst[0].glucose_response_score == max(scores)

    def test_fewer_meals_than_limit(self):
        responses = [_response(20), _response(40, day=1)]

        result = rank_meals(responses, limit=5)

        assert len(result.best) == 2
        assert len(result.worst) == 2
        assert result.best[0].glucose_response_score == 20
        assert result.worst[0].glucose_response_score == 40

    def test_ranking_fields(self):
        response = _response(25, day=3, name="eggs, toast")

        ranking = rank_meals([response]).best[0]

        assert ranking.meal_id == response.meal_id
        assert ranking.meal_name == "eggs, toast"
        assert ranking.meal_type == MealType.breakfast
        assert ranking.total_carbs == 30
        assert ranking.foods == ("toast",)
        assert ranking.date == date(2026, 3, 4)

    def test_score_is_rounded(self):
        ranking = rank_meals([_response(40.26)]).best[0]
        assert ranking.glucose_response_score == 40.3

    def test_empty_input(self):
        result = rank_meals([])
        assert result.best == ()
        assert result.worst == ()

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit(self, limit):
        result = rank_meals([_response(20)], limit=limit)
        assert result.best == ()
        assert result.worst == ()
