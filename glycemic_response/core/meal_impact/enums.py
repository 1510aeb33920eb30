"""Meal impact enums."""

from enum import StrEnum, auto


class MealType(StrEnum):
    """Meal type of a logged meal, in display order."""

    breakfast = auto()
    lunch = auto()
    dinner = auto()
    snack = auto()


class ResponseRating(StrEnum):
    """Qualitative rating of a single post-meal glucose response."""

    excellent = auto()
    good = auto()
    moderate = auto()
    poor = auto()


class ImpactRating(StrEnum):
    """Bucketed food impact score."""

    low = auto()
    moderate = auto()
    high = auto()


class Confidence(StrEnum):
    """How many meals back a food score."""

    high = auto()
    medium = auto()
    low = auto()


class InsightType(StrEnum):
    positive = auto()
    negative = auto()
    neutral = auto()


class InsightCategory(StrEnum):
    food_combination = auto()
    timing = auto()
    portion = auto()
    meal_type = auto()


class ComparisonChoice(StrEnum):
    """Which side of a meal comparison showed the smaller rise."""

    a = auto()
    b = auto()
    equal = auto()
