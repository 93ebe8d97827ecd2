"""
Calorie Service

Derives calorie values for diary entries that were logged without one:
- Food: calories per serving times the number of servings
- Exercise: MET-based estimate from duration, or from sets/reps for strength work
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from fitlog.models.exercise import Exercise
from fitlog.models.food_item import FoodItem
from fitlog.services.constants import MINUTES_PER_REP, REFERENCE_BODY_MASS_KG


def _dec(value: Any) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def food_calories(food_item: Optional[FoodItem], quantity: Any) -> Optional[float]:
    """
    Calories for ``quantity`` servings of ``food_item``.

    Quantity counts servings, so it is not divided by ``serving_size``.
    Returns None when the item or quantity is missing.
    """
    if food_item is None or quantity is None or food_item.calories_per_serving is None:
        return None
    return float(_dec(food_item.calories_per_serving) * _dec(quantity))


def estimated_minutes(
    duration_minutes: Optional[int] = None,
    sets: Optional[int] = None,
    reps: Optional[int] = None,
    minutes_per_rep: float = MINUTES_PER_REP,
) -> Optional[Decimal]:
    if duration_minutes is not None:
        return _dec(duration_minutes)
    if sets is not None and reps is not None:
        return _dec(sets) * _dec(reps) * _dec(minutes_per_rep)
    return None


def exercise_calories(
    exercise: Optional[Exercise],
    duration_minutes: Optional[int] = None,
    sets: Optional[int] = None,
    reps: Optional[int] = None,
    minutes_per_rep: float = MINUTES_PER_REP,
) -> Optional[int]:
    """
    MET estimate: met_value * REFERENCE_BODY_MASS_KG * hours, rounded half up.

    Duration wins over sets/reps. Returns None when the exercise, its MET
    value or both duration and sets+reps are missing.
    """
    if exercise is None or exercise.met_value is None:
        return None
    minutes = estimated_minutes(duration_minutes, sets, reps, minutes_per_rep)
    if minutes is None:
        return None
    kcal = _dec(exercise.met_value) * _dec(REFERENCE_BODY_MASS_KG) * minutes / Decimal(60)
    return int(kcal.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
