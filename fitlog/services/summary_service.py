"""
Daily Summary Service

Aggregates a user's food and exercise diary for one calendar day into
consumed nutrition, calories burned, net calories, per-meal buckets and the
active goal's daily targets. Read-only: nothing is written or committed.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.orm import joinedload

from fitlog.models.exercise_diary_entry import ExerciseDiaryEntry
from fitlog.models.food_diary_entry import FoodDiaryEntry
from fitlog.models.user_goal import UserGoal
from fitlog.services.constants import MEAL_BUCKETS, MEAL_TYPE_TO_BUCKET, SUMMARY_DECIMALS
from fitlog.services.goal_service import active_goal
from fitlog.services.serializers import num

_ZERO = Decimal("0")
_QUANTUM = Decimal(1).scaleb(-SUMMARY_DECIMALS)


def list_food_entries(user_id: int, day: date) -> List[FoodDiaryEntry]:
    return (
        FoodDiaryEntry.query
        .options(joinedload(FoodDiaryEntry.food_item))
        .filter_by(user_id=user_id, logged_date=day)
        .order_by(FoodDiaryEntry.logged_at, FoodDiaryEntry.id)
        .all()
    )


def list_exercise_entries(user_id: int, day: date) -> List[ExerciseDiaryEntry]:
    return (
        ExerciseDiaryEntry.query
        .options(joinedload(ExerciseDiaryEntry.exercise))
        .filter_by(user_id=user_id, logged_date=day)
        .order_by(ExerciseDiaryEntry.logged_at, ExerciseDiaryEntry.id)
        .all()
    )


def _dec(value: Any) -> Decimal:
    if value is None:
        return _ZERO
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _q(value: Decimal) -> Decimal:
    return value.quantize(_QUANTUM, rounding=ROUND_HALF_UP)


def _out(value: Decimal) -> float:
    return float(_q(value))


def entry_nutrition(entry: FoodDiaryEntry) -> Dict[str, Decimal]:
    """
    Nutrition contributed by one food diary entry.

    - Quick-add (no food item): stored calories, no macros
    - Food item resolves: stored calories (or derived when none were stored),
      macros = item macro * quantity
    - Food item no longer resolves: contributes nothing

    Calories are rounded per entry so meal buckets add up to the day's total.
    """
    if entry.food_item_id is None:
        return {"calories": _q(_dec(entry.calories)), "protein": _ZERO, "carbs": _ZERO, "fat": _ZERO}

    item = entry.food_item
    if item is None:
        return {"calories": _ZERO, "protein": _ZERO, "carbs": _ZERO, "fat": _ZERO}

    quantity = _dec(entry.quantity)
    if entry.calories is not None:
        calories = _dec(entry.calories)
    else:
        calories = _dec(item.calories_per_serving) * quantity
    return {
        "calories": _q(calories),
        "protein": _dec(item.protein_g) * quantity,
        "carbs": _dec(item.carbs_g) * quantity,
        "fat": _dec(item.fat_g) * quantity,
    }


def summarize_food(entries: Iterable[FoodDiaryEntry]) -> Dict[str, Any]:
    consumed = {"calories": _ZERO, "protein": _ZERO, "carbs": _ZERO, "fat": _ZERO}
    meals = {bucket: {"calories": _ZERO, "entries": 0} for bucket in MEAL_BUCKETS}

    for entry in entries:
        nutrition = entry_nutrition(entry)
        for key in consumed:
            consumed[key] += nutrition[key]

        bucket = meals[MEAL_TYPE_TO_BUCKET[entry.meal_type]]
        bucket["calories"] += nutrition["calories"]
        bucket["entries"] += 1

    return {"consumed": consumed, "meals": meals}


def summarize_exercise(entries: Iterable[ExerciseDiaryEntry]) -> Dict[str, Any]:
    total_calories = _ZERO
    total_duration = 0
    count = 0
    for entry in entries:
        total_calories += _dec(entry.calories_burned)
        total_duration += entry.duration_minutes or 0
        count += 1
    return {
        "total_duration": total_duration,
        "total_calories": total_calories,
        "entries": count,
    }


def goal_targets(goal: Optional[UserGoal]) -> Optional[Dict[str, Any]]:
    if goal is None:
        return None
    return {
        "calories": goal.daily_calorie_goal,
        "protein": num(goal.daily_protein_goal),
        "carbs": num(goal.daily_carbs_goal),
        "fat": num(goal.daily_fat_goal),
    }


def daily_summary(user_id: int, day: date) -> Dict[str, Any]:
    """
    Build the daily summary for ``user_id`` on ``day``.

    Sums are kept in Decimal and converted to floats (2 decimals) on output.

    Returns:
        Dictionary with date, goals (None without an active goal), consumed,
        exercise_calories_burned, net_calories, meals and exercises
    """
    food = summarize_food(list_food_entries(user_id, day))
    exercises = summarize_exercise(list_exercise_entries(user_id, day))

    consumed = food["consumed"]
    burned = exercises["total_calories"]

    return {
        "date": day.isoformat(),
        "goals": goal_targets(active_goal(user_id)),
        "consumed": {k: _out(v) for k, v in consumed.items()},
        "exercise_calories_burned": _out(burned),
        "net_calories": _out(consumed["calories"] - burned),
        "meals": {
            name: {"calories": _out(b["calories"]), "entries": b["entries"]}
            for name, b in food["meals"].items()
        },
        "exercises": dict(exercises, total_calories=_out(burned)),
    }
