"""
Serializers

Turn models into the JSON-ready dictionaries returned by the API.
"""

from typing import Any, Dict, Optional


def num(value: Any) -> Optional[float]:
    """Numeric column value as float, keeping None."""
    if value is None:
        return None
    return float(value)


def iso(value: Any) -> Optional[str]:
    return value.isoformat() if value is not None else None


def serialize_user(user) -> Dict[str, Any]:
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "date_of_birth": iso(user.date_of_birth),
        "gender": user.gender,
        "height_cm": user.height_cm,
        "current_weight_kg": num(user.current_weight_kg),
        "goal_weight_kg": num(user.goal_weight_kg),
        "activity_level": user.activity_level,
        "timezone": user.timezone,
        "created_at": iso(user.created_at),
    }


def serialize_food_item(item) -> Dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "brand": item.brand,
        "serving_size": num(item.serving_size),
        "serving_unit": item.serving_unit,
        "calories_per_serving": num(item.calories_per_serving),
        "protein_g": num(item.protein_g),
        "carbs_g": num(item.carbs_g),
        "fat_g": num(item.fat_g),
        "fiber_g": num(item.fiber_g),
        "sugar_g": num(item.sugar_g),
        "sodium_mg": num(item.sodium_mg),
        "verified": bool(item.verified),
        "created_by": item.created_by,
    }


def serialize_exercise(exercise) -> Dict[str, Any]:
    return {
        "id": exercise.id,
        "name": exercise.name,
        "category": exercise.category,
        "met_value": num(exercise.met_value),
        "description": exercise.description,
        "instructions": exercise.instructions,
        "muscle_groups": exercise.muscle_groups or [],
        "equipment_needed": exercise.equipment_needed or [],
        "difficulty_level": exercise.difficulty_level,
        "created_by": exercise.created_by,
    }


def serialize_food_entry(entry) -> Dict[str, Any]:
    return {
        "id": entry.id,
        "user_id": entry.user_id,
        "food_item_id": entry.food_item_id,
        "meal_type": entry.meal_type,
        "quantity": num(entry.quantity),
        "serving_unit": entry.serving_unit,
        "calories": num(entry.calories),
        "logged_date": iso(entry.logged_date),
        "logged_at": iso(entry.logged_at),
        "notes": entry.notes,
        "food_item": serialize_food_item(entry.food_item) if entry.food_item else None,
    }


def serialize_exercise_entry(entry) -> Dict[str, Any]:
    return {
        "id": entry.id,
        "user_id": entry.user_id,
        "exercise_id": entry.exercise_id,
        "duration_minutes": entry.duration_minutes,
        "calories_burned": num(entry.calories_burned),
        "sets": entry.sets,
        "reps": entry.reps,
        "weight_used": num(entry.weight_used),
        "distance": num(entry.distance),
        "distance_unit": entry.distance_unit,
        "logged_date": iso(entry.logged_date),
        "logged_at": iso(entry.logged_at),
        "notes": entry.notes,
        "exercise": serialize_exercise(entry.exercise) if entry.exercise else None,
    }


def serialize_goal(goal) -> Dict[str, Any]:
    return {
        "id": goal.id,
        "user_id": goal.user_id,
        "goal_type": goal.goal_type,
        "target_weight_kg": num(goal.target_weight_kg),
        "target_date": iso(goal.target_date),
        "weekly_goal_kg": num(goal.weekly_goal_kg),
        "daily_calorie_goal": goal.daily_calorie_goal,
        "daily_protein_goal": num(goal.daily_protein_goal),
        "daily_carbs_goal": num(goal.daily_carbs_goal),
        "daily_fat_goal": num(goal.daily_fat_goal),
        "daily_exercise_minutes": goal.daily_exercise_minutes,
        "is_active": bool(goal.is_active),
        "created_at": iso(goal.created_at),
    }


def serialize_daily_note(note) -> Dict[str, Any]:
    return {
        "id": note.id,
        "user_id": note.user_id,
        "date": iso(note.date),
        "notes": note.notes,
    }


def serialize_weight_log(log) -> Dict[str, Any]:
    return {
        "id": log.id,
        "user_id": log.user_id,
        "weight_kg": num(log.weight_kg),
        "neck_cm": num(log.neck_cm),
        "waist_cm": num(log.waist_cm),
        "hips_cm": num(log.hips_cm),
        "logged_date": iso(log.logged_date),
        "logged_at": iso(log.logged_at),
        "notes": log.notes,
    }
