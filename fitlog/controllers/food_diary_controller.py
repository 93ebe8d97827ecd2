"""
Food Diary Controller Module

Handles food diary endpoints including:
- Listing a day's entries with the calorie goal
- Catalog-backed and quick-add entries
- Update/delete of the caller's own entries
- Copying entries between dates
"""

from flask import request, current_app

from fitlog.schemas.food_schema import (
    CopyEntriesSchema,
    CopyYesterdaySchema,
    CreateFoodDiaryEntrySchema,
    DateQuerySchema,
    QuickAddSchema,
    UpdateFoodDiaryEntrySchema,
)
from fitlog.services import food_diary_service
from fitlog.services.goal_service import active_goal
from fitlog.services.serializers import num, serialize_food_entry
from fitlog.utils.clock import today
from fitlog.utils.errors import ServiceError
from fitlog.utils.http import ok, error, json_body, query_args, validate_schema, validation_error


def list_food_diary_handler():
    args, errors = validate_schema(DateQuerySchema, query_args())
    if errors:
        return validation_error(errors)

    user_id = request.user_id
    day = args.get("date") or today()
    entries = food_diary_service.list_entries(user_id, day)

    goal = active_goal(user_id)
    if goal and goal.daily_calorie_goal is not None:
        daily_calorie_goal = goal.daily_calorie_goal
    else:
        daily_calorie_goal = current_app.config.get("DEFAULT_DAILY_CALORIE_GOAL", 2000)

    return ok({
        "entries": [serialize_food_entry(e) for e in entries],
        "daily_calorie_goal": daily_calorie_goal,
        "total_calories": round(sum(num(e.calories) or 0.0 for e in entries), 2),
    }, "Food diary entries retrieved successfully")


def create_food_diary_entry_handler():
    """
    Body Parameters:
        - food_item_id + quantity, or calories (exactly one of the two)
        - meal_type (required): breakfast/lunch/dinner/snack
        - logged_date (required): YYYY-MM-DD
        - serving_unit, notes (optional)
    """
    data, errors = validate_schema(CreateFoodDiaryEntrySchema, json_body())
    if errors:
        return validation_error(errors)

    try:
        entry = food_diary_service.create_entry(request.user_id, data)
    except ServiceError as e:
        if e.code == "VALIDATION_ERROR":
            return validation_error({"food_item_id": [e.message]})
        return error(e.code, e.message, e.status)

    return ok(serialize_food_entry(entry), "Food diary entry created successfully", 201)


def quick_add_handler():
    data, errors = validate_schema(QuickAddSchema, json_body())
    if errors:
        return validation_error(errors)

    entry = food_diary_service.quick_add(request.user_id, data)
    return ok(serialize_food_entry(entry), "Quick food entry added successfully", 201)


def update_food_diary_entry_handler(entry_id: int):
    data, errors = validate_schema(UpdateFoodDiaryEntrySchema, json_body())
    if errors:
        return validation_error(errors)

    try:
        entry = food_diary_service.update_entry(request.user_id, entry_id, data)
    except ServiceError as e:
        return error(e.code, e.message, e.status)

    return ok(serialize_food_entry(entry), "Food diary entry updated successfully")


def delete_food_diary_entry_handler(entry_id: int):
    try:
        food_diary_service.delete_entry(request.user_id, entry_id)
    except ServiceError as e:
        return error(e.code, e.message, e.status)

    return ok(None, "Food diary entry deleted successfully")


def copy_yesterday_handler():
    data, errors = validate_schema(CopyYesterdaySchema, json_body())
    if errors:
        return validation_error(errors)

    copied = food_diary_service.copy_yesterday(request.user_id, data["target_date"])
    return ok(
        [serialize_food_entry(e) for e in copied],
        "Food diary entries copied from yesterday successfully",
        201,
    )


def copy_from_date_handler():
    data, errors = validate_schema(CopyEntriesSchema, json_body())
    if errors:
        return validation_error(errors)

    copied = food_diary_service.copy_entries(request.user_id, data["source_date"], data["target_date"])
    return ok(
        [serialize_food_entry(e) for e in copied],
        "Food diary entries copied from date successfully",
        201,
    )


def copy_to_date_handler():
    data, errors = validate_schema(CopyEntriesSchema, json_body())
    if errors:
        return validation_error(errors)

    copied = food_diary_service.copy_entries(request.user_id, data["source_date"], data["target_date"])
    return ok(
        [serialize_food_entry(e) for e in copied],
        "Food diary entries copied to date successfully",
        201,
    )
