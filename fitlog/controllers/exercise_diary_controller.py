from flask import request

from fitlog.schemas.exercise_schema import (
    CardioEntrySchema,
    DailyNoteQuerySchema,
    ExerciseEntrySchema,
    SaveDailyNoteSchema,
    StrengthEntrySchema,
    UpdateExerciseEntrySchema,
)
from fitlog.schemas.food_schema import DateQuerySchema
from fitlog.services import exercise_diary_service
from fitlog.services.serializers import serialize_daily_note, serialize_exercise_entry
from fitlog.utils.clock import today
from fitlog.utils.errors import ServiceError
from fitlog.utils.http import ok, error, json_body, query_args, validate_schema, validation_error


def list_exercise_diary_handler():
    args, errors = validate_schema(DateQuerySchema, query_args())
    if errors:
        return validation_error(errors)

    day = args.get("date") or today()
    entries = exercise_diary_service.list_entries(request.user_id, day)
    return ok([serialize_exercise_entry(e) for e in entries], "Exercise diary entries retrieved successfully")


def _create(schema_cls, message: str):
    data, errors = validate_schema(schema_cls, json_body())
    if errors:
        return validation_error(errors)

    try:
        entry = exercise_diary_service.create_entry(request.user_id, data)
    except ServiceError as e:
        if e.code == "VALIDATION_ERROR":
            return validation_error({"exercise_id": [e.message]})
        return error(e.code, e.message, e.status)

    return ok(serialize_exercise_entry(entry), message, 201)


def create_exercise_entry_handler():
    return _create(ExerciseEntrySchema, "Exercise diary entry created successfully")


def create_cardio_entry_handler():
    return _create(CardioEntrySchema, "Cardio exercise entry created successfully")


def create_strength_entry_handler():
    return _create(StrengthEntrySchema, "Strength exercise entry created successfully")


def update_exercise_entry_handler(entry_id: int):
    data, errors = validate_schema(UpdateExerciseEntrySchema, json_body())
    if errors:
        return validation_error(errors)

    try:
        entry = exercise_diary_service.update_entry(request.user_id, entry_id, data)
    except ServiceError as e:
        return error(e.code, e.message, e.status)

    return ok(serialize_exercise_entry(entry), "Exercise diary entry updated successfully")


def delete_exercise_entry_handler(entry_id: int):
    try:
        exercise_diary_service.delete_entry(request.user_id, entry_id)
    except ServiceError as e:
        return error(e.code, e.message, e.status)

    return ok(None, "Exercise diary entry deleted successfully")


def get_daily_notes_handler():
    args, errors = validate_schema(DailyNoteQuerySchema, query_args())
    if errors:
        return validation_error(errors)

    note = exercise_diary_service.get_daily_note(request.user_id, args["date"])
    return ok((note.notes or "") if note else "", "Daily exercise notes retrieved successfully")


def save_daily_notes_handler():
    data, errors = validate_schema(SaveDailyNoteSchema, json_body())
    if errors:
        return validation_error(errors)

    note = exercise_diary_service.save_daily_note(request.user_id, data["date"], data.get("notes"))
    return ok(serialize_daily_note(note), "Daily exercise notes saved successfully")
