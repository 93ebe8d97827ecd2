from flask import Blueprint
from fitlog.utils.auth import require_auth
from fitlog.controllers.exercise_diary_controller import (
    list_exercise_diary_handler,
    create_exercise_entry_handler,
    create_cardio_entry_handler,
    create_strength_entry_handler,
    update_exercise_entry_handler,
    delete_exercise_entry_handler,
    get_daily_notes_handler,
    save_daily_notes_handler,
)

exercise_diary_bp = Blueprint("exercise_diary", __name__, url_prefix="/api/exercise-diary")

@exercise_diary_bp.get("")
@require_auth
def list_entries():
    return list_exercise_diary_handler()


@exercise_diary_bp.post("")
@require_auth
def create_entry():
    return create_exercise_entry_handler()


@exercise_diary_bp.post("/cardio")
@require_auth
def create_cardio():
    return create_cardio_entry_handler()


@exercise_diary_bp.post("/strength")
@require_auth
def create_strength():
    return create_strength_entry_handler()


@exercise_diary_bp.put("/<int:entry_id>")
@require_auth
def update_entry(entry_id):
    return update_exercise_entry_handler(entry_id)


@exercise_diary_bp.delete("/<int:entry_id>")
@require_auth
def delete_entry(entry_id):
    return delete_exercise_entry_handler(entry_id)


@exercise_diary_bp.get("/notes")
@require_auth
def get_notes():
    return get_daily_notes_handler()


@exercise_diary_bp.put("/notes")
@require_auth
def save_notes():
    return save_daily_notes_handler()
