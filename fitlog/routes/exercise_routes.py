from flask import Blueprint
from fitlog.utils.auth import require_auth
from fitlog.controllers.exercise_controller import (
    search_exercises_handler,
    categories_handler,
    my_exercises_handler,
    create_exercise_handler,
    update_exercise_handler,
)

exercise_bp = Blueprint("exercise", __name__, url_prefix="/api/exercises")

@exercise_bp.get("/search")
@require_auth
def search_exercises():
    return search_exercises_handler()


@exercise_bp.get("/categories")
@require_auth
def categories():
    return categories_handler()


@exercise_bp.get("/mine")
@require_auth
def my_exercises():
    return my_exercises_handler()


@exercise_bp.post("")
@require_auth
def create_exercise():
    return create_exercise_handler()


@exercise_bp.put("/<int:exercise_id>")
@require_auth
def update_exercise(exercise_id):
    return update_exercise_handler(exercise_id)
