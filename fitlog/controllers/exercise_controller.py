from flask import request, current_app

from fitlog.extensions import db
from fitlog.models.exercise import Exercise
from fitlog.schemas.exercise_schema import CreateExerciseSchema, ExerciseSearchQuerySchema
from fitlog.schemas.food_schema import SearchQuerySchema
from fitlog.services.serializers import serialize_exercise
from fitlog.utils.enums import ExerciseCategory, values
from fitlog.utils.http import ok, error, json_body, query_args, validate_schema, validation_error


def _page(query, args, message):
    total = query.count()
    exercises = (
        query.order_by(Exercise.name, Exercise.id)
        .offset(args["offset"])
        .limit(args["limit"])
        .all()
    )
    return ok({
        "results": [serialize_exercise(e) for e in exercises],
        "total": total,
        "page": args["offset"] // args["limit"] + 1,
        "per_page": args["limit"],
    }, message)


def search_exercises_handler():
    args, errors = validate_schema(ExerciseSearchQuerySchema, query_args())
    if errors:
        return validation_error(errors)

    query = Exercise.query
    if args["q"]:
        query = query.filter(Exercise.name.ilike(f"%{args['q']}%"))
    if args.get("category"):
        query = query.filter_by(category=args["category"])
    return _page(query, args, "Exercise search completed successfully")


def categories_handler():
    return ok(values(ExerciseCategory), "Exercise categories retrieved successfully")


def my_exercises_handler():
    args, errors = validate_schema(SearchQuerySchema, query_args())
    if errors:
        return validation_error(errors)

    query = Exercise.query.filter(
        Exercise.created_by == request.user_id,
        Exercise.name.ilike(f"%{args['q']}%"),
    )
    return _page(query, args, "My exercises search completed successfully")


def create_exercise_handler():
    data, errors = validate_schema(CreateExerciseSchema, json_body())
    if errors:
        return validation_error(errors)

    try:
        exercise = Exercise(created_by=request.user_id, **data)
        db.session.add(exercise)
        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Failed to create exercise")
        return error("UNKNOWN_ERROR", "Could not create exercise", 500)

    return ok(serialize_exercise(exercise), "Exercise created successfully", 201)


def update_exercise_handler(exercise_id: int):
    exercise = db.session.get(Exercise, exercise_id)
    if not exercise:
        return error("NOT_FOUND", "Exercise not found", 404)
    if exercise.created_by != request.user_id:
        return error("FORBIDDEN", "You do not have permission to update this exercise", 403)

    data, errors = validate_schema(CreateExerciseSchema, json_body(), partial=True)
    if errors:
        return validation_error(errors)

    for field, value in data.items():
        setattr(exercise, field, value)

    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Failed to update exercise %s", exercise_id)
        return error("UNKNOWN_ERROR", "Could not update exercise", 500)

    return ok(serialize_exercise(exercise), "Exercise updated successfully")
