from flask import request

from fitlog.schemas.goal_schema import CreateGoalSchema, UpdateGoalSchema
from fitlog.services import goal_service
from fitlog.services.serializers import serialize_goal
from fitlog.utils.errors import ServiceError
from fitlog.utils.http import ok, error, json_body, validate_schema, validation_error


def list_goals_handler():
    goals = goal_service.list_active_goals(request.user_id)
    return ok([serialize_goal(g) for g in goals], "Goals retrieved successfully")


def create_goal_handler():
    """Create a goal and make it the user's only active goal."""
    data, errors = validate_schema(CreateGoalSchema, json_body())
    if errors:
        return validation_error(errors)

    try:
        goal = goal_service.activate_goal(request.user_id, data)
    except ServiceError as e:
        return error(e.code, e.message, e.status)

    return ok(serialize_goal(goal), "Goal created successfully", 201)


def update_goal_handler(goal_id: int):
    data, errors = validate_schema(UpdateGoalSchema, json_body())
    if errors:
        return validation_error(errors)

    try:
        goal = goal_service.update_goal(request.user_id, goal_id, data)
    except ServiceError as e:
        return error(e.code, e.message, e.status)

    return ok(serialize_goal(goal), "Goal updated successfully")
