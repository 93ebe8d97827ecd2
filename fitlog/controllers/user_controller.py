from flask import request
from fitlog.extensions import db
from fitlog.models.user import User
from fitlog.schemas.user_schema import UserProfileUpdateSchema
from fitlog.services.serializers import serialize_user
from fitlog.utils.http import ok, error, json_body, validate_schema, validation_error


def _current_user():
    return db.session.get(User, request.user_id)


def get_profile_handler():
    user = _current_user()
    if not user:
        return error("UNAUTHORIZED", "User not found", 401)
    return ok(serialize_user(user), "Profile retrieved successfully")


def update_profile_handler():
    user = _current_user()
    if not user:
        return error("UNAUTHORIZED", "User not found", 401)

    data, errors = validate_schema(UserProfileUpdateSchema, json_body())
    if errors:
        return validation_error(errors)

    for field, value in data.items():
        setattr(user, field, value)
    db.session.commit()

    return ok(serialize_user(user), "Profile updated successfully")
