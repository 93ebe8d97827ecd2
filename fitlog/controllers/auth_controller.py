from flask import current_app
from fitlog.extensions import db
from fitlog.models.user import User
from fitlog.schemas.auth_schema import LoginSchema, RegisterSchema
from fitlog.services.serializers import serialize_user
from fitlog.utils.auth import create_token, check_password_hash, hash_password
from fitlog.utils.http import ok, error, json_body, validate_schema, validation_error

def login_handler():
    data, errors = validate_schema(LoginSchema, json_body())
    if errors:
        return validation_error(errors)

    email = data["email"].strip().lower()
    user = User.query.filter_by(email=email).first()
    if not user or not check_password_hash(user.password, data["password"]):
        return error("INVALID_CREDENTIALS", "Invalid email or password", 401)

    return ok({
        "user": serialize_user(user),
        "token": create_token(user.id),
    }, "Login successful")

def register_handler():
    data, errors = validate_schema(RegisterSchema, json_body())
    if errors:
        return validation_error(errors)

    email = data.pop("email").strip().lower()
    password = data.pop("password")

    details = {}
    if User.query.filter_by(email=email).first():
        details["email"] = ["The email has already been taken."]
    if User.query.filter_by(username=data["username"]).first():
        details["username"] = ["The username has already been taken."]
    if details:
        return validation_error(details)

    try:
        user = User(email=email, password=hash_password(password), **data)
        db.session.add(user)
        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Failed to register user")
        return error("UNKNOWN_ERROR", "Could not register user", 500)

    return ok({
        "user": serialize_user(user),
        "token": create_token(user.id),
    }, "User registered successfully", 201)

def logout_handler():
    """
    Tokens are stateless JWTs; the client drops its token. This endpoint only
    confirms the logout.
    """
    return ok(None, "Logged out successfully")
