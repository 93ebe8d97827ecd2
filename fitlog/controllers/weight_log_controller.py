from datetime import datetime, timedelta
from flask import request, current_app
from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError

from fitlog.extensions import db
from fitlog.models.weight_log import WeightLog
from fitlog.schemas.weight_log_schema import WeightLogQuerySchema, WeightLogSchema
from fitlog.services.serializers import serialize_weight_log
from fitlog.utils.clock import today
from fitlog.utils.http import ok, error, json_body, query_args, validate_schema, validation_error

DUPLICATE_MESSAGE = "Weight log already exists for this date"


def list_weight_logs_handler():
    """
    Query Parameters:
        - period: number of days back from today, 1-365 (default: 30)
    """
    args, errors = validate_schema(WeightLogQuerySchema, query_args())
    if errors:
        return validation_error(errors)

    start_date = today() - timedelta(days=args["period"])
    logs = (
        WeightLog.query
        .filter(WeightLog.user_id == request.user_id, WeightLog.logged_date >= start_date)
        .order_by(desc(WeightLog.logged_at))
        .all()
    )
    return ok([serialize_weight_log(log) for log in logs], "Weight logs retrieved successfully")


def create_weight_log_handler():
    data, errors = validate_schema(WeightLogSchema, json_body())
    if errors:
        return validation_error(errors)

    user_id = request.user_id
    existing = WeightLog.query.filter_by(user_id=user_id, logged_date=data["logged_date"]).first()
    if existing:
        return error("DUPLICATE_ENTRY", DUPLICATE_MESSAGE, 409)

    try:
        log = WeightLog(user_id=user_id, logged_at=datetime.utcnow(), **data)
        db.session.add(log)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return error("DUPLICATE_ENTRY", DUPLICATE_MESSAGE, 409)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Failed to create weight log")
        return error("UNKNOWN_ERROR", "Could not create weight log", 500)

    return ok(serialize_weight_log(log), "Weight log created successfully", 201)


def update_weight_log_handler(log_id: int):
    user_id = request.user_id
    log = WeightLog.query.filter_by(id=log_id, user_id=user_id).first()
    if not log:
        return error("NOT_FOUND", "Weight log not found", 404)

    data, errors = validate_schema(WeightLogSchema, json_body())
    if errors:
        return validation_error(errors)

    clash = (
        WeightLog.query
        .filter(
            WeightLog.user_id == user_id,
            WeightLog.logged_date == data["logged_date"],
            WeightLog.id != log_id,
        )
        .first()
    )
    if clash:
        return error("DUPLICATE_ENTRY", DUPLICATE_MESSAGE, 409)

    for field, value in data.items():
        setattr(log, field, value)

    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return error("DUPLICATE_ENTRY", DUPLICATE_MESSAGE, 409)

    return ok(serialize_weight_log(log), "Weight log updated successfully")
