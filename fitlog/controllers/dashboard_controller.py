from flask import request
from fitlog.schemas.food_schema import DateQuerySchema
from fitlog.services.summary_service import daily_summary
from fitlog.utils.clock import today
from fitlog.utils.http import ok, query_args, validate_schema, validation_error

def daily_summary_handler():
    """
    Daily nutrition and activity summary for the current user.

    Query Parameters:
        - date (optional): YYYY-MM-DD, defaults to the server's today
    """
    args, errors = validate_schema(DateQuerySchema, query_args())
    if errors:
        return validation_error(errors)

    day = args.get("date") or today()
    return ok(daily_summary(request.user_id, day), "Daily summary retrieved successfully")
