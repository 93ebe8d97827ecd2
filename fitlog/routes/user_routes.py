from flask import Blueprint
from fitlog.utils.auth import require_auth
from fitlog.controllers.user_controller import get_profile_handler, update_profile_handler
from fitlog.controllers.goal_controller import list_goals_handler, create_goal_handler, update_goal_handler
from fitlog.controllers.weight_log_controller import (
    list_weight_logs_handler,
    create_weight_log_handler,
    update_weight_log_handler,
)
from fitlog.controllers.dashboard_controller import daily_summary_handler

user_bp = Blueprint("user", __name__, url_prefix="/api/users")

@user_bp.get("/profile")
@require_auth
def get_profile():
    return get_profile_handler()

@user_bp.put("/profile")
@require_auth
def update_profile():
    return update_profile_handler()

# Goals
@user_bp.get("/goals")
@require_auth
def list_goals():
    return list_goals_handler()

@user_bp.post("/goals")
@require_auth
def create_goal():
    return create_goal_handler()

@user_bp.put("/goals/<int:goal_id>")
@require_auth
def update_goal(goal_id):
    return update_goal_handler(goal_id)

# Weight logs
@user_bp.get("/weight-logs")
@require_auth
def list_weight_logs():
    return list_weight_logs_handler()

@user_bp.post("/weight-logs")
@require_auth
def create_weight_log():
    return create_weight_log_handler()

@user_bp.put("/weight-logs/<int:log_id>")
@require_auth
def update_weight_log(log_id):
    return update_weight_log_handler(log_id)

# Dashboard
@user_bp.get("/daily-summary")
@require_auth
def daily_summary():
    return daily_summary_handler()
