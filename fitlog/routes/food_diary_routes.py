from flask import Blueprint
from fitlog.utils.auth import require_auth
from fitlog.controllers.food_diary_controller import (
    list_food_diary_handler,
    create_food_diary_entry_handler,
    quick_add_handler,
    update_food_diary_entry_handler,
    delete_food_diary_entry_handler,
    copy_yesterday_handler,
    copy_from_date_handler,
    copy_to_date_handler,
)

food_diary_bp = Blueprint("food_diary", __name__, url_prefix="/api/food-diary")

@food_diary_bp.get("")
@require_auth
def list_entries():
    return list_food_diary_handler()


@food_diary_bp.post("")
@require_auth
def create_entry():
    return create_food_diary_entry_handler()


@food_diary_bp.post("/quick-add")
@require_auth
def quick_add():
    return quick_add_handler()


@food_diary_bp.put("/<int:entry_id>")
@require_auth
def update_entry(entry_id):
    return update_food_diary_entry_handler(entry_id)


@food_diary_bp.delete("/<int:entry_id>")
@require_auth
def delete_entry(entry_id):
    return delete_food_diary_entry_handler(entry_id)


@food_diary_bp.post("/copy-yesterday")
@require_auth
def copy_yesterday():
    return copy_yesterday_handler()


@food_diary_bp.post("/copy-from-date")
@require_auth
def copy_from_date():
    return copy_from_date_handler()


@food_diary_bp.post("/copy-to-date")
@require_auth
def copy_to_date():
    return copy_to_date_handler()
