from flask import Blueprint
from fitlog.utils.auth import require_auth
from fitlog.controllers.food_controller import (
    search_foods_handler,
    my_foods_handler,
    get_food_handler,
    create_food_handler,
    update_food_handler,
)

food_bp = Blueprint("food", __name__, url_prefix="/api/foods")

@food_bp.get("/search")
@require_auth
def search_foods():
    return search_foods_handler()


@food_bp.get("/mine")
@require_auth
def my_foods():
    return my_foods_handler()


@food_bp.get("/<int:food_id>")
@require_auth
def get_food(food_id):
    return get_food_handler(food_id)


@food_bp.post("")
@require_auth
def create_food():
    return create_food_handler()


@food_bp.put("/<int:food_id>")
@require_auth
def update_food(food_id):
    return update_food_handler(food_id)
