"""
Food Controller Module

Handles the user-contributed food catalog:
- Searching all foods and the caller's own foods
- Creating foods and editing foods the caller created
"""

from flask import request, current_app
from sqlalchemy import or_

from fitlog.extensions import db
from fitlog.models.food_item import FoodItem
from fitlog.schemas.food_schema import CreateFoodItemSchema, SearchQuerySchema
from fitlog.services.serializers import serialize_food_item
from fitlog.utils.http import ok, error, json_body, query_args, validate_schema, validation_error


def _search(query, args, message):
    term = f"%{args['q']}%"
    query = query.filter(or_(FoodItem.name.ilike(term), FoodItem.brand.ilike(term)))

    total = query.count()
    foods = (
        query.order_by(FoodItem.name, FoodItem.id)
        .offset(args["offset"])
        .limit(args["limit"])
        .all()
    )

    return ok({
        "results": [serialize_food_item(f) for f in foods],
        "total": total,
        "page": args["offset"] // args["limit"] + 1,
        "per_page": args["limit"],
    }, message)


def search_foods_handler():
    """
    Query Parameters:
        - q: matched against name or brand
        - limit: page size, 1-100 (default: 20)
        - offset: rows to skip (default: 0)
    """
    args, errors = validate_schema(SearchQuerySchema, query_args())
    if errors:
        return validation_error(errors)
    return _search(FoodItem.query, args, "Food search completed successfully")


def my_foods_handler():
    args, errors = validate_schema(SearchQuerySchema, query_args())
    if errors:
        return validation_error(errors)
    query = FoodItem.query.filter_by(created_by=request.user_id)
    return _search(query, args, "My foods search completed successfully")


def get_food_handler(food_id: int):
    food = db.session.get(FoodItem, food_id)
    if not food:
        return error("NOT_FOUND", "Food item not found", 404)
    return ok(serialize_food_item(food), "Food item retrieved successfully")


def create_food_handler():
    data, errors = validate_schema(CreateFoodItemSchema, json_body())
    if errors:
        return validation_error(errors)

    try:
        food = FoodItem(created_by=request.user_id, verified=False, **data)
        db.session.add(food)
        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Failed to create food item")
        return error("UNKNOWN_ERROR", "Could not create food item", 500)

    return ok(serialize_food_item(food), "Food item created successfully", 201)


def update_food_handler(food_id: int):
    food = db.session.get(FoodItem, food_id)
    if not food:
        return error("NOT_FOUND", "Food item not found", 404)
    if food.created_by != request.user_id:
        return error("FORBIDDEN", "You do not have permission to update this food item", 403)

    data, errors = validate_schema(CreateFoodItemSchema, json_body(), partial=True)
    if errors:
        return validation_error(errors)

    for field, value in data.items():
        setattr(food, field, value)

    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Failed to update food item %s", food_id)
        return error("UNKNOWN_ERROR", "Could not update food item", 500)

    return ok(serialize_food_item(food), "Food item updated successfully")
