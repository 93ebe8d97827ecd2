"""
Food Diary Service

Handles food diary operations including:
- Catalog-backed and quick-add entry creation
- Owner-checked update and delete
- Copying a day's entries onto another date
"""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Dict, List

from fitlog.extensions import db
from fitlog.models.food_diary_entry import FoodDiaryEntry
from fitlog.models.food_item import FoodItem
from fitlog.services.calorie_service import food_calories
from fitlog.utils.errors import ForbiddenError, NotFoundError, ServiceError

logger = logging.getLogger(__name__)


def _owned_entry(user_id: int, entry_id: int, action: str) -> FoodDiaryEntry:
    entry = db.session.get(FoodDiaryEntry, entry_id)
    if entry is None:
        raise NotFoundError("Food diary entry not found")
    if entry.user_id != user_id:
        raise ForbiddenError(f"You do not have permission to {action} this entry")
    return entry


def list_entries(user_id: int, day: date) -> List[FoodDiaryEntry]:
    return (
        FoodDiaryEntry.query
        .filter_by(user_id=user_id, logged_date=day)
        .order_by(FoodDiaryEntry.logged_at, FoodDiaryEntry.id)
        .all()
    )


def create_entry(user_id: int, data: Dict[str, Any]) -> FoodDiaryEntry:
    """
    Create a food diary entry.

    With ``food_item_id`` the calories are derived from the catalog item and
    stored; without it the supplied ``calories`` are stored as-is.

    Raises:
        ServiceError: VALIDATION_ERROR if the food item does not exist
    """
    food_item_id = data.get("food_item_id")
    quantity = data.get("quantity")
    serving_unit = data.get("serving_unit")
    calories = data.get("calories")

    if food_item_id is not None:
        item = db.session.get(FoodItem, food_item_id)
        if item is None:
            raise ServiceError("food_item_id does not exist", code="VALIDATION_ERROR")
        calories = food_calories(item, quantity)
        serving_unit = serving_unit or item.serving_unit

    entry = FoodDiaryEntry(
        user_id=user_id,
        food_item_id=food_item_id,
        meal_type=data["meal_type"],
        quantity=quantity,
        serving_unit=serving_unit,
        calories=calories,
        logged_date=data["logged_date"],
        logged_at=datetime.utcnow(),
        notes=data.get("notes"),
    )
    db.session.add(entry)
    db.session.commit()
    return entry


def quick_add(user_id: int, data: Dict[str, Any]) -> FoodDiaryEntry:
    entry = FoodDiaryEntry(
        user_id=user_id,
        meal_type=data["meal_type"],
        calories=data["calories"],
        logged_date=data["logged_date"],
        logged_at=datetime.utcnow(),
        notes=data.get("description"),
    )
    db.session.add(entry)
    db.session.commit()
    return entry


def update_entry(user_id: int, entry_id: int, data: Dict[str, Any]) -> FoodDiaryEntry:
    entry = _owned_entry(user_id, entry_id, "update")

    if data.get("meal_type") is not None:
        entry.meal_type = data["meal_type"]
    if data.get("serving_unit") is not None:
        entry.serving_unit = data["serving_unit"]
    if "notes" in data:
        entry.notes = data["notes"]
    if data.get("quantity") is not None:
        entry.quantity = data["quantity"]
        # Keep the denormalized calories in step with the new quantity
        if entry.food_item is not None:
            entry.calories = food_calories(entry.food_item, data["quantity"])

    db.session.commit()
    return entry


def delete_entry(user_id: int, entry_id: int) -> None:
    entry = _owned_entry(user_id, entry_id, "delete")
    db.session.delete(entry)
    db.session.commit()


def copy_entries(user_id: int, source_date: date, target_date: date) -> List[FoodDiaryEntry]:
    """
    Clone every entry of ``source_date`` onto ``target_date``.

    Source rows are read before any insert. Existing target-date entries are
    left alone, so copying twice duplicates.
    """
    source_entries = list_entries(user_id, source_date)

    copied = []
    now = datetime.utcnow()
    try:
        for entry in source_entries:
            clone = FoodDiaryEntry(
                user_id=user_id,
                food_item_id=entry.food_item_id,
                meal_type=entry.meal_type,
                quantity=entry.quantity,
                serving_unit=entry.serving_unit,
                calories=entry.calories,
                logged_date=target_date,
                logged_at=now,
                notes=entry.notes,
            )
            db.session.add(clone)
            copied.append(clone)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info(
        "Copied %d food diary entries for user %s from %s to %s",
        len(copied), user_id, source_date, target_date,
    )
    return copied


def copy_yesterday(user_id: int, target_date: date) -> List[FoodDiaryEntry]:
    return copy_entries(user_id, target_date - timedelta(days=1), target_date)
