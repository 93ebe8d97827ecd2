"""
Exercise Diary Service

Exercise entry creation with MET-based calorie estimation, owner-checked
update/delete, and the per-day exercise note.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from fitlog.extensions import db
from fitlog.models.daily_note import DailyNote
from fitlog.models.exercise import Exercise
from fitlog.models.exercise_diary_entry import ExerciseDiaryEntry
from fitlog.services.calorie_service import exercise_calories
from fitlog.utils.errors import ForbiddenError, NotFoundError, ServiceError

ENTRY_FIELDS = (
    "duration_minutes",
    "calories_burned",
    "sets",
    "reps",
    "weight_used",
    "distance",
    "distance_unit",
    "notes",
)


def _owned_entry(user_id: int, entry_id: int, action: str) -> ExerciseDiaryEntry:
    entry = db.session.get(ExerciseDiaryEntry, entry_id)
    if entry is None:
        raise NotFoundError("Exercise diary entry not found")
    if entry.user_id != user_id:
        raise ForbiddenError(f"You do not have permission to {action} this entry")
    return entry


def list_entries(user_id: int, day: date) -> List[ExerciseDiaryEntry]:
    return (
        ExerciseDiaryEntry.query
        .filter_by(user_id=user_id, logged_date=day)
        .order_by(ExerciseDiaryEntry.logged_at, ExerciseDiaryEntry.id)
        .all()
    )


def create_entry(user_id: int, data: Dict[str, Any]) -> ExerciseDiaryEntry:
    """
    Create an exercise diary entry, estimating calories_burned when absent.

    Raises:
        ServiceError: VALIDATION_ERROR if the exercise does not exist
    """
    exercise = db.session.get(Exercise, data["exercise_id"])
    if exercise is None:
        raise ServiceError("exercise_id does not exist", code="VALIDATION_ERROR")

    values = {field: data.get(field) for field in ENTRY_FIELDS}
    if values["calories_burned"] is None:
        values["calories_burned"] = exercise_calories(
            exercise,
            duration_minutes=values["duration_minutes"],
            sets=values["sets"],
            reps=values["reps"],
        )

    entry = ExerciseDiaryEntry(
        user_id=user_id,
        exercise_id=exercise.id,
        logged_date=data["logged_date"],
        logged_at=datetime.utcnow(),
        **values,
    )
    db.session.add(entry)
    db.session.commit()
    return entry


def update_entry(user_id: int, entry_id: int, data: Dict[str, Any]) -> ExerciseDiaryEntry:
    entry = _owned_entry(user_id, entry_id, "update")

    for field in ENTRY_FIELDS:
        if field in data:
            setattr(entry, field, data[field])

    # Without an explicit value, a changed workload or a cleared value is
    # re-estimated; a stale value is dropped when no estimate is possible
    workload_changed = any(f in data for f in ("duration_minutes", "sets", "reps"))
    if data.get("calories_burned") is None and (workload_changed or entry.calories_burned is None):
        entry.calories_burned = exercise_calories(
            entry.exercise,
            duration_minutes=entry.duration_minutes,
            sets=entry.sets,
            reps=entry.reps,
        )

    db.session.commit()
    return entry


def delete_entry(user_id: int, entry_id: int) -> None:
    entry = _owned_entry(user_id, entry_id, "delete")
    db.session.delete(entry)
    db.session.commit()


def get_daily_note(user_id: int, day: date) -> Optional[DailyNote]:
    return DailyNote.query.filter_by(user_id=user_id, date=day).first()


def save_daily_note(user_id: int, day: date, notes: Optional[str]) -> DailyNote:
    """Upsert the note for (user, day)."""
    note = get_daily_note(user_id, day)
    if note:
        note.notes = notes
    else:
        note = DailyNote(user_id=user_id, date=day, notes=notes)
        db.session.add(note)
    db.session.commit()
    return note
