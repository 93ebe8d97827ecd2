"""
Goal Service

Resolves and activates user goals while keeping at most one active goal per
user. Activation locks the owning user row and relies on the partial unique
index on user_goals as a backstop.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError

from fitlog.extensions import db
from fitlog.models.user import User
from fitlog.models.user_goal import UserGoal
from fitlog.utils.errors import ConflictError, ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)

GOAL_FIELDS = (
    "goal_type",
    "target_weight_kg",
    "target_date",
    "weekly_goal_kg",
    "daily_calorie_goal",
    "daily_protein_goal",
    "daily_carbs_goal",
    "daily_fat_goal",
    "daily_exercise_minutes",
)


def active_goal(user_id: int) -> Optional[UserGoal]:
    """Return the user's active goal, or None."""
    goals = (
        UserGoal.query
        .filter_by(user_id=user_id, is_active=True)
        .order_by(desc(UserGoal.created_at), desc(UserGoal.id))
        .all()
    )
    if len(goals) > 1:
        logger.warning(
            "User %s has %d active goals (ids=%s); using the newest",
            user_id, len(goals), [g.id for g in goals],
        )
    return goals[0] if goals else None


def list_active_goals(user_id: int) -> List[UserGoal]:
    return (
        UserGoal.query
        .filter_by(user_id=user_id, is_active=True)
        .order_by(desc(UserGoal.created_at), desc(UserGoal.id))
        .all()
    )


def _lock_user(user_id: int) -> None:
    # Serializes concurrent activations for the same user (no-op on SQLite)
    user = db.session.query(User).filter_by(id=user_id).with_for_update().first()
    if user is None:
        raise NotFoundError("User not found")


def _deactivate_all(user_id: int, exclude_id: Optional[int] = None) -> None:
    query = UserGoal.query.filter_by(user_id=user_id, is_active=True)
    if exclude_id is not None:
        query = query.filter(UserGoal.id != exclude_id)
    query.update({"is_active": False}, synchronize_session="fetch")
    db.session.flush()


def activate_goal(user_id: int, attrs: Dict[str, Any]) -> UserGoal:
    """
    Deactivate every goal of the user and insert a new active one, atomically.

    Raises:
        ConflictError: a concurrent activation won the race
    """
    try:
        _lock_user(user_id)
        _deactivate_all(user_id)
        goal = UserGoal(
            user_id=user_id,
            is_active=True,
            **{k: v for k, v in attrs.items() if k in GOAL_FIELDS},
        )
        db.session.add(goal)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        logger.warning("Concurrent goal activation rejected for user %s", user_id)
        raise ConflictError("Another goal was activated concurrently", code="GOAL_CONFLICT")
    except Exception:
        db.session.rollback()
        raise

    logger.info("Activated goal %s for user %s", goal.id, user_id)
    return goal


def update_goal(user_id: int, goal_id: int, attrs: Dict[str, Any]) -> UserGoal:
    """Update a goal owned by ``user_id``; re-activating it deactivates the others."""
    goal = db.session.get(UserGoal, goal_id)
    if goal is None:
        raise NotFoundError("Goal not found")
    if goal.user_id != user_id:
        raise ForbiddenError("You do not have permission to update this goal")

    try:
        if attrs.get("is_active") and not goal.is_active:
            _lock_user(user_id)
            _deactivate_all(user_id, exclude_id=goal.id)
        for field in GOAL_FIELDS:
            if field not in attrs:
                continue
            if field == "goal_type" and attrs[field] is None:
                continue
            setattr(goal, field, attrs[field])
        if attrs.get("is_active") is not None:
            goal.is_active = bool(attrs["is_active"])
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError("Another goal was activated concurrently", code="GOAL_CONFLICT")
    except Exception:
        db.session.rollback()
        raise

    return goal
