from .user import User
from .food_item import FoodItem
from .exercise import Exercise
from .food_diary_entry import FoodDiaryEntry
from .exercise_diary_entry import ExerciseDiaryEntry
from .user_goal import UserGoal
from .daily_note import DailyNote
from .weight_log import WeightLog

__all__ = [
    "User",
    "FoodItem",
    "Exercise",
    "FoodDiaryEntry",
    "ExerciseDiaryEntry",
    "UserGoal",
    "DailyNote",
    "WeightLog",
]
