from marshmallow import fields, validate, ValidationError
from fitlog.schemas.base import BaseSchema
from fitlog.utils.clock import today
from fitlog.utils.enums import GoalType, values


def _after_today(value):
    if value is not None and value <= today():
        raise ValidationError("target_date must be after today")


class CreateGoalSchema(BaseSchema):
    goal_type = fields.Str(required=True, validate=validate.OneOf(values(GoalType)))
    target_weight_kg = fields.Float(allow_none=True, validate=validate.Range(min=30, max=500))
    target_date = fields.Date(allow_none=True, validate=_after_today)
    weekly_goal_kg = fields.Float(allow_none=True, validate=validate.Range(min=-5, max=5))
    daily_calorie_goal = fields.Int(allow_none=True, validate=validate.Range(min=500, max=10000))
    daily_protein_goal = fields.Float(allow_none=True, validate=validate.Range(min=0, max=1000))
    daily_carbs_goal = fields.Float(allow_none=True, validate=validate.Range(min=0, max=1000))
    daily_fat_goal = fields.Float(allow_none=True, validate=validate.Range(min=0, max=500))
    daily_exercise_minutes = fields.Int(allow_none=True, validate=validate.Range(min=0, max=1440))

class UpdateGoalSchema(CreateGoalSchema):
    goal_type = fields.Str(allow_none=True, validate=validate.OneOf(values(GoalType)))
    is_active = fields.Bool(allow_none=True)
