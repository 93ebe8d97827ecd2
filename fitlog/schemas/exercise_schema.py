from marshmallow import fields, validate
from fitlog.schemas.base import BaseSchema
from fitlog.utils.enums import ExerciseCategory, values

class ExerciseSearchQuerySchema(BaseSchema):
    q = fields.Str(load_default="")
    category = fields.Str(load_default=None, allow_none=True, validate=validate.OneOf(values(ExerciseCategory)))
    limit = fields.Int(load_default=20, validate=validate.Range(min=1, max=100))
    offset = fields.Int(load_default=0, validate=validate.Range(min=0))

class CreateExerciseSchema(BaseSchema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    category = fields.Str(required=True, validate=validate.OneOf(values(ExerciseCategory)))
    met_value = fields.Float(allow_none=True, validate=validate.Range(min=0, min_inclusive=False))
    description = fields.Str(allow_none=True)
    instructions = fields.Str(allow_none=True)
    muscle_groups = fields.List(fields.Str(), allow_none=True)
    equipment_needed = fields.List(fields.Str(), allow_none=True)
    difficulty_level = fields.Str(allow_none=True)

class ExerciseEntrySchema(BaseSchema):
    exercise_id = fields.Int(required=True)
    duration_minutes = fields.Int(allow_none=True, validate=validate.Range(min=1))
    calories_burned = fields.Float(allow_none=True, validate=validate.Range(min=0))
    sets = fields.Int(allow_none=True, validate=validate.Range(min=1))
    reps = fields.Int(allow_none=True, validate=validate.Range(min=1))
    weight_used = fields.Float(allow_none=True, validate=validate.Range(min=0))
    distance = fields.Float(allow_none=True, validate=validate.Range(min=0))
    distance_unit = fields.Str(allow_none=True, validate=validate.Length(max=10))
    logged_date = fields.Date(required=True)
    notes = fields.Str(allow_none=True)

class CardioEntrySchema(ExerciseEntrySchema):
    duration_minutes = fields.Int(required=True, validate=validate.Range(min=1))

class StrengthEntrySchema(ExerciseEntrySchema):
    sets = fields.Int(required=True, validate=validate.Range(min=1))
    reps = fields.Int(required=True, validate=validate.Range(min=1))

class UpdateExerciseEntrySchema(BaseSchema):
    duration_minutes = fields.Int(allow_none=True, validate=validate.Range(min=1))
    calories_burned = fields.Float(allow_none=True, validate=validate.Range(min=0))
    sets = fields.Int(allow_none=True, validate=validate.Range(min=1))
    reps = fields.Int(allow_none=True, validate=validate.Range(min=1))
    weight_used = fields.Float(allow_none=True, validate=validate.Range(min=0))
    distance = fields.Float(allow_none=True, validate=validate.Range(min=0))
    distance_unit = fields.Str(allow_none=True, validate=validate.Length(max=10))
    notes = fields.Str(allow_none=True)

class DailyNoteQuerySchema(BaseSchema):
    date = fields.Date(required=True)

class SaveDailyNoteSchema(BaseSchema):
    date = fields.Date(required=True)
    notes = fields.Str(allow_none=True)
