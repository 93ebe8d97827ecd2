from marshmallow import fields, validate
from fitlog.schemas.base import BaseSchema
from fitlog.utils.enums import ActivityLevel, Gender, values

class UserProfileUpdateSchema(BaseSchema):
    first_name = fields.Str(allow_none=True, validate=validate.Length(max=255))
    last_name = fields.Str(allow_none=True, validate=validate.Length(max=255))
    date_of_birth = fields.Date(allow_none=True)
    gender = fields.Str(allow_none=True, validate=validate.OneOf(values(Gender)))
    height_cm = fields.Int(allow_none=True, validate=validate.Range(min=50, max=300))
    current_weight_kg = fields.Float(allow_none=True, validate=validate.Range(min=20, max=500))
    goal_weight_kg = fields.Float(allow_none=True, validate=validate.Range(min=20, max=500))
    activity_level = fields.Str(allow_none=True, validate=validate.OneOf(values(ActivityLevel)))
    timezone = fields.Str(allow_none=True, validate=validate.Length(max=64))
