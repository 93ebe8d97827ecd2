from marshmallow import fields, validate
from fitlog.schemas.base import BaseSchema
from fitlog.utils.enums import ActivityLevel, Gender, values

class RegisterSchema(BaseSchema):
    email = fields.Email(required=True)
    password = fields.Str(required=True, load_only=True, validate=validate.Length(min=8))
    username = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    first_name = fields.Str(allow_none=True)
    last_name = fields.Str(allow_none=True)
    date_of_birth = fields.Date(allow_none=True)
    gender = fields.Str(allow_none=True, validate=validate.OneOf(values(Gender)))
    height_cm = fields.Int(allow_none=True, validate=validate.Range(min=50, max=300))
    current_weight_kg = fields.Float(allow_none=True, validate=validate.Range(min=20, max=500))
    goal_weight_kg = fields.Float(allow_none=True, validate=validate.Range(min=20, max=500))
    activity_level = fields.Str(allow_none=True, validate=validate.OneOf(values(ActivityLevel)))

class LoginSchema(BaseSchema):
    email = fields.Email(required=True)
    password = fields.Str(required=True, load_only=True)
