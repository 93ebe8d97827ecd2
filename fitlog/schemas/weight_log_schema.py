from marshmallow import fields, validate
from fitlog.schemas.base import BaseSchema

class WeightLogQuerySchema(BaseSchema):
    period = fields.Int(load_default=30, validate=validate.Range(min=1, max=365))

class WeightLogSchema(BaseSchema):
    weight_kg = fields.Float(required=True, validate=validate.Range(min=30, max=500))
    neck_cm = fields.Float(allow_none=True, validate=validate.Range(min=20, max=100))
    waist_cm = fields.Float(allow_none=True, validate=validate.Range(min=40, max=200))
    hips_cm = fields.Float(allow_none=True, validate=validate.Range(min=50, max=200))
    logged_date = fields.Date(required=True)
    notes = fields.Str(allow_none=True)
