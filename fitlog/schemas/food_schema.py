from marshmallow import fields, validate, validates_schema, ValidationError
from fitlog.schemas.base import BaseSchema
from fitlog.utils.enums import MealType, values

class SearchQuerySchema(BaseSchema):
    q = fields.Str(load_default="")
    limit = fields.Int(load_default=20, validate=validate.Range(min=1, max=100))
    offset = fields.Int(load_default=0, validate=validate.Range(min=0))

class CreateFoodItemSchema(BaseSchema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    brand = fields.Str(allow_none=True, validate=validate.Length(max=255))
    serving_size = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    serving_unit = fields.Str(required=True, validate=validate.Length(min=1, max=50))
    calories_per_serving = fields.Float(required=True, validate=validate.Range(min=0))
    protein_g = fields.Float(allow_none=True, validate=validate.Range(min=0))
    carbs_g = fields.Float(allow_none=True, validate=validate.Range(min=0))
    fat_g = fields.Float(allow_none=True, validate=validate.Range(min=0))
    fiber_g = fields.Float(allow_none=True, validate=validate.Range(min=0))
    sugar_g = fields.Float(allow_none=True, validate=validate.Range(min=0))
    sodium_mg = fields.Float(allow_none=True, validate=validate.Range(min=0))

class DateQuerySchema(BaseSchema):
    date = fields.Date(load_default=None, allow_none=True)

class CreateFoodDiaryEntrySchema(BaseSchema):
    food_item_id = fields.Int(allow_none=True)
    meal_type = fields.Str(required=True, validate=validate.OneOf(values(MealType)))
    quantity = fields.Float(allow_none=True, validate=validate.Range(min=0, min_inclusive=False))
    serving_unit = fields.Str(allow_none=True, validate=validate.Length(max=50))
    calories = fields.Float(allow_none=True, validate=validate.Range(min=0))
    logged_date = fields.Date(required=True)
    notes = fields.Str(allow_none=True)

    @validates_schema
    def validate_entry_kind(self, data, **kwargs):
        has_item = data.get("food_item_id") is not None
        has_calories = data.get("calories") is not None
        if has_item and has_calories:
            raise ValidationError("Provide either food_item_id with quantity or calories, not both", field_name="calories")
        if not has_item and not has_calories:
            raise ValidationError("food_item_id or calories is required", field_name="food_item_id")
        if has_item and data.get("quantity") is None:
            raise ValidationError("quantity is required with food_item_id", field_name="quantity")

class QuickAddSchema(BaseSchema):
    meal_type = fields.Str(required=True, validate=validate.OneOf(values(MealType)))
    calories = fields.Float(required=True, validate=validate.Range(min=0))
    logged_date = fields.Date(required=True)
    description = fields.Str(allow_none=True)

class UpdateFoodDiaryEntrySchema(BaseSchema):
    meal_type = fields.Str(allow_none=True, validate=validate.OneOf(values(MealType)))
    quantity = fields.Float(allow_none=True, validate=validate.Range(min=0, min_inclusive=False))
    serving_unit = fields.Str(allow_none=True, validate=validate.Length(max=50))
    notes = fields.Str(allow_none=True)

class CopyYesterdaySchema(BaseSchema):
    target_date = fields.Date(required=True)

class CopyEntriesSchema(BaseSchema):
    source_date = fields.Date(required=True)
    target_date = fields.Date(required=True)
