from marshmallow import Schema, EXCLUDE


class BaseSchema(Schema):
    class Meta:
        # Extra request keys are ignored rather than rejected
        unknown = EXCLUDE
