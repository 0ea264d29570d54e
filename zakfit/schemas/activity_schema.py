from marshmallow import fields, validate

from zakfit.schemas.base import MAX_AMOUNT, MAX_INT, BaseSchema


class TypeActivitySchema(BaseSchema):
    id = fields.UUID(dump_only=True)
    name = fields.Str(dump_only=True)


class PhysicalActivitySchema(BaseSchema):
    id = fields.UUID(dump_only=True)
    duration = fields.Float(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    calories_burned = fields.Float(allow_none=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    date = fields.DateTime(required=True)
    type_activity_id = fields.UUID(required=True)
    user_id = fields.UUID(dump_only=True)


class GoalActivitySchema(BaseSchema):
    id = fields.UUID(dump_only=True)
    frequency = fields.Int(allow_none=True, validate=validate.Range(min=0, max=MAX_INT))
    calories_goal = fields.Float(allow_none=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    duration_goal = fields.Float(allow_none=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    type_activity_id = fields.UUID(required=True)
    user_id = fields.UUID(dump_only=True)
