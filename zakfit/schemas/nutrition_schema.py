from marshmallow import Schema, fields, validate

from zakfit.schemas.base import MAX_AMOUNT, BaseSchema


class FoodSchema(BaseSchema):
    id = fields.UUID(dump_only=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    quantity = fields.Float(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    proteins = fields.Float(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    carbs = fields.Float(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    fats = fields.Float(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    calories = fields.Float(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))


class MealSchema(BaseSchema):
    id = fields.UUID(dump_only=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    meal_type = fields.Str(required=True, validate=validate.Length(min=1, max=50))
    quantity = fields.Float(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    date = fields.DateTime(required=True)
    calories = fields.Float(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    user_id = fields.UUID(dump_only=True)


class CompositionSchema(BaseSchema):
    id = fields.UUID(dump_only=True)
    quantity = fields.Float(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    food_id = fields.UUID(required=True)
    meal_id = fields.UUID(required=True)


class MealWithFoodsSchema(Schema):
    meal = fields.Nested(MealSchema)
    foods = fields.List(fields.Nested(FoodSchema))
