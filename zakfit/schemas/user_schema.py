from marshmallow import fields, post_load, pre_load, validate

from zakfit.schemas.base import MAX_AMOUNT, BaseSchema
from zakfit.utils.enums import DietPreference, HealthGoal


class UserSchema(BaseSchema):
    id = fields.UUID(dump_only=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    surname = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    email = fields.Email(required=True, validate=validate.Length(max=255))
    password = fields.Str(required=True, load_only=True, validate=validate.Length(min=1))
    height = fields.Float(allow_none=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    weight = fields.Float(allow_none=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    health_goal = fields.Int(allow_none=True, validate=validate.OneOf([g.value for g in HealthGoal]))
    diet_preferences = fields.List(
        fields.Int(validate=validate.OneOf([p.value for p in DietPreference])),
        allow_none=True,
    )

    @pre_load
    def normalize_email(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get("email"), str):
            data = dict(data)
            data["email"] = data["email"].strip().lower()
        return data


class LoginSchema(BaseSchema):
    email = fields.Str(load_default="")
    password = fields.Str(load_default="")

    @post_load
    def normalize_email(self, data, **kwargs):
        data["email"] = data["email"].strip().lower()
        return data


class PasswordUpdateSchema(BaseSchema):
    old_password = fields.Str(required=True)
    new_password = fields.Str(required=True, validate=validate.Length(min=1))
