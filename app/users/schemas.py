from marshmallow import fields, validate, EXCLUDE

from app.libs.schemas import CamelCaseSchema
from app.smes.schemas import SmeCreateSchema, SmeSummarySchema


class UserSchema(CamelCaseSchema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Str(dump_only=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    email = fields.Email(required=True)
    phone = fields.Str(allow_none=True, validate=validate.Length(max=20))
    created_at = fields.DateTime(dump_only=True)
    updated_at = fields.DateTime(dump_only=True)


class UserRegisterSchema(UserSchema):
    password = fields.Str(
        required=True, load_only=True, validate=validate.Length(min=1)
    )
    sme = fields.Nested(SmeCreateSchema, required=True)


class RegisterResponseSchema(CamelCaseSchema):
    message = fields.Str()
    user_id = fields.Str()
    sme_id = fields.Str()


class UserLoginSchema(CamelCaseSchema):
    """Both fields are checked by the service so the error message is specific"""

    class Meta:
        unknown = EXCLUDE

    email = fields.Str(load_default=None)
    password = fields.Str(load_default=None, load_only=True)


class UserProfileSchema(UserSchema):
    sme = fields.Nested(SmeSummarySchema, allow_none=True, dump_only=True)
