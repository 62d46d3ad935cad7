from marshmallow import fields

from app.libs.schemas import CamelCaseSchema


class CategorySchema(CamelCaseSchema):
    id = fields.Int(dump_only=True)
    name = fields.Str(required=True)
    description = fields.Str(allow_none=True)
