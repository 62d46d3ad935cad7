from marshmallow import fields, validate, EXCLUDE

from app.libs.schemas import CamelCaseSchema
from app.media.schemas import ImageSchema, ImageInputSchema


class ProductCreateSchema(CamelCaseSchema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    description = fields.Str(allow_none=True)
    price = fields.Int(
        required=True, strict=True, validate=validate.Range(min=0)
    )  # smallest currency unit
    is_available = fields.Bool(load_default=True)
    images = fields.List(fields.Nested(ImageInputSchema), load_default=list)


class ProductUpdateSchema(ProductCreateSchema):
    class Meta:
        unknown = EXCLUDE

    # No defaults on update: absent keys leave the stored values untouched
    name = fields.Str(validate=validate.Length(min=1, max=100))
    price = fields.Int(strict=True, validate=validate.Range(min=0))
    is_available = fields.Bool()
    images = fields.List(fields.Nested(ImageInputSchema))


class ProductSchema(CamelCaseSchema):
    id = fields.Str(dump_only=True)
    name = fields.Str()
    description = fields.Str(allow_none=True)
    price = fields.Int()
    is_available = fields.Bool()
    sme_id = fields.Str()
    images = fields.List(fields.Nested(ImageSchema))
    created_at = fields.DateTime(dump_only=True)
    updated_at = fields.DateTime(dump_only=True)
