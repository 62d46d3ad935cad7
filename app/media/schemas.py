from marshmallow import fields, validate, EXCLUDE

from app.libs.schemas import CamelCaseSchema


class ImageInputSchema(CamelCaseSchema):
    """Image reference submitted with a listing or product (URL from /upload)"""

    class Meta:
        unknown = EXCLUDE

    url = fields.Str(required=True, validate=validate.Length(min=1, max=512))
    alt = fields.Str(allow_none=True, validate=validate.Length(max=255))


class ImageSchema(CamelCaseSchema):
    id = fields.Int(dump_only=True)
    url = fields.Str()
    alt = fields.Str(allow_none=True)
    is_featured = fields.Bool()


class UploadResponseSchema(CamelCaseSchema):
    url = fields.Str(required=True)
    pathname = fields.Str(required=True)
    content_type = fields.Str(required=True)


class UploadQueryArgs(CamelCaseSchema):
    class Meta:
        unknown = EXCLUDE

    filename = fields.Str(
        load_default=None, metadata={"description": "Original file name"}
    )
