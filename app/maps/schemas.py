from marshmallow import fields, EXCLUDE

from app.libs.schemas import CamelCaseSchema


class MapLinkSchema(CamelCaseSchema):
    class Meta:
        unknown = EXCLUDE

    # Raw so a non-string value reaches the service and gets its own message
    url = fields.Raw(
        load_default=None, metadata={"description": "Google Maps share link"}
    )


class CoordinatesSchema(CamelCaseSchema):
    lat = fields.Float(required=True)
    lng = fields.Float(required=True)
    original = fields.Str(
        required=True, metadata={"description": "URL the link resolved to"}
    )
