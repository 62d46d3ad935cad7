from marshmallow import Schema, fields, ValidationError, EXCLUDE

from .pagination import clamp_page


def camelcase(s):
    parts = iter(s.split("_"))
    return next(parts) + "".join(i.title() for i in parts)


class CamelCaseSchema(Schema):
    """Schema that uses camel-cased keys for its external representation"""

    def on_bind_field(self, field_name, field_obj):
        field_obj.data_key = camelcase(field_obj.data_key or field_name)


class PageField(fields.Integer):
    """1-based page number; missing, unparsable or non-positive values load as 1"""

    def _deserialize(self, value, attr, data, **kwargs):
        try:
            page = super()._deserialize(value, attr, data, **kwargs)
        except ValidationError:
            return 1
        return clamp_page(page)


class PaginationQueryArgs(Schema):
    class Meta:
        unknown = EXCLUDE

    page = PageField(load_default=1)


class MessageSchema(Schema):
    message = fields.Str()
