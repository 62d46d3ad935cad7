from marshmallow import fields, validate, EXCLUDE

from app.libs.schemas import CamelCaseSchema
from app.categories.schemas import CategorySchema
from app.media.schemas import ImageSchema, ImageInputSchema
from app.products.schemas import ProductSchema

from .constants import PLACEHOLDER_IMAGE

required_text = validate.Length(min=1)


class SmeProfileFieldsSchema(CamelCaseSchema):
    """Optional contact and address fields shared by input schemas"""

    class Meta:
        unknown = EXCLUDE

    email = fields.Str(allow_none=True)
    phone = fields.Str(allow_none=True)
    whatsapp = fields.Str(allow_none=True)
    facebook = fields.Str(allow_none=True)
    instagram = fields.Str(allow_none=True)
    twitter = fields.Str(allow_none=True)
    tiktok = fields.Str(allow_none=True)
    website = fields.Str(allow_none=True)
    blog = fields.Str(allow_none=True)
    village = fields.Str(allow_none=True)
    district = fields.Str(allow_none=True)
    city = fields.Str(allow_none=True)
    postal_code = fields.Str(allow_none=True)
    latitude = fields.Float(
        allow_none=True, validate=validate.Range(min=-90, max=90)
    )
    longitude = fields.Float(
        allow_none=True, validate=validate.Range(min=-180, max=180)
    )


class SmeCreateSchema(SmeProfileFieldsSchema):
    name = fields.Str(required=True, validate=required_text)
    description = fields.Str(required=True, validate=required_text)
    address = fields.Str(required=True, validate=required_text)
    categories = fields.List(
        fields.Int(), load_default=list, metadata={"description": "Category IDs"}
    )
    images = fields.List(
        fields.Nested(ImageInputSchema),
        load_default=list,
        metadata={"description": "First image becomes the featured image"},
    )


class SmeUpdateSchema(SmeProfileFieldsSchema):
    name = fields.Str(validate=required_text)
    description = fields.Str(validate=required_text)
    address = fields.Str(validate=required_text)
    categories = fields.List(fields.Int())
    images = fields.List(fields.Nested(ImageInputSchema))


class SmeSchema(CamelCaseSchema):
    """Listing scalar fields as stored"""

    id = fields.Str(dump_only=True)
    name = fields.Str()
    description = fields.Str()
    email = fields.Str(allow_none=True)
    phone = fields.Str(allow_none=True)
    whatsapp = fields.Str(allow_none=True)
    facebook = fields.Str(allow_none=True)
    instagram = fields.Str(allow_none=True)
    twitter = fields.Str(allow_none=True)
    tiktok = fields.Str(allow_none=True)
    website = fields.Str(allow_none=True)
    blog = fields.Str(allow_none=True)
    address = fields.Str()
    village = fields.Str(allow_none=True)
    district = fields.Str(allow_none=True)
    city = fields.Str(allow_none=True)
    postal_code = fields.Str(allow_none=True)
    latitude = fields.Float(allow_none=True)
    longitude = fields.Float(allow_none=True)
    user_id = fields.Str()
    created_at = fields.DateTime(dump_only=True)
    updated_at = fields.DateTime(dump_only=True)


class SmeSummarySchema(SmeSchema):
    featured_image = fields.Method("get_featured_image", dump_only=True)

    def get_featured_image(self, obj):
        return obj.featured_image_url or PLACEHOLDER_IMAGE


class SmeDetailSchema(SmeSchema):
    location = fields.Str(dump_only=True)
    images = fields.List(fields.Nested(ImageSchema), dump_only=True)
    products = fields.List(fields.Nested(ProductSchema), dump_only=True)
    categories = fields.Method("get_categories", dump_only=True)

    def get_categories(self, obj):
        """Flatten SmeCategory rows into the categories themselves"""
        category_schema = CategorySchema()
        return [
            category_schema.dump(sme_category.category)
            for sme_category in obj.categories
            if sme_category.category
        ]


class SearchResultItemSchema(SmeSchema):
    location = fields.Str(required=True)
    featured_image = fields.Str(required=True)
