import logging

# package imports
from flask_smorest import Blueprint
from flask.views import MethodView

# project imports
from app.libs.decorators import sme_owner_required
from app.libs.schemas import MessageSchema

# app imports
from .services import ProductService
from .schemas import ProductSchema, ProductCreateSchema, ProductUpdateSchema

logger = logging.getLogger(__name__)

bp = Blueprint(
    "products",
    __name__,
    description="Product catalog of a listing",
    url_prefix="/api/sme/<sme_id>/products",
)


@bp.route("")
class ProductList(MethodView):
    @bp.response(200, ProductSchema(many=True))
    def get(self, sme_id):
        """List all products of a listing"""
        return ProductService.get_sme_products(sme_id)

    @sme_owner_required
    @bp.arguments(ProductCreateSchema)
    @bp.response(200, ProductSchema)
    def post(self, product_data, sme_id):
        """Create new product (owner only)"""
        return ProductService.create_product(sme_id, product_data)


@bp.route("/<product_id>")
class ProductDetail(MethodView):
    @sme_owner_required
    @bp.arguments(ProductUpdateSchema)
    @bp.response(200, ProductSchema)
    @bp.alt_response(404, description="Product not found in this listing")
    def put(self, product_data, sme_id, product_id):
        """Update product (owner only)"""
        return ProductService.update_product(sme_id, product_id, product_data)

    @sme_owner_required
    @bp.response(200, MessageSchema)
    def delete(self, sme_id, product_id):
        """Delete product (owner only)"""
        return ProductService.delete_product(sme_id, product_id)
