import logging

# package imports
from flask_smorest import Blueprint
from flask.views import MethodView

# project imports
from app.libs.decorators import sme_owner_required
from app.libs.schemas import MessageSchema

# app imports
from .services import SmeService
from .schemas import SmeDetailSchema, SmeUpdateSchema

logger = logging.getLogger(__name__)

bp = Blueprint(
    "smes", __name__, description="Listing (UMKM) operations", url_prefix="/api/sme"
)


@bp.route("/<sme_id>")
class SmeDetail(MethodView):
    @bp.response(200, SmeDetailSchema)
    @bp.alt_response(404, description="Listing not found")
    def get(self, sme_id):
        """Get listing details with images, products and categories"""
        return SmeService.get_sme(sme_id)

    @sme_owner_required
    @bp.arguments(SmeUpdateSchema)
    @bp.response(200, SmeDetailSchema)
    @bp.alt_response(401, description="Not logged in")
    @bp.alt_response(403, description="Not the owner")
    def put(self, sme_data, sme_id):
        """Update listing (owner only)"""
        SmeService.update_sme(sme_id, sme_data)
        return SmeService.get_sme(sme_id)

    @sme_owner_required
    @bp.response(200, MessageSchema)
    def delete(self, sme_id):
        """Delete listing (owner only)"""
        return SmeService.delete_sme(sme_id)
