from flask_smorest import Blueprint
from flask.views import MethodView

from .schemas import MapLinkSchema, CoordinatesSchema
from .services import MapLinkService

bp = Blueprint(
    "maps", __name__, description="Map link helpers", url_prefix="/api"
)


@bp.route("/resolve-map-link")
class ResolveMapLink(MethodView):
    @bp.arguments(MapLinkSchema)
    @bp.response(200, CoordinatesSchema)
    @bp.alt_response(400, description="Invalid URL or no coordinates in it")
    def post(self, link_data):
        """Resolve a maps share link to latitude and longitude"""
        return MapLinkService.resolve(link_data["url"])
