import logging

from flask_smorest import Blueprint
from flask.views import MethodView

from .schemas import SearchQueryArgs, SearchResultSchema
from .services import SearchService

logger = logging.getLogger(__name__)


bp = Blueprint(
    "search",
    __name__,
    description="Listing search across names, descriptions, products and categories",
    url_prefix="/api",
)


@bp.route("/search")
class ListingSearch(MethodView):
    @bp.arguments(SearchQueryArgs, location="query")
    @bp.response(200, SearchResultSchema)
    @bp.alt_response(500, description="Storage failure")
    def get(self, args):
        """
        Search listings.

        - `q` is matched case-insensitively as a substring; empty matches all.
        - `page` is 1-based; missing or non-positive values mean page 1.
        - Pages hold 27 listings ordered by name.
        """
        return SearchService.search_smes(args.get("q", ""), args.get("page", 1))
