# package imports
from flask_smorest import Blueprint
from flask.views import MethodView

# app imports
from .services import CategoryService
from .schemas import CategorySchema

bp = Blueprint(
    "categories", __name__, description="Category operations", url_prefix="/api"
)


@bp.route("/categories")
class CategoryList(MethodView):
    @bp.response(200, CategorySchema(many=True))
    def get(self):
        """List categories for the registration form"""
        return CategoryService.get_categories()
