# python imports
import logging
from typing import Any, Dict

# package imports
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError

# project imports
from app.libs.session import session_scope
from app.libs.pagination import Paginator
from app.libs.errors import StorageError
from app.libs.constants import MESSAGES
from app.smes.models import Sme, SmeCategory
from app.smes.constants import PLACEHOLDER_IMAGE
from app.products.models import Product
from app.categories.models import Category

# app imports
from .constants import SEARCH_PAGE_SIZE, LIKE_ESCAPE

logger = logging.getLogger(__name__)


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term is matched literally"""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def build_match_predicate(query: str):
    """
    Case-insensitive substring match over a listing and its relations.

    A listing matches when any of these contains ``query``:
    its name, its description, the name or description of one of its
    products, or the name of one of its categories. An empty query matches
    every listing.
    """
    pattern = f"%{escape_like(query or '')}%"

    def contains(column):
        return column.ilike(pattern, escape=LIKE_ESCAPE)

    return or_(
        contains(Sme.name),
        contains(Sme.description),
        Sme.products.any(or_(contains(Product.name), contains(Product.description))),
        Sme.categories.any(SmeCategory.category.has(contains(Category.name))),
    )


def to_search_item(sme: Sme, featured_image: str = None) -> Dict[str, Any]:
    item = sme.to_dict()
    item["location"] = sme.location
    item["featured_image"] = featured_image or PLACEHOLDER_IMAGE
    return item


class SearchService:
    @staticmethod
    def search_smes(query: str = "", page: Any = 1) -> Dict[str, Any]:
        """Return one page of matching listings plus total and page count"""
        predicate = build_match_predicate(query)

        try:
            with session_scope(commit=False) as session:
                paginator = Paginator(
                    session.query(Sme).filter(predicate),
                    page=page,
                    per_page=SEARCH_PAGE_SIZE,
                )
                result = paginator.paginate(
                    order_by=(Sme.name.asc(), Sme.id.asc()),
                    columns=(Sme.featured_image_url.label("featured_image"),),
                )

                smes = [
                    to_search_item(sme, featured_image)
                    for sme, featured_image in result["items"]
                ]
        except SQLAlchemyError as e:
            logger.error(f"Database error searching listings for {query!r}: {str(e)}")
            raise StorageError(MESSAGES["SEARCH_FAILED"])

        return {
            "smes": smes,
            "total": result["total_items"],
            "total_pages": result["total_pages"],
            "current_page": result["page"],
        }
