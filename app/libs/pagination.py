from typing import Any, Dict, List, Sequence
from sqlalchemy.orm import Query
from math import ceil


def clamp_page(page: Any) -> int:
    """Coerce a requested page number to an int >= 1 (absent/invalid -> 1)."""
    try:
        page = int(page)
    except (TypeError, ValueError):
        return 1
    return page if page > 0 else 1


class Paginator:
    """Offset pagination over a single filtered query.

    The count and the page fetch are both derived from ``self.query`` so the
    filter can only be defined once. They run as two separate reads and may
    disagree under concurrent writes.
    """

    def __init__(self, query: Query, page: Any = 1, per_page: int = 20) -> None:
        """
        Initialize paginator with SQLAlchemy query

        Args:
            query: SQLAlchemy query object, already filtered
            page: Requested page number; clamped to 1 when absent or non-positive
            per_page: Items per page (fixed by the caller)
        """
        if per_page < 1:
            raise ValueError("per_page must be a positive integer")

        self.query: Query = query
        self.page: int = clamp_page(page)
        self.per_page: int = per_page

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    def paginate(
        self, order_by: Sequence[Any] = (), columns: Sequence[Any] = ()
    ) -> Dict[str, Any]:
        """
        Count all matches, then fetch the requested page

        Args:
            order_by: Column expressions giving a total, deterministic order
            columns: Extra column expressions loaded alongside each row on the
                page only (not part of the count)

        Returns:
            Dictionary containing:
            - items: List of rows on the page (empty past the last page)
            - page: Current page number
            - per_page: Items per page
            - total_items: Total number of matching rows
            - total_pages: Total number of pages
        """
        total: int = self.query.order_by(None).count()

        items: List[Any] = []
        # Past the last page; very large offsets cannot be bound by the driver
        if self.offset < total:
            query = self.query
            if columns:
                query = query.add_columns(*columns)
            if order_by:
                query = query.order_by(*order_by)
            items = query.limit(self.per_page).offset(self.offset).all()

        return {
            "items": items,
            "page": self.page,
            "per_page": self.per_page,
            "total_items": total,
            "total_pages": ceil(total / self.per_page) if total else 0,
        }
