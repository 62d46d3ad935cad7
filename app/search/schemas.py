from marshmallow import fields

from app.libs.schemas import CamelCaseSchema, PaginationQueryArgs
from app.smes.schemas import SearchResultItemSchema


class SearchQueryArgs(PaginationQueryArgs):
    q = fields.Str(load_default="", metadata={"description": "Free-text query"})


class SearchResultSchema(CamelCaseSchema):
    """Response shape of GET /api/search:

    {
      "smes": [...],
      "total": 40,
      "totalPages": 2,
      "currentPage": 1
    }
    """

    smes = fields.List(fields.Nested(SearchResultItemSchema), required=True)
    total = fields.Int(required=True)
    total_pages = fields.Int(required=True)
    current_page = fields.Int(required=True)
