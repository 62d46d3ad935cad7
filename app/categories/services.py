# python imports
import logging

# package imports
from sqlalchemy.exc import SQLAlchemyError

# project imports
from app.libs.session import session_scope
from app.libs.errors import APIError
from app.libs.constants import MESSAGES

# app imports
from .models import Category

logger = logging.getLogger(__name__)


class CategoryService:
    @staticmethod
    def get_categories():
        """All categories, alphabetically"""
        try:
            with session_scope(commit=False) as session:
                return session.query(Category).order_by(Category.name.asc()).all()
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching categories: {str(e)}")
            raise APIError(MESSAGES["INTERNAL_ERROR"], 500)
