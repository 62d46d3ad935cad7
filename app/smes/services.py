# python imports
import logging

# package imports
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

# project imports
from app.libs.session import session_scope
from app.libs.errors import APIError, NotFoundError, ValidationError
from app.libs.constants import MESSAGES
from app.categories.models import Category
from app.products.models import Product

# app imports
from .models import Sme, SmeImage, SmeCategory
from .constants import SME_PROFILE_FIELDS

logger = logging.getLogger(__name__)


class SmeService:
    @staticmethod
    def get_sme(sme_id):
        """Listing with images, products (with images) and categories"""
        try:
            with session_scope(commit=False) as session:
                sme = (
                    session.query(Sme)
                    .options(
                        selectinload(Sme.images),
                        selectinload(Sme.products).selectinload(Product.images),
                        selectinload(Sme.categories).selectinload(
                            SmeCategory.category
                        ),
                    )
                    .filter(Sme.id == sme_id)
                    .first()
                )
                if not sme:
                    raise NotFoundError(MESSAGES["SME_NOT_FOUND"])
                return sme
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching listing {sme_id}: {str(e)}")
            raise APIError(MESSAGES["INTERNAL_ERROR"], 500)

    @staticmethod
    def update_sme(sme_id, update_data):
        """Update listing details; ``images``/``categories`` replace the whole set"""
        try:
            with session_scope() as session:
                sme = session.get(Sme, sme_id)
                if not sme:
                    raise NotFoundError(MESSAGES["SME_NOT_FOUND"])

                sme.update(
                    **{k: v for k, v in update_data.items() if k in SME_PROFILE_FIELDS}
                )

                if "images" in update_data:
                    sme.images = [
                        SmeImage(
                            url=image["url"],
                            alt=image.get("alt"),
                            is_featured=(idx == 0),  # First image is featured
                        )
                        for idx, image in enumerate(update_data["images"])
                    ]

                if "categories" in update_data:
                    SmeService._replace_categories(
                        session, sme, update_data["categories"]
                    )

                session.flush()
                logger.info(f"Updated listing {sme_id}")
                return sme
        except SQLAlchemyError as e:
            logger.error(f"Database error updating listing {sme_id}: {str(e)}")
            raise APIError(MESSAGES["INTERNAL_ERROR"], 500)

    @staticmethod
    def delete_sme(sme_id):
        """Delete listing with its images, products and category links"""
        try:
            with session_scope() as session:
                sme = session.get(Sme, sme_id)
                if not sme:
                    raise NotFoundError(MESSAGES["SME_NOT_FOUND"])

                session.delete(sme)
                logger.info(f"Deleted listing {sme_id}")
                return {"message": MESSAGES["SME_DELETED"]}
        except SQLAlchemyError as e:
            logger.error(f"Database error deleting listing {sme_id}: {str(e)}")
            raise APIError(MESSAGES["INTERNAL_ERROR"], 500)

    @staticmethod
    def _replace_categories(session, sme, category_ids):
        """Sync category links, keeping rows that are still wanted"""
        wanted = list(dict.fromkeys(category_ids))

        for category_id in wanted:
            if not session.get(Category, category_id):
                raise ValidationError(
                    MESSAGES["CATEGORY_NOT_FOUND"], payload={"categoryId": category_id}
                )

        kept = [link for link in sme.categories if link.category_id in wanted]
        existing_ids = {link.category_id for link in kept}
        sme.categories = kept + [
            SmeCategory(category_id=category_id)
            for category_id in wanted
            if category_id not in existing_ids
        ]
