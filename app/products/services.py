# python imports
import logging

# package imports
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

# project imports
from app.libs.session import session_scope
from app.libs.errors import APIError, NotFoundError
from app.libs.constants import MESSAGES
from app.smes.models import Sme

# app imports
from .models import Product, ProductImage
from .constants import PRODUCT_FIELDS

logger = logging.getLogger(__name__)


def _build_images(images):
    # Product images are never featured
    return [
        ProductImage(url=image["url"], alt=image.get("alt"), is_featured=False)
        for image in images
    ]


class ProductService:
    @staticmethod
    def get_sme_products(sme_id):
        try:
            with session_scope(commit=False) as session:
                if not session.get(Sme, sme_id):
                    raise NotFoundError(MESSAGES["SME_NOT_FOUND"])

                return (
                    session.query(Product)
                    .options(selectinload(Product.images))
                    .filter(Product.sme_id == sme_id)
                    .order_by(Product.created_at.asc(), Product.id.asc())
                    .all()
                )
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching products of {sme_id}: {str(e)}")
            raise APIError(MESSAGES["INTERNAL_ERROR"], 500)

    @staticmethod
    def get_product(sme_id, product_id):
        with session_scope(commit=False) as session:
            product = (
                session.query(Product)
                .filter(Product.id == product_id, Product.sme_id == sme_id)
                .first()
            )
            if not product:
                raise NotFoundError(MESSAGES["PRODUCT_NOT_FOUND"])
            return product

    @staticmethod
    def create_product(sme_id, product_data):
        try:
            with session_scope() as session:
                product = Product(
                    sme_id=sme_id,
                    name=product_data["name"],
                    description=product_data.get("description"),
                    price=product_data["price"],
                    is_available=product_data.get("is_available", True),
                    images=_build_images(product_data.get("images", [])),
                )
                session.add(product)
                session.flush()  # Get product ID

                logger.info(f"Created product {product.id} for listing {sme_id}")
                return product
        except SQLAlchemyError as e:
            logger.error(f"Database error creating product: {str(e)}")
            raise APIError(MESSAGES["INTERNAL_ERROR"], 500)

    @staticmethod
    def update_product(sme_id, product_id, update_data):
        """Update product details; ``images`` replaces the whole set"""
        try:
            with session_scope() as session:
                product = ProductService.get_product(sme_id, product_id)

                for field in PRODUCT_FIELDS:
                    if field in update_data:
                        setattr(product, field, update_data[field])

                if "images" in update_data:
                    product.images = _build_images(update_data["images"])

                session.flush()
                return product
        except SQLAlchemyError as e:
            logger.error(f"Database error updating product {product_id}: {str(e)}")
            raise APIError(MESSAGES["INTERNAL_ERROR"], 500)

    @staticmethod
    def delete_product(sme_id, product_id):
        try:
            with session_scope() as session:
                product = ProductService.get_product(sme_id, product_id)
                session.delete(product)

                logger.info(f"Deleted product {product_id} of listing {sme_id}")
                return {"message": MESSAGES["PRODUCT_DELETED"]}
        except SQLAlchemyError as e:
            logger.error(f"Database error deleting product {product_id}: {str(e)}")
            raise APIError(MESSAGES["INTERNAL_ERROR"], 500)
