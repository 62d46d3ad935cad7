from external.database import db
from app.libs.models import BaseModel, ImageMixin
from app.libs.helpers import UniqueIdMixin


class Product(BaseModel, UniqueIdMixin):
    __tablename__ = "products"
    id_prefix = "PRD_"

    id = db.Column(
        db.String(12), primary_key=True, default=None
    )  # Will be auto-generated
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    price = db.Column(db.Integer, nullable=False, default=0)  # in rupiah
    is_available = db.Column(db.Boolean, default=True, nullable=False)

    sme_id = db.Column(
        db.String(12), db.ForeignKey("smes.id", ondelete="CASCADE"), nullable=False
    )
    sme = db.relationship("Sme", back_populates="products")

    # Relationships
    images = db.relationship(
        "ProductImage",
        back_populates="product",
        order_by="ProductImage.id",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        db.CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
    )


class ProductImage(BaseModel, ImageMixin):
    __tablename__ = "product_images"

    product_id = db.Column(
        db.String(12),
        db.ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
    )

    product = db.relationship("Product", back_populates="images")
