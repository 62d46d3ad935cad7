from external.database import db
from app.libs.models import BaseModel, ImageMixin
from app.libs.helpers import UniqueIdMixin

from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy import select

# Imported so every mapped class is registered before mappers configure
from app.users.models import User  # noqa: F401
from app.products.models import Product, ProductImage  # noqa: F401
from app.categories.models import Category  # noqa: F401


def compose_location(address, village, district, city):
    """Single display string for a listing's address.

    Parts are always joined in the same order and never dropped, so an empty
    part leaves a ", ," gap. Missing (None) parts render as empty strings.
    """
    return ", ".join(
        "" if part is None else str(part) for part in (address, village, district, city)
    )


class Sme(BaseModel, UniqueIdMixin):
    """A registered small business (UMKM) listing, owned by exactly one user"""

    __tablename__ = "smes"
    id_prefix = "SME_"

    id = db.Column(db.String(12), primary_key=True, default=None)
    name = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text, nullable=False)

    # Contact
    email = db.Column(db.String(120))
    phone = db.Column(db.String(20))
    whatsapp = db.Column(db.String(20))
    facebook = db.Column(db.String(255))
    instagram = db.Column(db.String(255))
    twitter = db.Column(db.String(255))
    tiktok = db.Column(db.String(255))
    website = db.Column(db.String(255))
    blog = db.Column(db.String(255))

    # Address
    address = db.Column(db.String(255), nullable=False)
    village = db.Column(db.String(100))
    district = db.Column(db.String(100))
    city = db.Column(db.String(100))
    postal_code = db.Column(db.String(10))
    latitude = db.Column(db.Float)
    longitude = db.Column(db.Float)

    user_id = db.Column(
        db.String(12),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    # Relationships
    owner = db.relationship("User", back_populates="sme")
    images = db.relationship(
        "SmeImage",
        back_populates="sme",
        order_by="[SmeImage.created_at, SmeImage.id]",
        cascade="all, delete-orphan",
    )
    products = db.relationship(
        "Product",
        back_populates="sme",
        order_by="Product.created_at",
        cascade="all, delete-orphan",
    )
    categories = db.relationship(
        "SmeCategory", back_populates="sme", cascade="all, delete-orphan"
    )

    @property
    def location(self):
        return compose_location(self.address, self.village, self.district, self.city)

    @hybrid_property
    def featured_image_url(self):
        """URL of the first image flagged as featured, or None"""
        return next((image.url for image in self.images if image.is_featured), None)

    @featured_image_url.expression
    def featured_image_url(cls):
        """Correlated subquery returning at most one featured image URL"""
        return (
            select(SmeImage.url)
            .where(SmeImage.sme_id == cls.id, SmeImage.is_featured.is_(True))
            .order_by(SmeImage.created_at, SmeImage.id)
            .limit(1)
            .correlate(cls)
            .scalar_subquery()
        )

    def __repr__(self):
        return f"<Sme {self.name}>"


class SmeImage(BaseModel, ImageMixin):
    __tablename__ = "sme_images"

    sme_id = db.Column(
        db.String(12), db.ForeignKey("smes.id", ondelete="CASCADE"), nullable=False
    )

    sme = db.relationship("Sme", back_populates="images")


class SmeCategory(BaseModel):
    """
    Junction table linking listings to categories.
    """

    __tablename__ = "sme_categories"

    sme_id = db.Column(
        db.String(12), db.ForeignKey("smes.id", ondelete="CASCADE"), primary_key=True
    )
    category_id = db.Column(
        db.Integer, db.ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True
    )

    sme = db.relationship("Sme", back_populates="categories")
    category = db.relationship("Category", back_populates="smes")
