from external.database import db
from app.libs.models import BaseModel


class Category(BaseModel):
    """
    Business category (e.g. Kuliner, Kerajinan, Fashion).

    Listings are linked through the SmeCategory junction table, so a listing
    can carry several categories and a category groups many listings.
    """

    __tablename__ = "categories"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), unique=True, nullable=False)
    description = db.Column(db.Text)

    # Relationships
    smes = db.relationship(
        "SmeCategory", back_populates="category", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Category {self.name}>"
