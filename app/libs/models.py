from datetime import datetime
from external.database import db


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )


class ImageMixin:
    """Shared columns for listing and product images.

    Concrete classes define the owning foreign key and relationship.
    """

    id = db.Column(db.Integer, primary_key=True)
    url = db.Column(db.String(512), nullable=False)
    alt = db.Column(db.String(255))
    is_featured = db.Column(db.Boolean, default=False, nullable=False)


class BaseModel(db.Model, TimestampMixin):
    __abstract__ = True

    def update(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)

    def to_dict(self, exclude=None):
        exclude = exclude or ()
        return {
            c.name: getattr(self, c.name)
            for c in self.__table__.columns
            if c.name not in exclude
        }
