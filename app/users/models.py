from flask_login import UserMixin

from app.libs.models import BaseModel
from app.libs.helpers import UniqueIdMixin
from external.database import db


class User(BaseModel, UserMixin, UniqueIdMixin):
    __tablename__ = "users"
    id_prefix = "USR_"

    id = db.Column(db.String(12), primary_key=True, default=None)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    phone = db.Column(db.String(20))
    password_hash = db.Column(db.String(255), nullable=False)

    # Relationships
    sme = db.relationship(
        "Sme", uselist=False, back_populates="owner", cascade="all, delete-orphan"
    )

    def set_password(self, password):
        from passlib.hash import pbkdf2_sha256

        self.password_hash = pbkdf2_sha256.hash(password)

    def check_password(self, password):
        from passlib.hash import pbkdf2_sha256

        if not self.password_hash:
            return False
        return pbkdf2_sha256.verify(password, self.password_hash)

    def __repr__(self):
        return f"<User {self.email}>"
