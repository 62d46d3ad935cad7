"""Shared pytest fixtures: an app on in-memory SQLite and small data builders."""

import pytest

from external.database import db
from main.setup import create_app
from app.categories.models import Category
from app.products.models import Product, ProductImage
from app.smes.models import Sme, SmeImage, SmeCategory
from app.users.models import User

DEFAULT_PASSWORD = "rahasia123"


@pytest.fixture
def app(tmp_path):
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
            "SECRET_KEY": "test-secret",
            "LOG_DIR": tmp_path / "logs",
            "LOG_LEVEL": "WARNING",
        }
    )
    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


class Builder:
    """Creates committed rows and hands back their ids"""

    def __init__(self, app):
        self.app = app
        self._owners = 0

    def category(self, name, description=None):
        with self.app.app_context():
            category = Category(name=name, description=description)
            db.session.add(category)
            db.session.commit()
            return category.id

    def sme(
        self,
        name="Warung Test",
        description="Warung makan",
        address="Jl. Test",
        password=None,
        categories=(),
        images=(),
        **fields,
    ):
        """Listing plus its owner.

        ``password`` is only hashed when given; bulk listings skip hashing.
        ``images`` is a sequence of ``(url, is_featured)`` pairs.
        """
        self._owners += 1
        with self.app.app_context():
            owner = User(
                name=f"Owner {self._owners}",
                email=f"owner{self._owners}@example.com",
            )
            if password:
                owner.set_password(password)
            else:
                owner.password_hash = "!"
            db.session.add(owner)
            db.session.flush()

            sme = Sme(
                user_id=owner.id,
                name=name,
                description=description,
                address=address,
                **fields,
            )
            sme.images = [
                SmeImage(url=url, is_featured=is_featured) for url, is_featured in images
            ]
            sme.categories = [SmeCategory(category_id=cid) for cid in categories]
            db.session.add(sme)
            db.session.commit()
            return {"sme_id": sme.id, "user_id": owner.id, "email": owner.email}

    def product(self, sme_id, name="Produk", description=None, price=10000, images=()):
        with self.app.app_context():
            product = Product(
                sme_id=sme_id,
                name=name,
                description=description,
                price=price,
                images=[ProductImage(url=url) for url in images],
            )
            db.session.add(product)
            db.session.commit()
            return product.id


@pytest.fixture
def build(app):
    return Builder(app)


def login(client, email, password=DEFAULT_PASSWORD):
    return client.post("/api/login", json={"email": email, "password": password})


@pytest.fixture
def owner(build, client):
    """A logged-in owner with one listing"""
    created = build.sme(name="Warung Pemilik", password=DEFAULT_PASSWORD)
    response = login(client, created["email"])
    assert response.status_code == 200
    return created
