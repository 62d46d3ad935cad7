from app.libs.constants import MESSAGES
from external.database import db
from app.products.models import Product, ProductImage
from app.smes.models import Sme, SmeImage, SmeCategory, compose_location

from conftest import login, DEFAULT_PASSWORD


def test_compose_location_keeps_empty_parts():
    assert compose_location("Jl. A", "V", "D", "C") == "Jl. A, V, D, C"
    assert compose_location("Jl. A", None, "", "C") == "Jl. A, , , C"


class TestDetail:
    def test_detail_includes_relations(self, client, build):
        kuliner = build.category("Kuliner", "Makanan")
        created = build.sme(
            name="Warung Made",
            address="Jl. Raya Ubud",
            village="Ubud",
            district="Ubud",
            city="Gianyar",
            categories=[kuliner],
            images=[("https://cdn/depan.jpg", True)],
        )
        product_id = build.product(
            created["sme_id"], name="Bebek Betutu", price=85000, images=["https://cdn/bebek.jpg"]
        )

        response = client.get(f"/api/sme/{created['sme_id']}")

        assert response.status_code == 200
        data = response.get_json()
        assert data["name"] == "Warung Made"
        assert data["location"] == "Jl. Raya Ubud, Ubud, Ubud, Gianyar"
        assert data["categories"] == [
            {"id": kuliner, "name": "Kuliner", "description": "Makanan"}
        ]
        assert data["images"][0]["url"] == "https://cdn/depan.jpg"
        assert data["products"][0]["id"] == product_id
        assert data["products"][0]["price"] == 85000
        assert data["products"][0]["images"][0]["url"] == "https://cdn/bebek.jpg"

    def test_unknown_listing(self, client):
        response = client.get("/api/sme/SME_MISSING0")

        assert response.status_code == 404
        assert response.get_json() == {"error": MESSAGES["SME_NOT_FOUND"]}


class TestUpdate:
    def test_requires_login(self, client, build):
        created = build.sme()

        response = client.put(f"/api/sme/{created['sme_id']}", json={"name": "Baru"})

        assert response.status_code == 401

    def test_other_owner_is_forbidden(self, client, build, owner):
        other = build.sme(name="Milik Orang Lain")

        response = client.put(f"/api/sme/{other['sme_id']}", json={"name": "Baru"})

        assert response.status_code == 403
        assert response.get_json() == {"error": "Forbidden"}

    def test_owner_updates_fields(self, client, owner):
        response = client.put(
            f"/api/sme/{owner['sme_id']}",
            json={"name": "Warung Baru", "city": "Denpasar", "latitude": -8.65},
        )

        assert response.status_code == 200
        data = response.get_json()
        assert data["name"] == "Warung Baru"
        assert data["city"] == "Denpasar"
        assert data["latitude"] == -8.65
        assert data["description"] == "Warung makan"

    def test_images_are_replaced_and_first_is_featured(self, client, owner):
        client.put(
            f"/api/sme/{owner['sme_id']}",
            json={"images": [{"url": "https://cdn/lama.jpg"}]},
        )

        response = client.put(
            f"/api/sme/{owner['sme_id']}",
            json={"images": [{"url": "https://cdn/1.jpg"}, {"url": "https://cdn/2.jpg"}]},
        )

        images = response.get_json()["images"]
        assert [(i["url"], i["isFeatured"]) for i in images] == [
            ("https://cdn/1.jpg", True),
            ("https://cdn/2.jpg", False),
        ]

    def test_categories_are_synced(self, client, build, owner):
        kuliner = build.category("Kuliner")
        fashion = build.category("Fashion")

        client.put(f"/api/sme/{owner['sme_id']}", json={"categories": [kuliner]})
        response = client.put(
            f"/api/sme/{owner['sme_id']}", json={"categories": [fashion, fashion]}
        )

        assert [c["name"] for c in response.get_json()["categories"]] == ["Fashion"]

    def test_unknown_category(self, client, owner):
        response = client.put(f"/api/sme/{owner['sme_id']}", json={"categories": [42]})

        assert response.status_code == 400
        assert response.get_json()["error"] == MESSAGES["CATEGORY_NOT_FOUND"]

    def test_invalid_coordinates(self, client, owner):
        response = client.put(f"/api/sme/{owner['sme_id']}", json={"latitude": 120})

        assert response.status_code == 400
        assert "latitude" in response.get_json()["errors"]


class TestDelete:
    def test_owner_deletes_listing_with_products(self, app, client, owner, build):
        build.product(owner["sme_id"], images=["https://cdn/p.jpg"])

        response = client.delete(f"/api/sme/{owner['sme_id']}")

        assert response.status_code == 200
        assert response.get_json() == {"message": MESSAGES["SME_DELETED"]}
        assert client.get(f"/api/sme/{owner['sme_id']}").status_code == 404
        with app.app_context():
            assert db.session.query(Sme).count() == 0
            assert db.session.query(Product).count() == 0
            assert db.session.query(ProductImage).count() == 0
            assert db.session.query(SmeImage).count() == 0
            assert db.session.query(SmeCategory).count() == 0

    def test_other_owner_cannot_delete(self, client, build):
        mine = build.sme(password=DEFAULT_PASSWORD)
        theirs = build.sme()
        login(client, mine["email"])

        response = client.delete(f"/api/sme/{theirs['sme_id']}")

        assert response.status_code == 403
        assert client.get(f"/api/sme/{theirs['sme_id']}").status_code == 200
