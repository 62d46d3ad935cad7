from app.libs.constants import MESSAGES
from external.database import db
from app.users.models import User

from conftest import login


def registration(**overrides):
    body = {
        "name": "Made Sutama",
        "email": "made@example.com",
        "password": "rahasia123",
        "phone": "+62812345678",
        "sme": {
            "name": "Warung Made",
            "description": "Masakan Bali",
            "address": "Jalan Raya Ubud No. 123",
            "village": "Ubud",
            "district": "Ubud",
            "city": "Gianyar",
            "postalCode": "80571",
            "latitude": -8.506853,
            "longitude": 115.263091,
            "images": [
                {"url": "https://cdn.example.com/depan.jpg", "alt": "Depan"},
                {"url": "https://cdn.example.com/dalam.jpg"},
            ],
        },
    }
    body.update(overrides)
    return body


class TestRegister:
    def test_creates_owner_and_listing(self, app, client, build):
        kuliner = build.category("Kuliner")
        body = registration()
        body["sme"]["categories"] = [kuliner]

        response = client.post("/api/register", json=body)

        assert response.status_code == 200
        data = response.get_json()
        assert data["message"] == MESSAGES["REGISTER_OK"]
        assert data["userId"].startswith("USR_")
        assert data["smeId"].startswith("SME_")

        detail = client.get(f"/api/sme/{data['smeId']}").get_json()
        assert detail["userId"] == data["userId"]
        assert detail["postalCode"] == "80571"
        assert detail["location"] == "Jalan Raya Ubud No. 123, Ubud, Ubud, Gianyar"
        assert [c["name"] for c in detail["categories"]] == ["Kuliner"]
        assert [(i["url"], i["isFeatured"]) for i in detail["images"]] == [
            ("https://cdn.example.com/depan.jpg", True),
            ("https://cdn.example.com/dalam.jpg", False),
        ]

    def test_missing_required_data(self, client):
        body = registration()
        del body["sme"]

        response = client.post("/api/register", json=body)

        assert response.status_code == 400
        data = response.get_json()
        assert data["error"] == MESSAGES["REQUIRED_FIELDS"]
        assert "sme" in data["errors"]

    def test_blank_listing_name_is_rejected(self, client):
        body = registration()
        body["sme"]["name"] = ""

        response = client.post("/api/register", json=body)

        assert response.status_code == 400
        assert response.get_json()["error"] == MESSAGES["REQUIRED_FIELDS"]

    def test_duplicate_email_ignores_case(self, client):
        assert client.post("/api/register", json=registration()).status_code == 200

        response = client.post(
            "/api/register", json=registration(email="MADE@example.com")
        )

        assert response.status_code == 400
        assert response.get_json() == {"error": MESSAGES["EMAIL_TAKEN"]}

    def test_unknown_category_rolls_back_everything(self, app, client):
        body = registration()
        body["sme"]["categories"] = [999]

        response = client.post("/api/register", json=body)

        assert response.status_code == 400
        assert response.get_json() == {
            "error": MESSAGES["CATEGORY_NOT_FOUND"],
            "categoryId": 999,
        }
        with app.app_context():
            assert db.session.query(User).count() == 0


class TestLogin:
    def test_login_returns_profile_with_listing(self, client):
        client.post("/api/register", json=registration())

        response = login(client, "Made@Example.com", "rahasia123")

        assert response.status_code == 200
        data = response.get_json()
        assert data["email"] == "made@example.com"
        assert "password" not in data
        assert data["sme"]["name"] == "Warung Made"
        assert data["sme"]["featuredImage"] == "https://cdn.example.com/depan.jpg"

    def test_missing_fields(self, client):
        response = client.post("/api/login", json={"email": "made@example.com"})

        assert response.status_code == 400
        assert response.get_json() == {"error": MESSAGES["LOGIN_REQUIRED_FIELDS"]}

    def test_wrong_password_and_unknown_email_look_the_same(self, client):
        client.post("/api/register", json=registration())

        wrong_password = login(client, "made@example.com", "salah")
        unknown_email = login(client, "siapa@example.com", "rahasia123")

        for response in (wrong_password, unknown_email):
            assert response.status_code == 401
            assert response.get_json() == {"error": MESSAGES["INVALID_CREDENTIALS"]}


class TestSession:
    def test_me_requires_login(self, client):
        response = client.get("/api/me")

        assert response.status_code == 401
        assert response.get_json() == {"error": "Unauthorized"}

    def test_me_and_logout(self, client, owner):
        me = client.get("/api/me")
        assert me.status_code == 200
        assert me.get_json()["id"] == owner["user_id"]
        assert me.get_json()["sme"]["featuredImage"] == "/placeholder.jpg"

        assert client.post("/api/logout").status_code == 204
        assert client.get("/api/me").status_code == 401
