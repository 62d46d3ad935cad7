from unittest.mock import MagicMock, patch

import pytest
import requests

from app.libs.constants import MESSAGES
from app.maps.services import extract_coordinates

RESOLVED = "https://www.google.com/maps/place/Warung+Made/@-8.506853,115.263091,17z/data=!3m1"


@pytest.fixture
def http_get():
    with patch("app.maps.services.requests.get") as get:
        response = MagicMock(url=RESOLVED)
        response.__enter__.return_value = response
        get.return_value = response
        yield get


def resolve(client, body):
    return client.post("/api/resolve-map-link", json=body)


def test_extract_coordinates():
    assert extract_coordinates(RESOLVED) == (-8.506853, 115.263091)
    assert extract_coordinates("https://maps.app.goo.gl/abc") is None
    # Integers without a decimal part are not coordinates
    assert extract_coordinates("https://maps.example/@8,115") is None


def test_follows_redirects_and_returns_coordinates(app, client, http_get):
    response = resolve(client, {"url": "https://maps.app.goo.gl/Xyz"})

    assert response.status_code == 200
    assert response.get_json() == {
        "lat": -8.506853,
        "lng": 115.263091,
        "original": RESOLVED,
    }
    http_get.assert_called_once_with(
        "https://maps.app.goo.gl/Xyz",
        allow_redirects=True,
        stream=True,
        timeout=app.config["MAP_LINK_TIMEOUT"],
    )
    # Body is never read and the connection is released
    http_get.return_value.__exit__.assert_called_once()


@pytest.mark.parametrize("body", [{}, {"url": ""}, {"url": 123}, {"url": ["a"]}])
def test_invalid_url(client, http_get, body):
    response = resolve(client, body)

    assert response.status_code == 400
    assert response.get_json() == {"error": MESSAGES["INVALID_URL"]}
    http_get.assert_not_called()


def test_no_coordinates_in_final_url(client, http_get):
    http_get.return_value.url = "https://www.google.com/maps/search/warung"

    response = resolve(client, {"url": "https://maps.app.goo.gl/Xyz"})

    assert response.status_code == 400
    assert response.get_json() == {"error": MESSAGES["COORDINATES_NOT_FOUND"]}


def test_network_failure(client, http_get):
    http_get.side_effect = requests.ConnectionError("unreachable")

    response = resolve(client, {"url": "https://maps.app.goo.gl/Xyz"})

    assert response.status_code == 500
    assert response.get_json() == {"error": MESSAGES["RESOLVE_FAILED"]}
