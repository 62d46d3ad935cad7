import logging
import re

import requests
from flask import current_app

from app.libs.constants import MESSAGES
from app.libs.errors import APIError, ValidationError

logger = logging.getLogger(__name__)

COORDINATES_PATTERN = re.compile(r"@(-?\d+\.\d+),(-?\d+\.\d+)")


def extract_coordinates(url):
    """``(lat, lng)`` from the first ``@lat,lng`` segment of a maps URL, or None"""
    match = COORDINATES_PATTERN.search(url)
    if not match:
        return None
    return float(match.group(1)), float(match.group(2))


class MapLinkService:
    @staticmethod
    def resolve(url):
        """
        Follow a (short) maps share link and read the pin coordinates
        from the URL it finally lands on.
        """
        if not url or not isinstance(url, str):
            raise ValidationError(MESSAGES["INVALID_URL"])

        # Only the final URL is needed; the body is never downloaded
        try:
            with requests.get(
                url,
                allow_redirects=True,
                stream=True,
                timeout=current_app.config["MAP_LINK_TIMEOUT"],
            ) as response:
                final_url = response.url
        except requests.RequestException as e:
            logger.error(f"Failed to resolve map link {url}: {e}")
            raise APIError(MESSAGES["RESOLVE_FAILED"], 500)

        coordinates = extract_coordinates(final_url)
        if coordinates is None:
            logger.info(f"No coordinates in resolved map link {final_url}")
            raise ValidationError(MESSAGES["COORDINATES_NOT_FOUND"])

        lat, lng = coordinates
        return {"lat": lat, "lng": lng, "original": final_url}
