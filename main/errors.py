from flask import jsonify
from werkzeug.exceptions import HTTPException
import logging
from app.libs.errors import APIError
from app.libs.constants import MESSAGES

logger = logging.getLogger(__name__)


def _validation_messages(e):
    """Field errors of a schema validation failure, merged across locations"""
    messages = (getattr(e, "data", None) or {}).get("messages", {})
    errors = {}
    for location_errors in messages.values():
        if isinstance(location_errors, dict):
            errors.update(location_errors)
    return errors


def handle_error(e):
    if isinstance(e, APIError):
        if e.status_code >= 500:
            logger.error(f"API Error: {e.message}")
        else:
            logger.warning(f"API Error {e.status_code}: {e.message}")
        return jsonify(e.to_dict()), e.status_code
    elif isinstance(e, HTTPException):
        if e.code == 422:
            # Schema validation failures are reported as plain bad requests
            errors = _validation_messages(e)
            logger.warning(f"Validation Error: {errors}")
            return jsonify({"error": MESSAGES["REQUIRED_FIELDS"], "errors": errors}), 400
        logger.error(f"HTTP Error: {e.description}")
        return jsonify({"error": e.description}), e.code
    else:
        logger.exception("Unhandled exception")
        return jsonify({"error": MESSAGES["INTERNAL_ERROR"]}), 500
