# python imports
import logging
from functools import wraps

# package imports
from flask_login import current_user

# project imports
from .errors import AuthError, ForbiddenError

logger = logging.getLogger(__name__)


def sme_owner_required(f):
    """Decorator to require the session user to own the listing in ``sme_id``.

    401 when there is no session or the user has no listing, 403 when the
    listing belongs to someone else.
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            raise AuthError()

        own_sme = current_user.sme
        if own_sme is None:
            raise AuthError()

        if own_sme.id != kwargs.get("sme_id"):
            logger.warning(
                f"User {current_user.id} denied access to listing {kwargs.get('sme_id')}"
            )
            raise ForbiddenError()

        return f(*args, **kwargs)

    return decorated_function
