import string
import secrets
from sqlalchemy import event
from external.database import db

ID_ALPHABET = string.ascii_uppercase + string.digits


def generate_random_string(length=8, alphabet=ID_ALPHABET):
    """Random string drawn from ``alphabet`` (upper-case alphanumerics by default)"""
    return "".join(secrets.choice(alphabet) for _ in range(length))


def get_unique_id(model_class, prefix, length=8, max_attempts=100):
    """
    Generate a prefixed primary key that is not used by ``model_class`` yet

    Args:
        model_class: Mapped class whose primary key is a string
        prefix: Readable type marker, e.g. ``"SME_"``
        length: Number of random characters after the prefix
        max_attempts: Maximum attempts to try before raising error
    """
    for _ in range(max_attempts):
        candidate = f"{prefix}{generate_random_string(length)}"
        if db.session.get(model_class, candidate) is None:
            return candidate
    raise ValueError(f"Failed to generate unique ID after {max_attempts} attempts")


class UniqueIdMixin:
    """Assigns ``<id_prefix><random>`` ids to new rows right before insert"""

    id_prefix = None  # Should be defined in subclass
    id_random_length = 8

    @classmethod
    def __declare_last__(cls):
        @event.listens_for(cls, "before_insert")
        def _set_unique_id(mapper, connection, target):
            if not target.id and target.id_prefix:
                target.id = get_unique_id(
                    cls, target.id_prefix, length=target.id_random_length
                )

    __abstract__ = True
