import logging
from contextlib import contextmanager
from external.database import db

logger = logging.getLogger(__name__)


@contextmanager
def session_scope(commit=True):
    """Transactional scope around the request session.

    With ``commit=False`` nothing is committed on success; reads leave the
    session to be removed at request teardown.
    """
    try:
        yield db.session
        if commit:
            db.session.commit()
    except Exception as e:
        logger.debug(f"Rolling back session after {type(e).__name__}")
        db.session.rollback()
        raise
