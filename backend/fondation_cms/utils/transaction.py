import logging
from contextlib import contextmanager
from fondation_cms.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional(session=None):
    """Yield a session; commit on success, roll back and re-raise on failure."""
    if session is None:
        session = db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        logger.warning("Content store transaction rolled back")
        raise
