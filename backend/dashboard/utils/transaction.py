from contextlib import contextmanager
from flask import current_app
from dashboard.extensions import db


@contextmanager
def transactional():
    """Commit the session on success; roll back and re-raise on any error."""
    try:
        yield db.session
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.warning(f"Transaction rolled back: {e}")
        raise
