from contextlib import contextmanager

from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()


@contextmanager
def transaction():
    """Scope the relational writes of one service call.

    Commits when the block exits normally and rolls back on any exception,
    which is re-raised. Blob store calls made inside the block are not
    covered: a rollback never undoes a put or delete that already happened.
    """
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
