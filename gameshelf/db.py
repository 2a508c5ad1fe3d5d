from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from sqlalchemy import event, inspect
import logging

# Retrieve main logger
logger = logging.getLogger("main")

db = SQLAlchemy()
migrate = Migrate()


def _set_sqlite_pragma(dbapi_connection, connection_record):
    import sqlite3
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return

    cursor = dbapi_connection.cursor()
    # Join rows rely on ON DELETE CASCADE
    cursor.execute("PRAGMA foreign_keys=ON;")
    cursor.execute("PRAGMA busy_timeout=30000;")
    cursor.close()


def init_db(app):
    # Register models on the metadata before create_all
    from gameshelf import models  # noqa: F401

    with app.app_context():
        if not event.contains(db.engine, "connect", _set_sqlite_pragma):
            event.listen(db.engine, "connect", _set_sqlite_pragma)

        inspector = inspect(db.engine)
        if not inspector.has_table("game"):
            logger.info("Initializing database tables...")
        db.create_all()


def clear_db(app):
    with app.app_context():
        logger.info("Dropping all tables...")
        db.drop_all()
        logger.info("Recreating all tables...")
        db.create_all()
