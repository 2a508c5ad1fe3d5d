from flask import Flask

from gameshelf.db import db, clear_db as drop_and_create
from gameshelf.settings import get_database_url
from gameshelf.utils import configure_logging


def clear_db(database_url=None):
    app = Flask(__name__)
    app.config["SQLALCHEMY_DATABASE_URI"] = database_url or get_database_url()
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    db.init_app(app)

    # Register models
    from gameshelf import models  # noqa: F401

    drop_and_create(app)
    print("Database cleared successfully!")


if __name__ == "__main__":
    configure_logging()
    clear_db()
