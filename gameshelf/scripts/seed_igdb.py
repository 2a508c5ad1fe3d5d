"""
Seed the catalog from IGDB: fixed genre and platform lists plus the best rated games.

Usage:
    IGDB_CLIENT_ID=... IGDB_ACCESS_TOKEN=... gameshelf-seed
"""
import logging
import sys

from flask import Flask

from gameshelf.db import db, init_db
from gameshelf.exceptions import IGDBException
from gameshelf.services.igdb_service import IGDBClient
from gameshelf.services.import_service import import_catalog
from gameshelf.settings import load_settings, get_igdb_credentials
from gameshelf.utils import configure_logging

logger = logging.getLogger("main")


def create_seed_app(database_url):
    app = Flask(__name__)
    app.config["SQLALCHEMY_DATABASE_URI"] = database_url
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    db.init_app(app)
    init_db(app)
    return app


def main(app=None, client=None):
    """Run the import, returns the process exit status"""
    configure_logging()

    database_url = load_settings()["database"]["url"]
    if not database_url and app is None:
        logger.error("DATABASE_URL is not configured")
        return 1

    if client is None:
        client_id, access_token, client_secret = get_igdb_credentials()
        if not client_id or not (access_token or client_secret):
            logger.error("Missing IGDB credentials: set IGDB_CLIENT_ID and IGDB_ACCESS_TOKEN (or IGDB_CLIENT_SECRET)")
            return 1
        client = IGDBClient(client_id, access_token=access_token, client_secret=client_secret)

    app = app or create_seed_app(database_url)
    try:
        with app.app_context():
            summary = import_catalog(client)
    except IGDBException as e:
        logger.error(f"Import aborted: {e.message}")
        return 1

    logger.info(f"Summary: {summary}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
