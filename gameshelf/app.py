"""
GameShelf - Video game catalog
Application Factory and startup
"""
import logging

import flask.cli
flask.cli.show_server_banner = lambda *args: None

# Core Flask imports
from flask import Flask, Blueprint

# Local imports
from gameshelf.constants import BUILD_VERSION
from gameshelf.settings import load_settings, get_database_url
from gameshelf.db import db, migrate, init_db
from gameshelf.exceptions import register_exception_handlers
from gameshelf.metrics import init_metrics
from gameshelf.rest_api import init_rest_api
from gameshelf.utils import configure_logging, get_or_create_secret_key, sanitize_sensitive_data

# Routes
from gameshelf.routes.games import games_bp
from gameshelf.routes.web import web_bp

logger = logging.getLogger('main')


def create_app(config=None):
    """Application factory, ``config`` overrides the values read from settings"""
    configure_logging()

    config = dict(config or {})
    app = Flask(__name__)
    if 'SQLALCHEMY_DATABASE_URI' not in config:
        app.config['SQLALCHEMY_DATABASE_URI'] = get_database_url()
    if 'SECRET_KEY' not in config:
        app.config['SECRET_KEY'] = get_or_create_secret_key()
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config.update(config)

    logger.debug(f"Settings: {sanitize_sensitive_data(load_settings())}")

    # Initialize components
    db.init_app(app)
    migrate.init_app(app, db)

    # Register exception handlers
    register_exception_handlers(app)

    # Register blueprints
    app.register_blueprint(web_bp)
    app.register_blueprint(games_bp)

    # Initialize REST API
    api_bp = Blueprint('api', __name__, url_prefix='/api')
    init_rest_api(api_bp)
    app.register_blueprint(api_bp)

    # Initialize metrics
    init_metrics(app)

    # Initialize database
    init_db(app)

    return app


if __name__ == '__main__':
    app = create_app()
    logger.info(f'Build Version: {BUILD_VERSION}')
    logger.info('Starting server on port 8465...')
    app.run(debug=False, use_reloader=False, host="0.0.0.0", port=8465)
    logger.info('Shutting down server...')
