from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, request
import logging
import time

logger = logging.getLogger("main")

# Catalog Metrics
catalog_games_total = Gauge("gameshelf_games_total", "Total number of games in the catalog")
catalog_genres_total = Gauge("gameshelf_genres_total", "Total number of genres")
catalog_platforms_total = Gauge("gameshelf_platforms_total", "Total number of platforms")
catalog_games_with_cover = Gauge("gameshelf_games_with_cover", "Number of games with cover image")

# API Metrics
api_request_duration_seconds = Histogram(
    "gameshelf_api_request_duration_seconds", "API request duration", ["endpoint", "method"]
)

api_requests_total = Counter("gameshelf_api_requests_total", "Total API requests", ["endpoint", "method", "status_code"])

# Import Metrics
games_imported_total = Counter("gameshelf_games_imported_total", "Games processed by the IGDB import", ["status"])


def init_metrics(app):
    @app.route("/api/metrics")
    def metrics():
        update_catalog_metrics()
        return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)

    @app.before_request
    def before_request():
        request.start_time = time.time()

    @app.after_request
    def after_request(response):
        duration = time.time() - getattr(request, "start_time", time.time())
        api_request_duration_seconds.labels(endpoint=request.endpoint or "unknown", method=request.method).observe(
            duration
        )
        api_requests_total.labels(
            endpoint=request.endpoint or "unknown", method=request.method, status_code=response.status_code
        ).inc()
        return response

    logger.info("Prometheus metrics initialized at /api/metrics")


def update_catalog_metrics():
    """Update catalog counts"""
    from gameshelf.models import Game
    from gameshelf.repositories.game_repository import GameRepository
    from gameshelf.repositories.genre_repository import GenreRepository
    from gameshelf.repositories.platform_repository import PlatformRepository

    catalog_games_total.set(GameRepository.count())
    catalog_genres_total.set(GenreRepository.count())
    catalog_platforms_total.set(PlatformRepository.count())
    catalog_games_with_cover.set(Game.query.filter(Game.cover_url.isnot(None)).count())


def track_import(status):
    """Count one game processed by the import: created, skipped or failed"""
    games_imported_total.labels(status=status).inc()
