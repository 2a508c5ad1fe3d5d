from flask_restx import Api, Resource, fields
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
import logging

from gameshelf.constants import BUILD_VERSION

logger = logging.getLogger('main')


def init_rest_api(api_bp):
    api = Api(api_bp, version='1.0', title='GameShelf API',
        description='Video game catalog API',
        doc='/docs'
    )

    # Namespaces
    ns_genres = api.namespace('v1/genres', description='Genre tags')
    ns_platforms = api.namespace('v1/platforms', description='Platform tags')
    ns_stats = api.namespace('v1/stats', description='Catalog statistics')
    ns_system = api.namespace('v1/system', description='System operations')

    # Models
    tag_model = api.model('Tag', {
        'id': fields.Integer(required=True, description='Tag ID'),
        'name': fields.String(required=True, description='Tag name'),
    })

    count_model = api.model('NameCount', {
        'name': fields.String(description='Tag name'),
        'count': fields.Integer(description='Number of games'),
    })

    bucket_model = api.model('RatingBucket', {
        'label': fields.String(description='Rating range, e.g. 70-79'),
        'count': fields.Integer(description='Number of games'),
    })

    year_model = api.model('ReleaseYear', {
        'year': fields.Integer(description='Release year'),
        'count': fields.Integer(description='Number of games'),
    })

    stats_model = api.model('CatalogStats', {
        'total': fields.Integer(description='Number of games'),
        'average_rating': fields.Float(description='Average rating of rated games'),
        'genres': fields.List(fields.Nested(count_model), description='Games per genre'),
        'platforms': fields.List(fields.Nested(count_model), description='Games per platform'),
        'ratings': fields.List(fields.Nested(bucket_model), description='Rating histogram'),
        'years': fields.List(fields.Nested(year_model), description='Releases per year'),
    })

    @ns_genres.route('')
    class GenreList(Resource):
        @ns_genres.doc('list_genres')
        @ns_genres.marshal_list_with(tag_model)
        def get(self):
            """List all genres sorted by name"""
            from gameshelf.repositories.genre_repository import GenreRepository
            return GenreRepository.get_all()

    @ns_platforms.route('')
    class PlatformList(Resource):
        @ns_platforms.doc('list_platforms')
        @ns_platforms.marshal_list_with(tag_model)
        def get(self):
            """List all platforms sorted by name"""
            from gameshelf.repositories.platform_repository import PlatformRepository
            return PlatformRepository.get_all()

    @ns_stats.route('')
    class Stats(Resource):
        @ns_stats.doc('get_stats')
        @ns_stats.marshal_with(stats_model)
        def get(self):
            """Chart data for the whole catalog"""
            from gameshelf.services.game_service import list_games, serialize_game
            from gameshelf.services.stats_service import catalog_stats
            return catalog_stats(serialize_game(game) for game in list_games())

    @ns_system.route('/health')
    class Health(Resource):
        def get(self):
            """Health check, including a database round trip"""
            from gameshelf.db import db
            try:
                db.session.execute(text('SELECT 1'))
                database = 'ok'
            except SQLAlchemyError as e:
                db.session.rollback()
                logger.error(f"Health check database error: {e}")
                return {'status': 'unhealthy', 'database': 'error', 'version': BUILD_VERSION}, 503
            return {'status': 'healthy', 'database': database, 'api_version': '1.0', 'version': BUILD_VERSION}

    return api
