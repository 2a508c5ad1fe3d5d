"""
Pytest fixtures and configuration for GameShelf tests
"""
import copy
import pytest
from unittest.mock import patch

from gameshelf.constants import DEFAULT_SETTINGS


@pytest.fixture
def app():
    """Application on an in-memory database, settings never touch the config dir"""
    from gameshelf.app import create_app
    from gameshelf.db import db

    with patch('gameshelf.app.load_settings', return_value=copy.deepcopy(DEFAULT_SETTINGS)):
        app = create_app({
            'SQLALCHEMY_DATABASE_URI': 'sqlite://',
            'TESTING': True,
            'SECRET_KEY': 'test-secret-key',
        })

    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def game_payload():
    """Body accepted by POST /api/games"""
    return {
        'name': 'The Witcher 3: Wild Hunt',
        'igdbId': 1942,
        'rating': 92.5,
        'releaseDate': '2015-05-19',
        'coverUrl': 'https://images.igdb.com/igdb/image/upload/t_cover_big/co1wyy.jpg',
        'genres': ['Role-playing (RPG)', 'Adventure'],
        'platforms': ['PC (Microsoft Windows)', 'PlayStation 4'],
    }


@pytest.fixture
def sample_games(app):
    """Three stored games with overlapping genres and platforms"""
    from gameshelf.services import game_service

    bodies = [
        {
            'name': 'Hades',
            'igdbId': 113112,
            'rating': 93.1,
            'releaseDate': '2020-09-17',
            'genres': ['Role-playing (RPG)', 'Indie'],
            'platforms': ['PC (Microsoft Windows)', 'Nintendo Switch'],
        },
        {
            'name': 'celeste',
            'igdbId': 26226,
            'rating': 88.0,
            'releaseDate': '2018-01-25',
            'genres': ['Platform', 'Indie'],
            'platforms': ['Nintendo Switch'],
        },
        {
            'name': 'Unrated Prototype',
            'igdbId': 999001,
            'genres': ['Platform'],
        },
    ]
    return [game_service.create_game(body) for body in bodies]


@pytest.fixture
def sample_serialized_games():
    """Serialized games as the dashboard and the API client see them"""
    return [
        {
            'id': 1, 'igdbId': 10, 'name': 'Bravo', 'rating': 80.0,
            'releaseDate': '2019-03-01T00:00:00+00:00', 'coverUrl': None,
            'genres': [{'id': 1, 'name': 'Shooter'}],
            'platforms': [{'id': 1, 'name': 'PC (Microsoft Windows)'}],
        },
        {
            'id': 2, 'igdbId': 20, 'name': 'alpha', 'rating': None,
            'releaseDate': None, 'coverUrl': None,
            'genres': [{'id': 2, 'name': 'Adventure'}],
            'platforms': [{'id': 2, 'name': 'Nintendo Switch'}],
        },
        {
            'id': 3, 'igdbId': 30, 'name': 'Charlie', 'rating': 95.0,
            'releaseDate': '2021-11-10T00:00:00+00:00', 'coverUrl': None,
            'genres': [{'id': 1, 'name': 'Shooter'}, {'id': 2, 'name': 'Adventure'}],
            'platforms': [{'id': 1, 'name': 'PC (Microsoft Windows)'}, {'id': 2, 'name': 'Nintendo Switch'}],
        },
        {
            'id': 4, 'igdbId': 40, 'name': 'Delta', 'rating': 80.0,
            'releaseDate': '2010-06-15T00:00:00+00:00', 'coverUrl': None,
            'genres': [],
            'platforms': [{'id': 3, 'name': 'PlayStation 4'}],
        },
    ]


@pytest.fixture
def igdb_genres():
    return [
        {'id': 5, 'name': 'Shooter'},
        {'id': 12, 'name': 'Role-playing (RPG)'},
        {'id': 31, 'name': 'Adventure'},
    ]


@pytest.fixture
def igdb_platforms():
    return [
        {'id': 6, 'name': 'PC (Microsoft Windows)'},
        {'id': 48, 'name': 'PlayStation 4'},
    ]


@pytest.fixture
def igdb_games():
    """Games as returned by the IGDB /games endpoint"""
    return [
        {
            'id': 1942,
            'name': 'The Witcher 3: Wild Hunt',
            'rating': 93.4,
            'first_release_date': 1431993600,
            'cover': {'id': 89386, 'url': '//images.igdb.com/igdb/image/upload/t_thumb/co1wyy.jpg'},
            'genres': [12, 31, 99, 5],
            'platforms': [6, 48],
        },
        {
            'id': 472,
            'name': 'The Elder Scrolls V: Skyrim',
            'rating': 88.9,
            'genres': [12],
            'platforms': [6, 48, 130],
        },
    ]
