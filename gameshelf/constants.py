import os

APP_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.join(APP_DIR, 'data')
CONFIG_DIR = os.path.join(APP_DIR, 'config')
DB_FILE = os.path.join(CONFIG_DIR, 'gameshelf.db')
CONFIG_FILE = os.path.join(CONFIG_DIR, 'settings.yaml')
SECRET_KEY_FILE = os.path.join(CONFIG_DIR, '.secret_key')

GAMESHELF_DB = 'sqlite:///' + DB_FILE

BUILD_VERSION = '20261018_0900'

# IGDB
IGDB_BASE_URL = 'https://api.igdb.com/v4'
IGDB_AUTH_URL = 'https://id.twitch.tv/oauth2/token'
IGDB_TIMEOUT = 15

# Fixed seed queries, IGDB ids of the genres and platforms we keep
IGDB_SEED_GENRE_IDS = (5, 12, 31, 32, 33, 15, 16, 4, 10, 14)
IGDB_SEED_PLATFORM_IDS = (6, 48, 49, 167, 169, 130, 14, 41, 46, 38)
IGDB_SEED_GAMES_LIMIT = 50
IGDB_SEED_MIN_RATING = 70
IGDB_SEED_MIN_RATING_COUNT = 100
IGDB_MAX_GENRES_PER_GAME = 3
IGDB_MAX_PLATFORMS_PER_GAME = 5

IGDB_COVER_THUMB = 't_thumb'
IGDB_COVER_BIG = 't_cover_big'

# Catalog
RATING_MIN = 0
RATING_MAX = 100

# Ids are stored as signed 64-bit integers
ID_MIN = -(2 ** 63)
ID_MAX = 2 ** 63 - 1

SORT_NAME = 'name'
SORT_RATING = 'rating'
SORT_RELEASE_DATE = 'release_date'
SORT_KEYS = (SORT_NAME, SORT_RATING, SORT_RELEASE_DATE)

SORT_ASC = 'asc'
SORT_DESC = 'desc'
SORT_ORDERS = (SORT_ASC, SORT_DESC)

VIEW_GRID = 'grid'
VIEW_LIST = 'list'

DEFAULT_SETTINGS = {
    "database": {
        "url": GAMESHELF_DB,
    },
    "igdb": {
        "client_id": "",
        "access_token": "",
        "client_secret": "",
    },
    "client": {
        "base_url": "http://localhost:8465",
        "timeout": 10,
        "max_workers": 8,
    },
}
