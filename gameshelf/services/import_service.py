"""
One-shot catalog import from IGDB: upsert tags, then create games with their links
"""
import logging
from typing import Dict

from sqlalchemy.exc import IntegrityError

from gameshelf.constants import (
    IGDB_SEED_GENRE_IDS,
    IGDB_SEED_PLATFORM_IDS,
    IGDB_SEED_GAMES_LIMIT,
    IGDB_SEED_MIN_RATING,
    IGDB_SEED_MIN_RATING_COUNT,
    IGDB_MAX_GENRES_PER_GAME,
    IGDB_MAX_PLATFORMS_PER_GAME,
)
from gameshelf.db import db
from gameshelf.metrics import track_import
from gameshelf.models.game import Game
from gameshelf.repositories.genre_repository import GenreRepository
from gameshelf.repositories.platform_repository import PlatformRepository
from gameshelf.services.igdb_service import IGDBClient, build_cover_url
from gameshelf.utils import from_unix_timestamp

logger = logging.getLogger("main")


def _upsert_tags(tags_data, repository) -> Dict[int, object]:
    """Upsert each IGDB tag by name and map its IGDB id to our row"""
    tag_map = {}
    for tag in tags_data:
        tag_map[tag["id"]] = repository.upsert(tag["name"])
    return tag_map


def _linked(igdb_ids, tag_map, limit):
    return [tag_map[i] for i in (igdb_ids or [])[:limit] if i in tag_map]


def build_game(game_data, genre_map, platform_map) -> Game:
    """Turn one IGDB game record into a Game with at most 3 genres and 5 platforms"""
    game = Game(
        igdb_id=game_data["id"],
        name=game_data["name"],
        rating=game_data.get("rating"),
        release_date=from_unix_timestamp(game_data.get("first_release_date")),
        cover_url=build_cover_url((game_data.get("cover") or {}).get("url")),
    )
    game.genres = _linked(game_data.get("genres"), genre_map, IGDB_MAX_GENRES_PER_GAME)
    game.platforms = _linked(game_data.get("platforms"), platform_map, IGDB_MAX_PLATFORMS_PER_GAME)
    return game


def import_catalog(client: IGDBClient) -> Dict[str, int]:
    """Fetch genres, platforms and the best rated games from IGDB and store them"""
    logger.info("Starting IGDB import...")

    logger.info("Fetching genres...")
    genre_map = _upsert_tags(client.fetch_genres(IGDB_SEED_GENRE_IDS), GenreRepository)
    logger.info(f"{len(genre_map)} genres ready")

    logger.info("Fetching platforms...")
    platform_map = _upsert_tags(client.fetch_platforms(IGDB_SEED_PLATFORM_IDS), PlatformRepository)
    logger.info(f"{len(platform_map)} platforms ready")

    logger.info("Fetching games...")
    games_data = client.fetch_top_games(IGDB_SEED_GAMES_LIMIT, IGDB_SEED_MIN_RATING, IGDB_SEED_MIN_RATING_COUNT)

    created = skipped = failed = 0
    for game_data in games_data:
        name = game_data.get("name") or f"IGDB #{game_data.get('id')}"
        try:
            game = build_game(game_data, genre_map, platform_map)
            db.session.add(game)
            db.session.commit()
            created += 1
            track_import("created")
            logger.info(f"  + {name}")
        except IntegrityError:
            db.session.rollback()
            skipped += 1
            track_import("skipped")
            logger.info(f"  = {name} (already exists)")
        except Exception as e:
            db.session.rollback()
            failed += 1
            track_import("failed")
            logger.error(f"  x Error with {name}: {e}")

    summary = {
        "genres": len(genre_map),
        "platforms": len(platform_map),
        "games_created": created,
        "games_skipped": skipped,
        "games_failed": failed,
    }
    logger.info(
        f"Import completed: {summary['genres']} genres, {summary['platforms']} platforms, "
        f"{created} games created, {skipped} skipped, {failed} failed"
    )
    return summary
