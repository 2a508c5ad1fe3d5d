"""
Service layer for catalog entries: payload validation, CRUD and serialization
"""
import logging
from datetime import datetime, date
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError

from gameshelf.constants import ID_MIN, ID_MAX, RATING_MIN, RATING_MAX
from gameshelf.db import db
from gameshelf.exceptions import ValidationException, NotFoundException, ConflictException
from gameshelf.models.game import Game
from gameshelf.repositories.game_repository import GameRepository
from gameshelf.repositories.genre_repository import GenreRepository
from gameshelf.repositories.platform_repository import PlatformRepository
from gameshelf.utils import ensure_utc

logger = logging.getLogger("main")


def serialize_game(game: Game) -> Dict[str, Any]:
    """Shape a Game the way the API and the dashboard consume it"""
    release_date = ensure_utc(game.release_date)
    return {
        "id": game.id,
        "igdbId": game.igdb_id,
        "name": game.name,
        "rating": game.rating,
        "releaseDate": release_date.isoformat() if release_date else None,
        "coverUrl": game.cover_url,
        "genres": [{"id": g.id, "name": g.name} for g in game.genres],
        "platforms": [{"id": p.id, "name": p.name} for p in game.platforms],
    }


def parse_game_id(raw) -> int:
    try:
        game_id = int(str(raw).strip())
    except (TypeError, ValueError):
        raise ValidationException("Invalid ID")
    if not ID_MIN <= game_id <= ID_MAX:
        raise ValidationException("Invalid ID")
    return game_id


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_igdb_id(value) -> int:
    if isinstance(value, bool):
        raise ValidationException("igdbId must be an integer")
    try:
        igdb_id = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationException("igdbId must be an integer")
    if not ID_MIN <= igdb_id <= ID_MAX:
        raise ValidationException("igdbId is out of range")
    return igdb_id


def _parse_rating(value) -> Optional[float]:
    if _blank(value):
        return None
    if isinstance(value, bool):
        raise ValidationException("rating must be a number")
    try:
        rating = float(value)
    except (TypeError, ValueError):
        raise ValidationException("rating must be a number")
    if not RATING_MIN <= rating <= RATING_MAX:
        raise ValidationException(f"rating must be between {RATING_MIN} and {RATING_MAX}")
    return rating


def _parse_release_date(value) -> Optional[datetime]:
    if _blank(value):
        return None
    try:
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime(value.year, value.month, value.day)
        else:
            text = str(value).strip()
            if len(text) == 10:
                parsed = datetime.strptime(text, "%Y-%m-%d")
            else:
                parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        # Shifting to UTC can leave the supported year range
        return ensure_utc(parsed)
    except (ValueError, OverflowError):
        raise ValidationException("releaseDate must be an ISO date")


def normalize_tag_names(names, field: str) -> List[str]:
    """Strip names, drop blanks and collapse duplicates keeping the first occurrence"""
    if names is None:
        return []
    if isinstance(names, str) or not isinstance(names, (list, tuple)):
        raise ValidationException(f"{field} must be a list of names")

    result = []
    for name in names:
        if not isinstance(name, str):
            raise ValidationException(f"{field} must be a list of names")
        cleaned = name.strip()
        if cleaned and cleaned not in result:
            result.append(cleaned)
    return result


def parse_game_payload(data) -> Dict[str, Any]:
    """Validate a create/update body and return model-ready fields"""
    if not isinstance(data, dict):
        raise ValidationException("Request body must be a JSON object")

    name = data.get("name")
    igdb_id = data.get("igdbId")
    if _blank(name) or _blank(igdb_id):
        raise ValidationException("name and igdbId are required")

    cover_url = data.get("coverUrl")
    return {
        "name": str(name).strip(),
        "igdb_id": _parse_igdb_id(igdb_id),
        "rating": _parse_rating(data.get("rating")),
        "release_date": _parse_release_date(data.get("releaseDate")),
        "cover_url": None if _blank(cover_url) else str(cover_url).strip(),
        "genres": normalize_tag_names(data.get("genres"), "genres"),
        "platforms": normalize_tag_names(data.get("platforms"), "platforms"),
    }


def _apply_fields(game: Game, payload: Dict[str, Any]):
    game.name = payload["name"]
    game.igdb_id = payload["igdb_id"]
    game.rating = payload["rating"]
    game.release_date = payload["release_date"]
    game.cover_url = payload["cover_url"]
    # Replaces every existing link, tags are created on first reference
    game.genres = [GenreRepository.get_or_create(name) for name in payload["genres"]]
    game.platforms = [PlatformRepository.get_or_create(name) for name in payload["platforms"]]


def _save(game: Game, payload: Dict[str, Any]):
    try:
        _apply_fields(game, payload)
        db.session.add(game)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        existing = GameRepository.get_by_igdb_id(payload["igdb_id"])
        if existing is not None and existing.id != game.id:
            raise ConflictException(f"A game with igdbId {payload['igdb_id']} already exists")
        # Another request created one of the genres or platforms first
        raise ConflictException("A genre or platform with the same name was saved concurrently, retry the request")


def list_games() -> List[Game]:
    return GameRepository.get_all()


def get_game(game_id: int) -> Game:
    game = GameRepository.get_by_id(game_id)
    if not game:
        raise NotFoundException("Game not found")
    return game


def create_game(data) -> Game:
    payload = parse_game_payload(data)

    if GameRepository.get_by_igdb_id(payload["igdb_id"]):
        raise ConflictException(f"A game with igdbId {payload['igdb_id']} already exists")

    game = Game()
    _save(game, payload)

    logger.info(f"Created game {game.id} ({game.name})")
    return game


def update_game(game_id: int, data) -> Game:
    payload = parse_game_payload(data)
    game = get_game(game_id)

    other = GameRepository.get_by_igdb_id(payload["igdb_id"])
    if other and other.id != game.id:
        raise ConflictException(f"A game with igdbId {payload['igdb_id']} already exists")

    _save(game, payload)

    logger.info(f"Updated game {game.id} ({game.name})")
    return game


def delete_game(game_id: int) -> int:
    if not GameRepository.delete(game_id):
        raise NotFoundException("Game not found")
    logger.info(f"Deleted game {game_id}")
    return game_id
