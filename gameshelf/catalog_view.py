"""
Filter and sort state for the catalog dashboard.

Works on serialized games (the dicts returned by ``serialize_game`` or by the
JSON API) so the same code backs the server-rendered dashboard and the
``CatalogClient`` consumers.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, List, Optional
import logging

from gameshelf.constants import (
    SORT_KEYS,
    SORT_ORDERS,
    SORT_NAME,
    SORT_RATING,
    SORT_RELEASE_DATE,
    SORT_DESC,
    RATING_MIN,
    RATING_MAX,
)
from gameshelf.utils import ensure_utc

logger = logging.getLogger("main")

SORT_ALIASES = {
    "releaseDate": SORT_RELEASE_DATE,
}


@dataclass
class Filters:
    """Current dashboard filters"""

    search: str = ""
    genre: str = ""
    platform: str = ""
    min_rating: float = 0
    sort_by: str = SORT_RATING
    sort_order: str = SORT_DESC

    @classmethod
    def from_args(cls, args) -> "Filters":
        """Build filters from query-string args, unknown or invalid values keep their default"""
        defaults = cls()

        sort_by = (args.get("sort_by") or "").strip()
        sort_by = SORT_ALIASES.get(sort_by, sort_by)
        if sort_by not in SORT_KEYS:
            sort_by = defaults.sort_by

        sort_order = (args.get("sort_order") or "").strip().lower()
        if sort_order not in SORT_ORDERS:
            sort_order = defaults.sort_order

        return cls(
            search=(args.get("search") or "").strip(),
            genre=(args.get("genre") or "").strip(),
            platform=(args.get("platform") or "").strip(),
            min_rating=_parse_min_rating(args.get("min_rating")),
            sort_by=sort_by,
            sort_order=sort_order,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def is_default(self) -> bool:
        return self == Filters()


def _parse_min_rating(value) -> float:
    try:
        rating = float(value)
    except (TypeError, ValueError):
        return 0
    if not RATING_MIN <= rating <= RATING_MAX:
        return 0
    return rating


def _release_timestamp(game) -> float:
    released = ensure_utc(game.get("releaseDate"))
    return released.timestamp() if released else 0


def _sort_key(sort_by):
    if sort_by == SORT_NAME:
        return lambda g: (g.get("name") or "").casefold()
    if sort_by == SORT_RELEASE_DATE:
        return _release_timestamp
    return lambda g: g.get("rating") or 0


def _has_tag(game, key, name) -> bool:
    return any(tag["name"] == name for tag in game.get(key, []))


def apply_filters(games, filters: Filters) -> List[Dict[str, Any]]:
    """Return the games matching filters, sorted; the input list is left untouched"""
    result = list(games)

    if filters.search:
        needle = filters.search.lower()
        result = [g for g in result if needle in (g.get("name") or "").lower()]

    if filters.genre:
        result = [g for g in result if _has_tag(g, "genres", filters.genre)]

    if filters.platform:
        result = [g for g in result if _has_tag(g, "platforms", filters.platform)]

    if filters.min_rating > 0:
        result = [g for g in result if (g.get("rating") or 0) >= filters.min_rating]

    # sorted() is stable, equal keys keep their catalog order in both directions
    return sorted(result, key=_sort_key(filters.sort_by), reverse=filters.sort_order == SORT_DESC)


class CatalogStore:
    """Holds the loaded catalog and the filtered view derived from it"""

    def __init__(self, games=None):
        self.games: List[Dict[str, Any]] = []
        self.filtered_games: List[Dict[str, Any]] = []
        self.filters = Filters()
        self.loading = False
        self.error: Optional[str] = None
        if games is not None:
            self.load(games)

    def _recompute(self):
        self.filtered_games = apply_filters(self.games, self.filters)

    def load(self, games):
        self.games = list(games)
        self.error = None
        self._recompute()

    def fetch(self, client) -> bool:
        """Load the catalog through a CatalogClient, keeping the error message on failure"""
        self.loading = True
        self.error = None
        try:
            self.load(client.list_games())
            return True
        except Exception as e:
            logger.error(f"Error fetching games: {e}")
            self.error = str(e) or "Error fetching games"
            return False
        finally:
            self.loading = False

    def set_filters(self, **partial):
        unknown = set(partial) - set(Filters.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown filters: {', '.join(sorted(unknown))}")
        self.filters = replace(self.filters, **partial)
        self._recompute()

    def reset_filters(self):
        self.filters = Filters()
        self._recompute()

    def _options(self, key) -> List[str]:
        return sorted({tag["name"] for game in self.games for tag in game.get(key, [])})

    def genre_options(self) -> List[str]:
        return self._options("genres")

    def platform_options(self) -> List[str]:
        return self._options("platforms")
