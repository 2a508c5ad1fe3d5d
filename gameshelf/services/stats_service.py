"""
Chart data for the dashboard and /api/v1/stats, computed over serialized games
"""
from collections import Counter
from typing import Any, Dict, Iterable, List

from gameshelf.utils import ensure_utc

RATING_BUCKET_SIZE = 10


def _distribution(games, key) -> List[Dict[str, Any]]:
    counts = Counter(tag["name"] for game in games for tag in game.get(key, []))
    ordered = sorted(counts.items(), key=lambda x: (-x[1], x[0]))
    return [{"name": name, "count": count} for name, count in ordered]


def rating_histogram(games) -> List[Dict[str, Any]]:
    """Games per 10-point rating bucket, 100 falls into the last one"""
    buckets = [0] * (100 // RATING_BUCKET_SIZE)
    for game in games:
        rating = game.get("rating")
        if rating is None:
            continue
        index = min(int(rating // RATING_BUCKET_SIZE), len(buckets) - 1)
        buckets[index] += 1

    result = []
    for i, count in enumerate(buckets):
        low = i * RATING_BUCKET_SIZE
        high = 100 if i == len(buckets) - 1 else low + RATING_BUCKET_SIZE - 1
        result.append({"label": f"{low}-{high}", "count": count})
    return result


def releases_per_year(games) -> List[Dict[str, Any]]:
    years = Counter()
    for game in games:
        released = ensure_utc(game.get("releaseDate"))
        if released:
            years[released.year] += 1
    return [{"year": year, "count": years[year]} for year in sorted(years)]


def catalog_stats(games: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    games = list(games)
    ratings = [g["rating"] for g in games if g.get("rating") is not None]
    return {
        "total": len(games),
        "average_rating": round(sum(ratings) / len(ratings), 1) if ratings else None,
        "genres": _distribution(games, "genres"),
        "platforms": _distribution(games, "platforms"),
        "ratings": rating_histogram(games),
        "years": releases_per_year(games),
    }
