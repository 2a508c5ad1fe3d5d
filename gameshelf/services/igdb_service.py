"""
Client for the IGDB API (via Twitch) used by the catalog import
"""
import time
import logging
from typing import Dict, List, Optional

import requests

from gameshelf.constants import (
    IGDB_BASE_URL,
    IGDB_AUTH_URL,
    IGDB_TIMEOUT,
    IGDB_COVER_THUMB,
    IGDB_COVER_BIG,
)
from gameshelf.exceptions import IGDBException

logger = logging.getLogger("main")


def build_cover_url(url: Optional[str]) -> Optional[str]:
    """IGDB returns protocol-relative thumbnails: //images.igdb.com/.../t_thumb/x.jpg"""
    if not url:
        return None
    url = url.replace(IGDB_COVER_THUMB, IGDB_COVER_BIG)
    if url.startswith("//"):
        return f"https:{url}"
    return url


def _id_list(ids) -> str:
    return ",".join(str(i) for i in ids)


class IGDBClient:
    """Client for IGDB API (via Twitch)"""

    _access_token = None
    _token_expiry = 0

    def __init__(self, client_id: str, access_token: str = "", client_secret: str = "",
                 base_url: str = IGDB_BASE_URL, timeout: int = IGDB_TIMEOUT):
        self.client_id = client_id
        self.access_token = access_token
        self.client_secret = client_secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def _get_access_token(self):
        """Use the configured token, or get/refresh an OAuth2 app token with the client secret"""
        if self.access_token:
            return self.access_token

        if not self.client_secret:
            raise IGDBException("IGDB access token or client secret is required")

        now = time.time()
        if IGDBClient._access_token and IGDBClient._token_expiry > now + 60:
            return IGDBClient._access_token

        try:
            params = {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "grant_type": "client_credentials"
            }
            response = requests.post(IGDB_AUTH_URL, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()

            IGDBClient._access_token = data["access_token"]
            IGDBClient._token_expiry = now + data["expires_in"]
            return IGDBClient._access_token
        except (requests.RequestException, KeyError, ValueError) as e:
            raise IGDBException(f"IGDB Auth failed: {e}")

    def query(self, endpoint: str, body: str) -> List[Dict]:
        """POST an Apicalypse query to an endpoint and return the decoded list"""
        headers = {
            "Client-ID": self.client_id,
            "Authorization": f"Bearer {self._get_access_token()}",
            "Accept": "application/json",
        }

        try:
            response = self.session.post(
                f"{self.base_url}/{endpoint}",
                headers=headers,
                data=body,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise IGDBException(f"IGDB request to '{endpoint}' failed: {e}")

        if not response.ok:
            raise IGDBException(f"IGDB API error: {response.reason}")

        logger.debug(f"IGDB {endpoint}: {len(response.content)} bytes")
        return response.json()

    def fetch_genres(self, ids) -> List[Dict]:
        return self.query("genres", f"fields id, name; where id = ({_id_list(ids)}); limit {len(ids)};")

    def fetch_platforms(self, ids) -> List[Dict]:
        return self.query("platforms", f"fields id, name; where id = ({_id_list(ids)}); limit {len(ids)};")

    def fetch_top_games(self, limit: int, min_rating: int, min_rating_count: int) -> List[Dict]:
        """Best rated games with cover, genre and platform ids"""
        body = (
            "fields name, rating, first_release_date, cover.url, genres, platforms; "
            f"where rating > {min_rating} & rating_count > {min_rating_count}; "
            "sort rating desc; "
            f"limit {limit};"
        )
        return self.query("games", body)
