"""
HTTP client for the /api/games endpoints
"""
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional

import requests

from gameshelf.exceptions import GameShelfException

logger = logging.getLogger("main")


class CatalogClientError(GameShelfException):
    """Raised when the catalog API answers with an error or cannot be reached"""

    code = "CLIENT_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message, code or self.code)
        # None when the request never reached the server
        self.status_code = status_code


class CatalogClient:
    """Thin requests wrapper around the game CRUD surface"""

    def __init__(self, base_url: str, timeout: int = 10, max_workers: int = 8):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_workers = max_workers
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    @classmethod
    def from_settings(cls):
        """Build a client from the client section of the settings"""
        from gameshelf.settings import load_settings

        conf = load_settings()["client"]
        return cls(conf["base_url"], timeout=int(conf["timeout"]), max_workers=int(conf["max_workers"]))

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}/api{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise CatalogClientError(f"Request to {url} failed: {e}")

        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = {}
            message = body.get("message") or response.reason or f"HTTP {response.status_code}"
            raise CatalogClientError(message, status_code=response.status_code, code=body.get("code"))

        return response.json()

    def list_games(self) -> List[Dict]:
        return self._request("GET", "/games")

    def get_game(self, game_id: int) -> Dict:
        return self._request("GET", f"/games/{game_id}")

    def create_game(self, data: Dict) -> Dict:
        return self._request("POST", "/games", json=data)

    def update_game(self, game_id: int, data: Dict) -> Dict:
        return self._request("PUT", f"/games/{game_id}", json=data)

    def delete_game(self, game_id: int) -> Dict:
        return self._request("DELETE", f"/games/{game_id}")

    def delete_games(self, ids) -> Dict[str, List[int]]:
        """
        Delete several games with one DELETE request each, issued concurrently.

        Requests are independent: a failure leaves the other deletions in place.

        Returns:
            Dict with the ``succeeded`` and ``failed`` id lists, in input order.
        """
        ids = list(dict.fromkeys(ids))
        if not ids:
            return {"succeeded": [], "failed": []}

        outcome = {}
        max_workers = min(len(ids), self.max_workers)
        with ThreadPoolExecutor(max_workers=max_workers,
                                thread_name_prefix='gameshelf_delete') as executor:
            future_to_id = {
                executor.submit(self.delete_game, game_id): game_id
                for game_id in ids
            }
            for future in as_completed(future_to_id):
                game_id = future_to_id[future]
                try:
                    future.result()
                    outcome[game_id] = True
                except Exception as exc:
                    logger.error(f"Error deleting game {game_id}: {exc}")
                    outcome[game_id] = False

        result = {
            "succeeded": [i for i in ids if outcome[i]],
            "failed": [i for i in ids if not outcome[i]],
        }
        if result["failed"]:
            logger.warning(f"Error deleting some games: {len(result['failed'])} of {len(ids)} failed")
        return result
