# favorites.py - per-user favorite documents kept in one JSON array
import logging
import threading
from pathlib import Path

from documents import html_path
from errors import BadRequest, Conflict, NotFound
from json_store import path_exists, read_collection, write_collection

logger = logging.getLogger(__name__)


def _require_fields(username, filename):
    if not (isinstance(username, str) and username and isinstance(filename, str) and filename):
        raise BadRequest("Username and filename are required.")


def _same_pair(fav, username, filename) -> bool:
    return fav.get("username") == username and fav.get("filename") == filename


class FavoritesStore:
    """
    Every call reads the whole file and every mutation writes it back.
    Reads and mutations share a per-store lock, so within one process a read
    never sees a half-written file and no append is lost. Other processes
    are not covered.
    """

    def __init__(self, favorites_json: Path, html_dir: Path):
        self.favorites_json = Path(favorites_json)
        self.html_dir = Path(html_dir)
        self._lock = threading.Lock()

    def load(self) -> list:
        return read_collection(self.favorites_json)

    def add_favorite(self, username, filename) -> dict:
        _require_fields(username, filename)

        target = html_path(self.html_dir, filename)
        if target is None or not path_exists(target):
            raise NotFound("File does not exist.")

        with self._lock:
            favorites = self.load()
            if any(_same_pair(fav, username, filename) for fav in favorites):
                raise Conflict("This favorite already exists.")

            # not unique after deletions; kept for compatibility with existing files
            favorite = {"id": len(favorites) + 1, "username": username, "filename": filename}
            favorites.append(favorite)
            write_collection(self.favorites_json, favorites)

        logger.info("[favorites] %r added %r (id=%d)", username, filename, favorite["id"])
        return favorite

    def list_by_user(self, username: str) -> list:
        with self._lock:
            favorites = self.load()
        return [fav for fav in favorites if fav.get("username") == username]

    def remove_favorite(self, username, filename) -> None:
        _require_fields(username, filename)

        with self._lock:
            favorites = self.load()
            for i, fav in enumerate(favorites):
                if _same_pair(fav, username, filename):
                    del favorites[i]
                    break
            else:
                raise NotFound("Favorite not found.")
            write_collection(self.favorites_json, favorites)

        logger.info("[favorites] %r removed %r", username, filename)
