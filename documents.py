# documents.py - read-only document catalog and the HTML files behind it
import logging
import re
from pathlib import Path

from werkzeug.security import safe_join

from json_store import path_exists, read_collection

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def html_filename(name: str) -> str:
    """'Doc One' -> 'doc_one.html'"""
    return _WHITESPACE.sub("_", name).lower() + ".html"


def html_path(html_dir: Path, filename: str) -> Path | None:
    """Path of `filename` inside `html_dir`, or None if it would land outside it."""
    joined = safe_join(str(html_dir), filename)
    return Path(joined) if joined is not None else None


class DocumentCatalog:
    def __init__(self, documents_json: Path, html_dir: Path):
        self.documents_json = Path(documents_json)
        self.html_dir = Path(html_dir)

    def list_all(self) -> list:
        return read_collection(self.documents_json)

    def find_by_id(self, doc_id: int):
        for doc in self.list_all():
            if doc.get("id") == doc_id:
                return doc
        logger.debug("[catalog] no document with id %s in %s", doc_id, self.documents_json)
        return None

    def resolve_html_path(self, document) -> Path | None:
        return html_path(self.html_dir, html_filename(document["name"]))

    def html_path_for_name(self, name: str) -> Path | None:
        """
        The HTML file a search for `name` serves: `{name}.html` as given, else
        the catalog normalization of `name`. None when neither exists.
        """
        for filename in (f"{name}.html", html_filename(name)):
            path = html_path(self.html_dir, filename)
            if path is not None and path_exists(path):
                return path
        return None
