# settings.py - where the server finds its data
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CORS_ORIGIN = "http://localhost:5173"


@dataclass(frozen=True)
class ServerConfig:
    documents_json: Path = Path("documents.json")
    favorites_json: Path = Path("favorites.json")
    html_dir: Path = Path("html_files")
    cors_origin: str = DEFAULT_CORS_ORIGIN

    @classmethod
    def from_env(cls, environ=None) -> "ServerConfig":
        """
        Read locations from DOC_SERVER_* variables, falling back to the
        defaults above (relative to the working directory).
        """
        env = os.environ if environ is None else environ
        return cls(
            documents_json=Path(env.get("DOC_SERVER_DOCUMENTS_JSON", cls.documents_json)),
            favorites_json=Path(env.get("DOC_SERVER_FAVORITES_JSON", cls.favorites_json)),
            html_dir=Path(env.get("DOC_SERVER_HTML_DIR", cls.html_dir)),
            cors_origin=env.get("DOC_SERVER_CORS_ORIGIN", cls.cors_origin),
        )
