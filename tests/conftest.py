import json

import pytest

from doc_server import create_app
from settings import ServerConfig


@pytest.fixture
def data_dir(tmp_path):
    """Catalog with one document, its HTML file, and no favorites file yet."""
    html_dir = tmp_path / "html_files"
    html_dir.mkdir()
    (html_dir / "doc_one.html").write_text("<h1>Doc One</h1>", encoding="utf-8")
    (tmp_path / "documents.json").write_text(
        json.dumps([{"id": 1, "name": "Doc One"}]), encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def config(data_dir):
    return ServerConfig(
        documents_json=data_dir / "documents.json",
        favorites_json=data_dir / "favorites.json",
        html_dir=data_dir / "html_files",
    )


@pytest.fixture
def app(config):
    app = create_app(config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
