#!/usr/bin/env python3
# doc_server.py - document catalog + favorites HTTP API
import argparse
import logging
import re
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path

from flask import Flask, Response, g, jsonify, request, send_file
from flask_cors import CORS

from documents import DocumentCatalog
from errors import BadRequest, InternalError, NotFound, ServiceError
from favorites import FavoritesStore
from json_store import path_exists
from settings import ServerConfig

VERSION = "jsau-apiserver-1.0.0"
CORS_METHODS = ["GET", "POST", "PUT", "DELETE"]
_DOC_ID = re.compile(r"[+-]?[0-9]+")

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(message: str, plain: bool = False):
    """Turn anything but a ServiceError into an InternalError carrying `message`."""
    try:
        yield
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("[doc_server] %s", message)
        raise InternalError(message, plain=plain) from exc


def _favorite_fields():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        body = {}
    return body.get("username"), body.get("filename")


def create_app(config: ServerConfig | None = None) -> Flask:
    config = config or ServerConfig.from_env()
    catalog = DocumentCatalog(config.documents_json, config.html_dir)
    favorites = FavoritesStore(config.favorites_json, config.html_dir)

    app = Flask(__name__)
    app.config["DOC_SERVER"] = config
    CORS(app, origins=[config.cors_origin], methods=CORS_METHODS, supports_credentials=True)

    @app.before_request
    def start_timer():
        g.started = time.perf_counter()

    @app.after_request
    def finish(resp):
        resp.headers["Cache-Control"] = "no-store"
        started = g.get("started")
        elapsed = (time.perf_counter() - started) * 1000 if started else 0.0
        logger.info("%s %s %d %.1f ms", request.method, request.path, resp.status_code, elapsed)
        return resp

    @app.errorhandler(ServiceError)
    def service_error(err):
        if err.plain:
            return Response(err.message, status=err.status_code, mimetype="text/plain")
        return jsonify({err.key: err.message}), err.status_code

    @app.get("/info")
    def info():
        return VERSION

    @app.get("/search")
    def search():
        name = request.args.get("name")
        if not name:
            with storage_errors("Error parsing JSON data."):
                docs = catalog.list_all()
            return jsonify(docs)

        path = catalog.html_path_for_name(name)
        if path is None:
            raise NotFound("File not Found", plain=True)
        return send_file(path.resolve())

    @app.get("/document/<doc_id>")
    def download_document(doc_id):
        if not _DOC_ID.fullmatch(doc_id):
            raise BadRequest("Invalid document ID.", plain=True)

        with storage_errors("Internal server error.", plain=True):
            doc = catalog.find_by_id(int(doc_id))
            if doc is None:
                raise NotFound("Document not found.", plain=True)
            path = catalog.resolve_html_path(doc)
            if path is None or not path_exists(path):
                raise NotFound("HTML file not found for the provided document.", plain=True)
            return send_file(path.resolve(), as_attachment=True, download_name=path.name)

    @app.post("/favorites")
    def add_favorite():
        username, filename = _favorite_fields()
        with storage_errors("An error occurred while writing the favorites file."):
            favorite = favorites.add_favorite(username, filename)
        return jsonify({"message": "Favorite added successfully!", "favorite": favorite}), 201

    @app.get("/favorites/<username>")
    def list_favorites(username):
        with storage_errors("An error occurred while retrieving favorites."):
            found = favorites.list_by_user(username)
        if not found:
            raise NotFound(f"No favorites found for user: {username}", key="message")
        return jsonify(found)

    @app.delete("/favorites")
    def delete_favorite():
        username, filename = _favorite_fields()
        with storage_errors("An error occurred while deleting the favorite."):
            favorites.remove_favorite(username, filename)
        return jsonify({"message": "Favorite deleted successfully."}), 200

    return app


def main():
    parser = argparse.ArgumentParser(description="Serve the document catalog and favorites API.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=5055)
    parser.add_argument("--documents", type=Path, help="Catalog JSON (default: $DOC_SERVER_DOCUMENTS_JSON or documents.json).")
    parser.add_argument("--favorites", type=Path, help="Favorites JSON (default: $DOC_SERVER_FAVORITES_JSON or favorites.json).")
    parser.add_argument("--html-dir", type=Path, help="Directory of HTML documents (default: $DOC_SERVER_HTML_DIR or html_files).")
    parser.add_argument("--debug", action="store_true", help="Verbose logging.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ServerConfig.from_env()
    overrides = {
        "documents_json": args.documents,
        "favorites_json": args.favorites,
        "html_dir": args.html_dir,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
    logger.info("[doc_server] catalog=%s favorites=%s html=%s",
                config.documents_json, config.favorites_json, config.html_dir)

    app = create_app(config)
    app.run(host=args.host, port=args.port, debug=False)


if __name__ == "__main__":
    main()
