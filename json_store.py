# json_store.py - whole-file JSON collections on disk
import json
import os
from pathlib import Path


def read_collection(path: Path) -> list:
    """Parse the JSON file at `path`. A missing file reads as an empty collection."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    return json.loads(text)


def write_collection(path: Path, records) -> None:
    # overwrites in full, no temp file / rename
    Path(path).write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")


def path_exists(path) -> bool:
    try:
        return os.access(path, os.F_OK)
    except (TypeError, ValueError):
        return False
