"""
JSON file storage for the card catalog, site settings and uploads.

The whole catalog is one JSON array in the cards file and the site
settings are one JSON object in the settings file.  Every mutation
rewrites the entire file; there is no locking, so two overlapping
writers lose one update (last writer wins).

Plain reads fail soft: a missing, unreadable or malformed file yields an
empty catalog or the default settings and a logged warning.  Reads
that precede a rewrite (``load_cards_for_update``) and all writes
fail loud: errors are wrapped in ``StorageError`` so the API
layer can answer with a server error.

Paths come from ``core.config.settings`` and are resolved each time a
file is touched, the same way the database path used to be resolved,
so tests can point them at a temporary directory.
"""

import json
import logging
import os
import time
from pathlib import Path
from typing import List

from pydantic import TypeAdapter, ValidationError

from .config import BASE_DIR, settings
from ..schemas.card import Card
from ..schemas.settings import SiteSettings

logger = logging.getLogger(__name__)

_cards_adapter = TypeAdapter(List[Card])


class StorageError(Exception):
    """Raised when a store file cannot be written, or read ahead of a rewrite."""


def _resolve(path: str, base: Path) -> Path:
    if os.path.isabs(path):
        return Path(path)
    return (base / path).resolve()


def get_data_dir() -> Path:
    return _resolve(settings.data_dir, BASE_DIR)


def get_cards_path() -> Path:
    """Location of the cards file (relative names live in the data dir)."""
    return _resolve(settings.cards_file, get_data_dir())


def get_settings_path() -> Path:
    """Location of the settings file (relative names live in the data dir)."""
    return _resolve(settings.settings_file, get_data_dir())


def get_upload_dir() -> Path:
    return _resolve(settings.upload_dir, BASE_DIR)


def _read_json(path: Path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _write_json(path: Path, payload) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
    except OSError as exc:
        logger.exception("Failed to write %s", path)
        raise StorageError(f"Could not write {path.name}") from exc


def load_cards() -> List[Card]:
    """Return every stored card, or an empty list if the file is unusable."""
    path = get_cards_path()
    try:
        data = _read_json(path)
        return _cards_adapter.validate_python(data)
    except FileNotFoundError:
        return []
    except (OSError, ValueError, ValidationError) as exc:
        # json.JSONDecodeError is a ValueError
        logger.warning("Error reading cards file %s: %s", path, exc)
        return []


def load_cards_for_update() -> List[Card]:
    """Read the catalog ahead of a rewrite.

    A missing file is an empty catalog, but an unreadable or malformed
    one raises ``StorageError``: rewriting it from an empty list would
    destroy the cards that are still in it.
    """
    path = get_cards_path()
    try:
        data = _read_json(path)
        return _cards_adapter.validate_python(data)
    except FileNotFoundError:
        return []
    except (OSError, ValueError, ValidationError) as exc:
        logger.error("Refusing to rewrite unreadable cards file %s: %s", path, exc)
        raise StorageError(f"Could not read {path.name}") from exc


def save_cards(cards: List[Card]) -> None:
    """Overwrite the cards file with ``cards``."""
    payload = [card.model_dump(mode="json", by_alias=True, exclude_none=True) for card in cards]
    _write_json(get_cards_path(), payload)


def load_settings() -> SiteSettings:
    """Return the stored site settings, or the defaults if unusable."""
    path = get_settings_path()
    try:
        return SiteSettings.model_validate(_read_json(path))
    except FileNotFoundError:
        return SiteSettings()
    except (OSError, ValueError, ValidationError) as exc:
        logger.warning("Error reading settings file %s: %s", path, exc)
        return SiteSettings()


def save_settings(site_settings: SiteSettings) -> None:
    """Overwrite the settings file."""
    _write_json(get_settings_path(), site_settings.model_dump(mode="json", by_alias=True))


def _safe_filename(filename: str) -> str:
    # Keep only the base name so a client cannot escape the upload dir.
    name = Path((filename or "").replace("\\", "/")).name.strip()
    if name in {"", ".", ".."}:
        return "upload"
    return name


def store_upload(filename: str, content: bytes) -> str:
    """Write an uploaded file and return its public reference path.

    The target name is ``<timestamp_ms>-<filename>``.  Files are opened
    with exclusive creation, so two uploads landing in the same
    millisecond with the same name get distinct names instead of
    overwriting each other.

    Returns
    -------
    str
        Path such as ``/uploads/1718000000000-cover.png``.
    """
    upload_dir = get_upload_dir()
    stem = f"{int(time.time() * 1000)}-{_safe_filename(filename)}"
    try:
        upload_dir.mkdir(parents=True, exist_ok=True)
        candidate = stem
        counter = 1
        while True:
            target = upload_dir / candidate
            try:
                with open(target, "xb") as f:
                    f.write(content)
                break
            except FileExistsError:
                base, dot, ext = stem.rpartition(".")
                candidate = f"{base}-{counter}.{ext}" if dot else f"{stem}-{counter}"
                counter += 1
    except OSError as exc:
        logger.exception("Failed to store upload %s", filename)
        raise StorageError("File upload failed") from exc
    logger.info("Stored upload %s (%d bytes)", candidate, len(content))
    return f"{settings.upload_url_prefix}/{candidate}"
