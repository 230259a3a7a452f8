"""Seed catalogue for the movies list."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from pydantic import ValidationError

from .models import Film

logger = logging.getLogger(__name__)

_TITLES = [
    ("1", "The Shawshank Redemption"),
    ("2", "The Godfather"),
    ("3", "The Godfather Part II"),
    ("4", "The Dark Knight"),
]

ALL_FILMS: Tuple[Film, ...] = tuple(
    Film(id=film_id, title=title, description=f"Description for {title}", is_favorite=False)
    for film_id, title in _TITLES
)


def load_films(seed_file: Optional[Path]) -> Tuple[Film, ...]:
    """Load a film catalogue from a YAML list, falling back to ``ALL_FILMS``.

    The file holds a list of mappings with ``id``, ``title`` and optionally
    ``description`` and ``is_favorite``. A missing, unreadable or invalid
    file is logged and the built-in catalogue is used instead.
    """
    if seed_file is None:
        return ALL_FILMS
    if not seed_file.exists():
        logger.warning(f"Film seed file {seed_file} not found, using built-in catalogue")
        return ALL_FILMS

    try:
        with open(seed_file, "r", encoding="utf-8") as f:
            raw: Any = yaml.safe_load(f) or []
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load {seed_file}, using built-in catalogue: {e}")
        return ALL_FILMS

    if not isinstance(raw, list):
        logger.warning(f"Film seed file {seed_file} must hold a list, using built-in catalogue")
        return ALL_FILMS

    films: List[Film] = []
    seen: set[str] = set()
    for record in raw:
        if isinstance(record, dict) and not all(isinstance(key, str) for key in record):
            logger.warning(f"Skipping film record with non-string keys {record!r}")
            continue
        entry: Dict[str, Any] = dict(record) if isinstance(record, dict) else {}
        entry.setdefault("description", f"Description for {entry.get('title', '')}")
        entry.setdefault("is_favorite", False)
        if "id" in entry:
            entry["id"] = str(entry["id"])
        try:
            film = Film(**entry)
        except ValidationError as e:
            logger.warning(f"Skipping invalid film record {record!r}: {e}")
            continue
        if film.id in seen:
            logger.warning(f"Skipping duplicate film id {film.id!r} in {seed_file}")
            continue
        seen.add(film.id)
        films.append(film)

    logger.info(f"Loaded {len(films)} film(s) from {seed_file}")
    return tuple(films)
