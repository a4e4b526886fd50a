"""Load the static portfolio dataset from a data directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from attrs import define

from folio.json_utils import json_loads

from .artist import Artist, Contact, Education, Hero, Statement
from .artwork import Artwork
from .chapter import Chapter
from .group_artworks import find_orphans
from .types import ArtworkTuple, ChapterTuple, JSONDict, RecordList

logger = logging.getLogger(__name__)

# Extensions tried for every data file, in order of preference.
DATA_SUFFIXES = (".json", ".yaml", ".yml")

# Source keys mapped onto ``Artwork`` fields; the rest go to ``extra``.
_ARTWORK_FIELDS = {
    "id": "id",
    "chapter": "chapter",
    "order": "order",
    "title": "title",
    "titleKr": "title_kr",
    "image": "image",
    "year": "year",
    "medium": "medium",
    "dimensions": "dimensions",
}

_CHAPTER_FIELDS = {
    "id": "id",
    "title": "title",
    "titleKr": "title_kr",
    "question": "question",
    "questionKr": "question_kr",
    "description": "description",
    "descriptionKr": "description_kr",
}

_CONTACT_FIELDS = ("email", "instagram", "website")


class CatalogDataError(ValueError):
    """Raised when the static dataset is missing or malformed."""


@define(slots=True, frozen=True)
class Catalog:
    """Fully loaded portfolio dataset.

    Attributes:
        artist: Biography shown in the about and contact sections.
        chapters: Chapters in display order.
        artworks: Artworks in source order.
    """

    artist: Artist
    chapters: ChapterTuple
    artworks: ArtworkTuple

    def find_artwork(self, artwork_id: str) -> Artwork | None:
        """Return the artwork with ``artwork_id`` or ``None``."""

        return next((a for a in self.artworks if a.id == artwork_id), None)


def load_catalog(data_dir: Path) -> Catalog:
    """Read artist, chapter and artwork records from ``data_dir``.

    Args:
        data_dir: Directory holding ``artist``, ``chapters`` and ``artworks``
            files in JSON or YAML format.

    Returns:
        The immutable ``Catalog``.

    Throws:
        CatalogDataError: If a file is missing or a record is malformed.
    """

    artist = parse_artist(_read_data_file(data_dir, "artist"))
    chapters = tuple(
        parse_chapter(record)
        for record in _as_records(_read_data_file(data_dir, "chapters"))
    )
    artworks = tuple(
        parse_artwork(record)
        for record in _as_records(_read_data_file(data_dir, "artworks"))
    )

    _check_unique("chapter", [c.id for c in chapters])
    _check_unique("artwork", [a.id for a in artworks])

    logger.debug(
        f"Loaded {len(chapters)} chapters and {len(artworks)} artworks "
        f"from {data_dir}"
    )

    # Orphans are kept in the catalog; grouping leaves them out.
    orphans = find_orphans(chapters, artworks)
    if orphans:
        orphan_ids = ", ".join(a.id for a in orphans)
        logger.debug(
            f"{len(orphans)} artworks reference unknown chapters: {orphan_ids}"
        )

    return Catalog(artist=artist, chapters=chapters, artworks=artworks)


def parse_chapter(record: JSONDict) -> Chapter:
    """Build a ``Chapter`` from a camelCase source record."""

    _require(record, "chapter", ("id", "title"))
    values = {
        attr: _text(record[key])
        for key, attr in _CHAPTER_FIELDS.items()
        if record.get(key) is not None
    }
    return Chapter(**values)


def parse_artwork(record: JSONDict) -> Artwork:
    """Build an ``Artwork`` from a camelCase source record.

    Unknown keys are kept in ``Artwork.extra``.
    """

    _require(record, "artwork", ("id", "chapter", "order"))

    values: dict[str, Any] = {}
    extra: JSONDict = {}
    for key, value in record.items():
        attr = _ARTWORK_FIELDS.get(key)
        if attr is None:
            extra[key] = value
        elif value is not None:
            values[attr] = _text(value)

    values["order"] = _as_order(record)
    return Artwork(extra=extra, **values)


def parse_artist(record: JSONDict) -> Artist:
    """Build an ``Artist`` from a camelCase source record."""

    record = _as_mapping(record, "artist")
    _require(record, "artist", ("name",))

    education = tuple(
        Education(
            degree=_optional_text(item, "degree"),
            institution=_optional_text(item, "institution"),
            year=_text(item["year"]) if item.get("year") else None,
        )
        for item in _as_records(record.get("education") or [])
    )

    statement_data = _as_mapping(record.get("statement"), "artist statement")
    statement = Statement(
        en=_optional_text(statement_data, "en"),
        kr=_optional_text(statement_data, "kr"),
    )

    contact_data = dict(_as_mapping(record.get("contact"), "artist contact"))
    contact = Contact(
        **{key: contact_data.pop(key, None) for key in _CONTACT_FIELDS},
        extra=contact_data,
    )

    hero_data = _as_mapping(record.get("hero"), "artist hero")
    hero = Hero(
        background_image=_optional_text(hero_data, "backgroundImage"),
        tagline=_optional_text(hero_data, "tagline"),
    )

    return Artist(
        name=_text(record["name"]),
        name_kr=_optional_text(record, "nameKr"),
        profile_image=_optional_text(record, "profileImage"),
        education=education,
        statement=statement,
        contact=contact,
        hero=hero,
    )


def find_data_file(data_dir: Path, stem: str) -> Path | None:
    """Return the first existing ``stem`` file in ``data_dir``."""

    for suffix in DATA_SUFFIXES:
        path = data_dir / f"{stem}{suffix}"
        if path.is_file():
            return path
    return None


def _read_data_file(data_dir: Path, stem: str) -> Any:
    """Decode the ``stem`` data file in ``data_dir``."""

    path = find_data_file(data_dir, stem)
    if path is None:
        raise CatalogDataError(f"{data_dir}: no {stem} data file found")

    # Decode JSON or YAML depending on file extension.
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix == ".json":
            return json_loads(text)
        return yaml.safe_load(text)
    except (UnicodeDecodeError, ValueError, yaml.YAMLError) as exc:
        raise CatalogDataError(f"{path}: cannot decode: {exc}") from exc


def _as_records(data: Any) -> RecordList:
    """Ensure ``data`` is a list of mappings."""

    if not isinstance(data, list) or not all(
        isinstance(item, dict) for item in data
    ):
        raise CatalogDataError("expected a list of records")
    return data


def _require(record: JSONDict, kind: str, keys: tuple[str, ...]) -> None:
    """Raise when ``record`` lacks any of ``keys``."""

    missing = [key for key in keys if record.get(key) in (None, "")]
    if missing:
        ident = record.get("id", "?")
        raise CatalogDataError(
            f"{kind} {ident}: missing keys {', '.join(missing)}"
        )


def _as_order(record: JSONDict) -> int:
    """Return the integer ``order`` of an artwork record."""

    value = record["order"]
    if isinstance(value, bool) or (
        isinstance(value, float) and not value.is_integer()
    ):
        raise CatalogDataError(f"artwork {record['id']}: invalid order")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise CatalogDataError(
            f"artwork {record['id']}: invalid order {value!r}"
        ) from exc


def _check_unique(kind: str, ids: list[str]) -> None:
    """Raise when ``ids`` contains duplicates."""

    seen: set[str] = set()
    for ident in ids:
        if ident in seen:
            raise CatalogDataError(f"duplicate {kind} id: {ident}")
        seen.add(ident)


def _text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _as_mapping(data: Any, kind: str) -> JSONDict:
    """Ensure ``data`` is a mapping; missing values become empty ones."""

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CatalogDataError(f"{kind} data must be a mapping")
    return data


def _optional_text(record: JSONDict, key: str) -> str:
    """Return ``record[key]`` as text, treating missing and null as empty."""

    value = record.get(key)
    return "" if value is None else _text(value)
