"""Cache helpers for the loaded catalog and its chapter grouping."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Dict, Optional, Tuple

from folio.catalog.artwork import Artwork
from folio.catalog.chapter import Chapter
from folio.catalog.chapter_group import ChapterGroup
from folio.catalog.group_artworks import group_by_chapter
from folio.catalog.load_catalog import Catalog, load_catalog

# Types for cache storage.
GroupTuple = Tuple[ChapterGroup, ...]
GroupEntry = Tuple[Sequence[Chapter], Sequence[Artwork], GroupTuple]
CatalogStore = Dict[Path, Catalog]

# Sample dataset bundled with the package.
DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"

# The dataset never changes at runtime, so entries do not expire.
_CATALOGS: CatalogStore = {}

# Last grouping computed by ``group_cached`` together with its inputs.
_GROUPS: Optional[GroupEntry] = None


def get_data_dir() -> Path:
    """Return the catalog directory from ``FOLIO_DATA_DIR``.

    Returns:
        The configured directory or the bundled sample data.
    """

    # Read the environment on every call so tests can switch directories.
    return Path(os.environ.get("FOLIO_DATA_DIR", DEFAULT_DATA_DIR))


def load_catalog_cached(data_dir: Path) -> Catalog:
    """Return the catalog stored in ``data_dir``, loading it once.

    Args:
        data_dir: Directory holding the catalog data files.

    Returns:
        The shared ``Catalog`` instance for the directory.
    """

    key = data_dir.resolve()
    cached = _CATALOGS.get(key)
    if cached is not None:
        return cached

    catalog = load_catalog(key)
    _CATALOGS[key] = catalog
    return catalog


def group_cached(
    chapters: Sequence[Chapter], artworks: Sequence[Artwork]
) -> GroupTuple:
    """Return ``group_by_chapter`` results memoized on input identity.

    The previous result is reused only when both arguments are the very same
    objects as in the previous call; any other input is regrouped.

    Args:
        chapters: Chapters in display order.
        artworks: Artworks in any order.

    Returns:
        Immutable tuple of chapter groups.
    """

    global _GROUPS

    if (
        _GROUPS is not None
        and _GROUPS[0] is chapters
        and _GROUPS[1] is artworks
    ):
        return _GROUPS[2]

    groups = tuple(group_by_chapter(chapters, artworks))
    _GROUPS = (chapters, artworks, groups)
    return groups


def clear_cache() -> None:
    """Drop every cached catalog and grouping."""

    global _GROUPS

    _CATALOGS.clear()
    _GROUPS = None
