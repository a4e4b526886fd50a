"""Catalog records and the chapter grouping built from them."""

from .artist import Artist, Contact, Education, Hero, Statement
from .artwork import Artwork
from .chapter import Chapter
from .chapter_group import ChapterGroup
from .group_artworks import find_orphans, group_by_chapter
from .load_catalog import Catalog, CatalogDataError, load_catalog

__all__ = [
    "Artist",
    "Artwork",
    "Catalog",
    "CatalogDataError",
    "Chapter",
    "ChapterGroup",
    "Contact",
    "Education",
    "Hero",
    "Statement",
    "find_orphans",
    "group_by_chapter",
    "load_catalog",
]
