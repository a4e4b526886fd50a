"""Chapter paired with its ordered artworks."""

from __future__ import annotations

from attrs import define

from .chapter import Chapter
from .types import ArtworkTuple


@define(slots=True, frozen=True)
class ChapterGroup:
    """Chapter paired with its ordered artworks.

    Attributes:
        chapter: The chapter this group renders.
        artworks: Artworks of the chapter sorted by ``order``.
    """

    chapter: Chapter
    artworks: ArtworkTuple = ()
