"""Group artworks into chapter sections."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .artwork import Artwork
from .chapter import Chapter
from .chapter_group import ChapterGroup
from .types import ArtworkList, ChapterGroupList


def group_by_chapter(
    chapters: Sequence[Chapter], artworks: Iterable[Artwork]
) -> ChapterGroupList:
    """Group ``artworks`` by chapter in the order of ``chapters``.

    Every chapter yields exactly one group, even when no artwork belongs to
    it. Within a group artworks are sorted ascending by ``order``; equal
    values keep their relative input order. Artworks pointing at an unknown
    chapter are left out of every group.

    Args:
        chapters: Chapters in display order.
        artworks: Artworks in any order.

    Returns:
        A new list of ``ChapterGroup`` items, one per chapter.
    """

    # Bucket artworks by chapter id while preserving input order.
    buckets: dict[str, ArtworkList] = {chapter.id: [] for chapter in chapters}
    for artwork in artworks:
        bucket = buckets.get(artwork.chapter)
        if bucket is not None:
            bucket.append(artwork)

    # ``sorted`` is stable, so ties keep their input order.
    return [
        ChapterGroup(
            chapter=chapter,
            artworks=tuple(sorted(buckets[chapter.id], key=_order_key)),
        )
        for chapter in chapters
    ]


def find_orphans(
    chapters: Iterable[Chapter], artworks: Iterable[Artwork]
) -> ArtworkList:
    """Return artworks whose chapter matches none of ``chapters``.

    Args:
        chapters: Known chapters.
        artworks: Artworks to inspect.

    Returns:
        Orphaned artworks in input order.
    """

    known = {chapter.id for chapter in chapters}
    return [artwork for artwork in artworks if artwork.chapter not in known]


def _order_key(artwork: Artwork) -> int:
    return artwork.order
