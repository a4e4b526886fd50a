"""Thematic chapter grouping artworks."""

from __future__ import annotations

from attrs import define


@define(slots=True, frozen=True)
class Chapter:
    """Thematic chapter grouping artworks.

    Attributes:
        id: Unique identifier referenced by ``Artwork.chapter``.
        title: English chapter title.
        title_kr: Korean chapter title.
        question: Guiding question shown under the title.
        question_kr: Korean version of the guiding question.
        description: English chapter description.
        description_kr: Korean chapter description.
    """

    id: str
    title: str
    title_kr: str = ""
    question: str = ""
    question_kr: str = ""
    description: str = ""
    description_kr: str = ""
