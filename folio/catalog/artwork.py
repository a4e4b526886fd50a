"""Single catalog entry belonging to one chapter."""

from __future__ import annotations

from typing import Any

from attrs import define, field


@define(slots=True, frozen=True)
class Artwork:
    """Single catalog entry belonging to one chapter.

    Attributes:
        id: Unique identifier of the artwork.
        chapter: Identifier of the chapter the artwork belongs to.
        order: Position of the artwork inside its chapter.
        title: Display title.
        title_kr: Korean display title.
        image: Path or URL of the artwork image.
        year: Year of creation as written in the source data.
        medium: Materials used for the work.
        dimensions: Physical size of the work.
        extra: Additional source fields passed through untouched. They take
            no part in equality or hashing.
    """

    id: str
    chapter: str
    order: int
    title: str = ""
    title_kr: str = ""
    image: str = ""
    year: str = ""
    medium: str = ""
    dimensions: str = ""
    extra: dict[str, Any] = field(factory=dict, eq=False, repr=False)
