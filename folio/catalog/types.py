"""Common type aliases for catalog structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .artist import Education  # noqa: F401
    from .artwork import Artwork  # noqa: F401
    from .chapter import Chapter  # noqa: F401
    from .chapter_group import ChapterGroup  # noqa: F401


JSONDict = dict[str, Any]
RecordList = list[JSONDict]
ArtworkList = list["Artwork"]
ChapterGroupList = list["ChapterGroup"]
ArtworkTuple = tuple["Artwork", ...]
ChapterTuple = tuple["Chapter", ...]
EducationTuple = tuple["Education", ...]
