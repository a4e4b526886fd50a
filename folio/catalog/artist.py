"""Artist biography and contact details."""

from __future__ import annotations

from typing import Any

from attrs import define, field

from .types import EducationTuple


@define(slots=True, frozen=True)
class Education:
    """Degree obtained by the artist."""

    degree: str
    institution: str
    year: str | None = None


@define(slots=True, frozen=True)
class Statement:
    """Artist statement in English and Korean.

    Paragraphs are separated by blank lines.
    """

    en: str = ""
    kr: str = ""

    def paragraphs(self, lang: str) -> list[str]:
        """Return the non-empty paragraphs of the statement in ``lang``."""

        text = self.kr if lang == "kr" else self.en
        return [part.strip() for part in text.split("\n\n") if part.strip()]


@define(slots=True, frozen=True)
class Contact:
    """Ways of reaching the artist."""

    email: str | None = None
    instagram: str | None = None
    website: str | None = None
    extra: dict[str, Any] = field(factory=dict, eq=False, repr=False)


@define(slots=True, frozen=True)
class Hero:
    """Full-screen banner at the top of the page."""

    background_image: str = ""
    tagline: str = ""


@define(slots=True, frozen=True)
class Artist:
    """Artist biography and contact details.

    Attributes:
        name: Artist name in Latin script.
        name_kr: Artist name in Korean.
        profile_image: Path or URL of the portrait.
        education: Degrees in display order.
        statement: Bilingual artist statement.
        contact: Contact channels.
        hero: Banner settings for the top of the page.
    """

    name: str
    name_kr: str = ""
    profile_image: str = ""
    education: EducationTuple = ()
    statement: Statement = field(factory=Statement)
    contact: Contact = field(factory=Contact)
    hero: Hero = field(factory=Hero)
