"""Shared fixtures for catalog, CLI and web tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

import pytest

from folio import catalog_cache
from folio.catalog import Artwork, Chapter

JSONDict = Dict[str, Any]

ARTIST: JSONDict = {
    "name": "Test Artist",
    "nameKr": "테스트 작가",
    "profileImage": "/images/profile.jpg",
    "education": [
        {"degree": "MFA", "institution": "Art School", "year": 2015},
        {"degree": "BFA", "institution": "Art School"},
    ],
    "statement": {"en": "First.\n\nSecond.", "kr": "첫째.\n\n둘째."},
    "contact": {"email": "a@example.com", "instagram": "@artist", "phone": "1"},
    "hero": {"backgroundImage": "/images/hero.jpg", "tagline": "Hello"},
}

# Records mirroring the example scenario: c1 -> [a3, a2], c2 -> [a1].
CHAPTERS: List[JSONDict] = [
    {
        "id": "c1",
        "title": "One",
        "titleKr": "하나",
        "question": "Why?",
        "questionKr": "왜?",
        "description": "First chapter",
        "descriptionKr": "첫 장",
    },
    {"id": "c2", "title": "Two"},
]

ARTWORKS: List[JSONDict] = [
    {"id": "a1", "chapter": "c2", "order": 2, "title": "Alpha"},
    {"id": "a2", "chapter": "c1", "order": 1, "title": "Beta"},
    {"id": "a3", "chapter": "c1", "order": 0, "title": "Gamma"},
    {"id": "a4", "chapter": "x9", "order": 5, "title": "Orphan"},
]


def write_data(
    directory: Path,
    artist: Any = None,
    chapters: Any = None,
    artworks: Any = None,
) -> Path:
    """Write catalog JSON files into ``directory`` and return it."""

    directory.mkdir(parents=True, exist_ok=True)
    files = {
        "artist": ARTIST if artist is None else artist,
        "chapters": CHAPTERS if chapters is None else chapters,
        "artworks": ARTWORKS if artworks is None else artworks,
    }
    for stem, data in files.items():
        (directory / f"{stem}.json").write_text(
            json.dumps(data, ensure_ascii=False), encoding="utf-8"
        )
    return directory


@pytest.fixture(autouse=True)
def _fresh_cache() -> Iterator[None]:
    """Start every test without cached catalogs or groupings."""

    catalog_cache.clear_cache()
    yield
    catalog_cache.clear_cache()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory populated with the example scenario."""

    return write_data(tmp_path / "data")


@pytest.fixture
def chapters() -> List[Chapter]:
    """Chapters ``c1`` and ``c2`` in display order."""

    return [Chapter(id="c1", title="One"), Chapter(id="c2", title="Two")]


@pytest.fixture
def artworks() -> List[Artwork]:
    """Artworks of the example scenario, including orphan ``a4``."""

    return [
        Artwork(id="a1", chapter="c2", order=2),
        Artwork(id="a2", chapter="c1", order=1),
        Artwork(id="a3", chapter="c1", order=0),
        Artwork(id="a4", chapter="x9", order=5),
    ]
