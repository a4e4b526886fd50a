"""Tests for exporting the grouped catalog to Excel."""

from __future__ import annotations

from pathlib import Path
from typing import List

from openpyxl import load_workbook  # type: ignore[import-untyped]

from folio.catalog import Artwork, Chapter, group_by_chapter
from folio.xlsx import write_workbook


def test_write_workbook_sheets_and_positions(
    tmp_path: Path, chapters: List[Chapter], artworks: List[Artwork]
) -> None:
    """Ensure chapters and artworks land in separate styled tables."""

    path = tmp_path / "catalog.xlsx"
    write_workbook(group_by_chapter(chapters, artworks), path)

    wb = load_workbook(path)
    assert wb.sheetnames == ["Chapter", "Artwork"]

    chapter_rows = list(wb["Chapter"].values)
    headers = list(chapter_rows[0])
    assert headers[0] == "id"
    pos = headers.index("position")
    listed = headers.index("artworks")
    assert [(r[0], r[pos], r[listed]) for r in chapter_rows[1:]] == [
        ("c1", 1, "a3,a2"),
        ("c2", 2, "a1"),
    ]

    artwork_ws = wb["Artwork"]
    artwork_rows = list(artwork_ws.values)
    headers = list(artwork_rows[0])
    pos = headers.index("position")
    assert [(r[0], r[pos]) for r in artwork_rows[1:]] == [
        ("a3", 1),
        ("a2", 2),
        ("a1", 1),
    ]
    assert "Artwork" in artwork_ws.tables


def test_write_workbook_serializes_extra(tmp_path: Path) -> None:
    """Ensure passthrough fields are stored as JSON text."""

    chapters = [Chapter(id="c", title="C")]
    artworks = [Artwork(id="a", chapter="c", order=0, extra={"series": "S"})]
    path = tmp_path / "catalog.xlsx"

    write_workbook(group_by_chapter(chapters, artworks), path)

    rows = list(load_workbook(path)["Artwork"].values)
    extra = rows[1][list(rows[0]).index("extra")]
    assert extra == '{"series":"S"}' or extra == '{"series": "S"}'


def test_write_workbook_without_chapters(tmp_path: Path) -> None:
    """Ensure an empty catalog still produces a valid workbook."""

    path = tmp_path / "empty.xlsx"
    write_workbook([], path)

    assert len(load_workbook(path).sheetnames) == 1


def test_write_workbook_keeps_formula_like_text(tmp_path: Path) -> None:
    """Ensure titles starting with "=" are stored as plain text."""

    chapters = [Chapter(id="c", title="=SUM(1,2)")]
    artworks = [Artwork(id="a", chapter="c", order=0, title="=HYPERLINK(1)")]
    path = tmp_path / "catalog.xlsx"

    write_workbook(group_by_chapter(chapters, artworks), path)

    wb = load_workbook(path)
    chapter_cell = wb["Chapter"]["B2"]
    assert chapter_cell.value == "=SUM(1,2)"
    assert chapter_cell.data_type == "s"
    artwork_rows = list(wb["Artwork"].values)
    title = artwork_rows[1][list(artwork_rows[0]).index("title")]
    assert title == "=HYPERLINK(1)"
