"""Utilities for exporting the grouped catalog to Excel workbooks."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Dict, List

from openpyxl import Workbook  # type: ignore[import-untyped]
from openpyxl.styles import Alignment  # type: ignore[import-untyped]
from openpyxl.utils import get_column_letter  # type: ignore[import-untyped]
from openpyxl.worksheet.table import (  # type: ignore[import-untyped]
    Table,
    TableStyleInfo,
)

from folio.catalog.chapter_group import ChapterGroup
from folio.json_utils import json_dumps, to_jsonable

Sheets = Dict[str, List[Dict[str, Any]]]

# Text longer than this is wrapped and gets a wide column.
LONG_TEXT = 50


def _flatten(groups: Iterable[ChapterGroup]) -> Sheets:
    """Flatten chapter groups into tabular sheet data.

    Args:
        groups: Chapter groups in display order.

    Returns:
        Mapping of sheet names to row dictionaries.
    """

    sheets: Sheets = {"Chapter": [], "Artwork": []}

    for chapter_pos, group in enumerate(groups, start=1):
        chapter_row = to_jsonable(group.chapter)
        chapter_row["position"] = chapter_pos
        chapter_row["artworks"] = ",".join(a.id for a in group.artworks)
        sheets["Chapter"].append(chapter_row)

        # Record the display position of each artwork inside its chapter.
        for artwork_pos, artwork in enumerate(group.artworks, start=1):
            artwork_row = to_jsonable(artwork)
            artwork_row["position"] = artwork_pos
            sheets["Artwork"].append(artwork_row)

    # Drop sheets for which no data was recorded.
    return {name: rows for name, rows in sheets.items() if rows}


def write_workbook(groups: Iterable[ChapterGroup], path: Path) -> None:
    """Write the grouped catalog into an Excel workbook.

    Args:
        groups: Chapter groups in display order.
        path: Destination file path for the workbook.
    """

    data = _flatten(groups)

    workbook = Workbook()

    # Remove the default sheet unless the workbook would end up empty.
    default_sheet = workbook.active
    if default_sheet is not None and data:
        workbook.remove(default_sheet)

    for sheet_name, rows in data.items():
        ws = workbook.create_sheet(title=sheet_name)

        headers = list(rows[0].keys())
        ws.append(headers)

        wrap_columns: set[int] = set()
        mapping_columns: set[int] = set()

        for row in rows:
            values: List[Any] = []

            for idx, header in enumerate(headers):
                cell_value = row.get(header)

                # Serialize passthrough fields such as ``extra``.
                if isinstance(cell_value, (list, dict)):
                    mapping_columns.add(idx)
                    cell_value = json_dumps(cell_value)

                if isinstance(cell_value, str) and len(cell_value) > LONG_TEXT:
                    wrap_columns.add(idx)

                values.append(cell_value)

            ws.append(values)

            # Keep text such as "=title" from being read as a formula.
            for cell in ws[ws.max_row]:
                if isinstance(cell.value, str) and cell.value.startswith("="):
                    cell.data_type = "s"

        # Wrap long text and serialized mappings.
        for col_idx in wrap_columns | mapping_columns:
            for col_cells in ws.iter_cols(
                min_col=col_idx + 1,
                max_col=col_idx + 1,
                min_row=1,
                max_row=ws.max_row,
            ):
                for cell in col_cells:
                    cell.alignment = Alignment(wrapText=True)

        for idx in range(len(headers)):
            col_letter = get_column_letter(idx + 1)
            if idx in mapping_columns:
                ws.column_dimensions[col_letter].width = 50
            elif idx in wrap_columns:
                ws.column_dimensions[col_letter].width = 100
            else:
                ws.column_dimensions[col_letter].width = 12

        end_column = get_column_letter(len(headers))
        end_row = len(rows) + 1
        table = Table(displayName=sheet_name, ref=f"A1:{end_column}{end_row}")

        # Apply a simple table style with row stripes for readability.
        style = TableStyleInfo(name="TableStyleMedium9", showRowStripes=True)
        table.tableStyleInfo = style

        ws.add_table(table)

    workbook.save(path)
