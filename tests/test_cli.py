"""Tests for the command line interface."""

import json
from pathlib import Path

import yaml  # type: ignore[import-untyped]
from click.testing import CliRunner
from openpyxl import load_workbook  # type: ignore[import-untyped]

from conftest import write_data
from folio import cli


def test_catalog_outputs_json(data_dir: Path) -> None:
    """Ensure the grouped catalog is printed as JSON by default."""

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["catalog", "--data-dir", str(data_dir)])

    assert result.exit_code == 0
    groups = json.loads(result.output)
    assert [g["chapter"]["id"] for g in groups] == ["c1", "c2"]
    assert [a["id"] for a in groups[0]["artworks"]] == ["a3", "a2"]
    assert [a["id"] for a in groups[1]["artworks"]] == ["a1"]


def test_catalog_outputs_yaml(data_dir: Path) -> None:
    """Ensure YAML output keeps Korean text readable."""

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["catalog", "--data-dir", str(data_dir), "--format", "yaml"]
    )

    assert result.exit_code == 0
    assert "하나" in result.output
    groups = yaml.safe_load(result.output)
    assert groups[0]["chapter"]["title_kr"] == "하나"


def test_catalog_uses_environment_data_dir(data_dir: Path) -> None:
    """Ensure ``FOLIO_DATA_DIR`` is used when ``--data-dir`` is omitted."""

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["catalog"], env={"FOLIO_DATA_DIR": str(data_dir)}
    )

    assert result.exit_code == 0
    assert '"a3"' in result.output


def test_catalog_writes_to_directory(data_dir: Path, tmp_path: Path) -> None:
    """Ensure output is written when a directory is provided."""

    out_dir = tmp_path / "out"
    out_dir.mkdir()
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        ["catalog", "--data-dir", str(data_dir), "--output", str(out_dir)],
    )

    assert result.exit_code == 0
    groups = json.loads((out_dir / "catalog.json").read_text("utf-8"))
    assert len(groups) == 2


def test_catalog_writes_xlsx(data_dir: Path, tmp_path: Path) -> None:
    """Ensure XLSX output organizes data into chapter and artwork sheets."""

    out_file = tmp_path / "catalog.xlsx"
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        [
            "catalog",
            "--data-dir",
            str(data_dir),
            "--format",
            "xlsx",
            "--output",
            str(out_file),
        ],
    )

    assert result.exit_code == 0
    assert load_workbook(out_file).sheetnames == ["Chapter", "Artwork"]


def test_catalog_xlsx_requires_output(data_dir: Path) -> None:
    """Ensure XLSX output requires an output path."""

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["catalog", "--data-dir", str(data_dir), "--format", "xlsx"]
    )

    assert result.exit_code != 0
    assert "Output file is required" in result.output


def test_broken_data_is_reported(tmp_path: Path) -> None:
    """Ensure data faults surface as CLI errors instead of tracebacks."""

    data_dir = write_data(tmp_path, artworks=[{"id": "a", "chapter": "c1"}])
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["catalog", "--data-dir", str(data_dir)])

    assert result.exit_code == 1
    assert "missing keys order" in result.output


def test_render_without_selection(data_dir: Path) -> None:
    """Ensure the static page lists chapters without a lightbox."""

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["render", "--data-dir", str(data_dir)])

    assert result.exit_code == 0
    assert "Test Artist" in result.output
    assert 'id="c1"' in result.output
    assert 'id="lightbox"' not in result.output
    assert "Orphan" not in result.output
    assert result.output.index("Gamma") < result.output.index("Beta")


def test_render_with_selection_to_file(
    data_dir: Path, tmp_path: Path
) -> None:
    """Ensure ``--select`` opens the lightbox on the artwork."""

    out_file = tmp_path / "index.html"
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        [
            "render",
            "--data-dir",
            str(data_dir),
            "--select",
            "a1",
            "--output",
            str(out_file),
        ],
    )

    assert result.exit_code == 0
    html = out_file.read_text("utf-8")
    assert 'id="lightbox"' in html
    assert 'aria-label="Alpha"' in html


def test_render_unknown_selection(data_dir: Path) -> None:
    """Ensure unknown artwork ids are rejected."""

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["render", "--data-dir", str(data_dir), "--select", "zz"]
    )

    assert result.exit_code == 2
    assert "unknown artwork zz" in result.output


def test_check_reports_orphans(data_dir: Path) -> None:
    """Ensure orphaned artworks are listed and fail the command."""

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["check", "--data-dir", str(data_dir)])

    assert result.exit_code == 1
    assert "orphan: artwork a4 references unknown chapter x9" in result.output
    assert "2 chapters, 4 artworks, 1 orphaned" in result.output


def test_check_passes_and_lists_empty_chapters(tmp_path: Path) -> None:
    """Ensure empty chapters are reported without failing."""

    artworks = [{"id": "a1", "chapter": "c1", "order": 0}]
    data_dir = write_data(tmp_path, artworks=artworks)
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["check", "--data-dir", str(data_dir)])

    assert result.exit_code == 0
    assert "empty: chapter c2 has no artworks" in result.output


def test_debug_log_file(data_dir: Path, tmp_path: Path) -> None:
    """Ensure the group options configure logging before commands run."""

    log_file = tmp_path / "folio.log"
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        [
            "--debug",
            "--log-file",
            str(log_file),
            "check",
            "--data-dir",
            str(data_dir),
        ],
    )

    assert result.exit_code == 1
    assert "2 chapters" in result.output


def test_undecodable_data_is_reported(data_dir: Path) -> None:
    """Ensure invalid UTF-8 in data files becomes a CLI error."""

    (data_dir / "chapters.json").write_bytes(b"\xff\xfe")
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["check", "--data-dir", str(data_dir)])

    assert result.exit_code == 1
    assert "cannot decode" in result.output
