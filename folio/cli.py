import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
import yaml  # type: ignore
from dotenv import load_dotenv

from folio.catalog import Catalog, CatalogDataError, find_orphans
from folio.catalog_cache import get_data_dir, group_cached, load_catalog_cached
from folio.json_utils import json_dumps, to_jsonable
from folio.render import render_page
from folio.selection import SelectionStore
from folio.xlsx import write_workbook

try:
    __version__ = version("folio")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

# Mapping from format names to file extensions.
EXTENSIONS = {"json": ".json", "yaml": ".yaml", "xlsx": ".xlsx"}

data_dir_option = click.option(
    "--data-dir",
    type=click.Path(file_okay=False, dir_okay=True, exists=True),
    default=None,
    help="Directory holding artist, chapters and artworks files.",
)


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="FOLIO_LOG_FILE",
)
@click.version_option(__version__, prog_name="folio")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


def _load(data_dir: Optional[str]) -> Catalog:
    """Load the catalog, turning data faults into CLI errors.

    Args:
        data_dir: Directory given on the command line, if any.

    Returns:
        The loaded catalog.

    Throws:
        click.ClickException: If the data files are missing or malformed.
    """

    path = Path(data_dir) if data_dir else get_data_dir()
    try:
        return load_catalog_cached(path)
    except CatalogDataError as exc:
        raise click.ClickException(str(exc)) from exc


def _output_file(output_path: Optional[str], ext: str) -> Optional[Path]:
    """Resolve ``output_path``, generating a file name for directories."""

    if not output_path:
        return None

    final_path = Path(output_path)
    if final_path.is_dir():
        final_path = final_path / f"catalog{ext}"
    return final_path


@cli.command()
@data_dir_option
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml", "xlsx"]),
    default="json",
    help="Output format.",
)
def catalog(
    data_dir: Optional[str] = None,
    output_path: Optional[str] = None,
    output_format: str = "json",
) -> None:
    """Export artworks grouped by chapter.

    Args:
        data_dir: Directory holding the catalog data files.
        output_path: Optional file or directory path for the export. If a
            directory is provided, the file is named ``catalog.<ext>``.
        output_format: Format of the exported data.
    """

    data = _load(data_dir)
    groups = group_cached(data.chapters, data.artworks)
    final_path = _output_file(output_path, EXTENSIONS[output_format])

    if output_format == "xlsx":
        if final_path is None:
            raise click.UsageError("Output file is required for xlsx format.")
        write_workbook(groups, final_path)
        return

    if output_format == "json":
        content = json_dumps(groups)
    else:
        content = yaml.safe_dump(
            to_jsonable(groups), allow_unicode=True, sort_keys=False
        )

    if final_path:
        final_path.write_text(content, encoding="utf-8")
    else:
        click.echo(content)


@cli.command()
@data_dir_option
@click.option(
    "--select",
    "artwork_id",
    default=None,
    help="Render the page with the lightbox open on ARTWORK_ID.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=False),
    default=None,
    help="Write the page to FILE instead of the console.",
)
def render(
    data_dir: Optional[str] = None,
    artwork_id: Optional[str] = None,
    output_path: Optional[str] = None,
) -> None:
    """Render the portfolio page as static HTML.

    Args:
        data_dir: Directory holding the catalog data files.
        artwork_id: Artwork to show in the lightbox.
        output_path: Optional destination file.
    """

    data = _load(data_dir)
    store = SelectionStore(data.artworks)

    if artwork_id:
        artwork = data.find_artwork(artwork_id)
        if artwork is None:
            raise click.BadParameter(
                f"unknown artwork {artwork_id}", param_hint="--select"
            )
        store.select(artwork)

    html = render_page(data, store)
    if output_path:
        Path(output_path).write_text(html, encoding="utf-8")
    else:
        click.echo(html)


@cli.command()
@data_dir_option
def check(data_dir: Optional[str] = None) -> None:
    """Report artworks hidden from the page and chapters without works.

    Args:
        data_dir: Directory holding the catalog data files.
    """

    data = _load(data_dir)
    orphans = find_orphans(data.chapters, data.artworks)
    groups = group_cached(data.chapters, data.artworks)

    for artwork in orphans:
        click.echo(
            f"orphan: artwork {artwork.id} references unknown chapter "
            f"{artwork.chapter}"
        )
    for group in groups:
        if not group.artworks:
            click.echo(f"empty: chapter {group.chapter.id} has no artworks")

    click.echo(
        f"{len(data.chapters)} chapters, {len(data.artworks)} artworks, "
        f"{len(orphans)} orphaned"
    )
    if orphans:
        sys.exit(1)
