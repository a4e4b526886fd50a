"""Render the portfolio page outside of a web request."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader, select_autoescape

from folio.catalog import Artwork, Catalog
from folio.catalog_cache import group_cached
from folio.selection import SelectionStore

# Directory containing the Jinja templates shared with the web app.
TEMPLATES_DIR = Path(__file__).resolve().parent / "web" / "templates"

_ENV = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)


def url_segment(value: str) -> str:
    """Quote ``value`` for use as a single URL path segment."""

    return quote(value, safe="")


_ENV.filters["url_segment"] = url_segment


def render_page(catalog: Catalog, store: SelectionStore | None = None) -> str:
    """Render the full page for ``catalog``.

    Args:
        catalog: Loaded portfolio data.
        store: Selection deciding whether the lightbox is shown.

    Returns:
        The page HTML.
    """

    selected: Artwork | None = store.current if store is not None else None
    template = _ENV.get_template("index.html")
    return template.render(
        request=None,
        title=catalog.artist.name,
        artist=catalog.artist,
        groups=group_cached(catalog.chapters, catalog.artworks),
        selected=selected,
    )
