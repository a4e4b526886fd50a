"""Portfolio page with the optional lightbox overlay."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request  # type: ignore[import-not-found]
from fastapi.responses import HTMLResponse  # type: ignore[import-not-found]

from folio.catalog import Catalog
from folio.catalog_cache import group_cached
from folio.selection import SelectionStore

from ..utils import create_jinja_context, get_catalog, get_selection, templates

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    catalog: Catalog = Depends(get_catalog),
    store: SelectionStore = Depends(get_selection),
) -> HTMLResponse:
    """Render the full portfolio page.

    Args:
        request: Incoming request used for template rendering.
        catalog: Loaded portfolio data.
        store: Selection of the requesting session.

    Returns:
        The page, including the lightbox when an artwork is selected.
    """

    return templates.TemplateResponse(
        request,
        "index.html",
        create_jinja_context(
            request=request,
            artist=catalog.artist,
            groups=group_cached(catalog.chapters, catalog.artworks),
            selected=store.current,
            title=catalog.artist.name,
        ),
    )
