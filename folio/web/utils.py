"""Utility helpers for web routes."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from fastapi import (  # type: ignore[import-not-found]
    Depends,
    HTTPException,
    Request,
)
from fastapi.templating import (  # type: ignore[import-not-found]
    Jinja2Templates,
)

from folio.catalog import Artwork, Catalog, CatalogDataError
from folio.catalog_cache import get_data_dir, load_catalog_cached
from folio.render import TEMPLATES_DIR, url_segment
from folio.selection import SelectionRegistry, SelectionStore

JSONDict = dict[str, Any]

# Cookie identifying the browser session owning a selection.
SESSION_COOKIE = "folio_session"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["url_segment"] = url_segment


def get_catalog() -> Catalog:
    """Return the loaded catalog, failing the request on broken data.

    Returns:
        The cached ``Catalog``.
    """

    try:
        return load_catalog_cached(get_data_dir())
    except CatalogDataError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


def new_session_id() -> str:
    """Return a fresh session identifier."""

    return uuid4().hex


def get_registry(request: Request, catalog: Catalog) -> SelectionRegistry:
    """Return the selection registry stored on the application.

    A new registry replaces the stored one when the catalog changed, so
    stores only ever accept artworks of the catalog being served.

    Args:
        request: Incoming request giving access to ``app.state``.
        catalog: Catalog the selections refer to.

    Returns:
        The registry shared by all sessions.
    """

    state = request.app.state
    registry = getattr(state, "selections", None)
    owner = getattr(state, "selections_catalog", None)
    if registry is None or owner is not catalog:
        registry = SelectionRegistry(catalog.artworks)
        state.selections = registry
        state.selections_catalog = catalog
    return registry


def get_selection(
    request: Request, catalog: Catalog = Depends(get_catalog)
) -> SelectionStore:
    """Return the selection store of the requesting session.

    Args:
        request: Incoming request carrying the session id.
        catalog: Catalog the selection refers to.

    Returns:
        The session's ``SelectionStore``.
    """

    session_id = getattr(request.state, "session_id", None)
    if session_id is None:
        session_id = request.cookies.get(SESSION_COOKIE) or new_session_id()
    return get_registry(request, catalog).get(session_id)


def find_artwork_or_404(catalog: Catalog, artwork_id: str) -> Artwork:
    """Return the artwork with ``artwork_id`` or raise a 404 error."""

    artwork = catalog.find_artwork(artwork_id)
    if artwork is None:
        raise HTTPException(status_code=404, detail="Artwork not found")
    return artwork


def create_jinja_context(request: Request, **kwargs: Any) -> JSONDict:
    """Build the template context shared by all pages.

    Args:
        request: Incoming request used for template rendering.
        **kwargs: Page specific values.

    Returns:
        Context mapping for ``TemplateResponse``.
    """

    context: JSONDict = {"request": request, "title": "Portfolio"}
    context.update(kwargs)
    return context
