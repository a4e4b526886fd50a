"""Open and close the lightbox for the requesting session."""

from __future__ import annotations

from fastapi import (  # type: ignore[import-not-found]
    APIRouter,
    Depends,
    HTTPException,
)
from fastapi.responses import (  # type: ignore[import-not-found]
    JSONResponse,
    RedirectResponse,
)
from pydantic import BaseModel  # type: ignore[import-not-found]

from folio.catalog import Catalog
from folio.json_utils import to_jsonable
from folio.selection import SelectionStore

from ..utils import get_catalog, get_selection

router = APIRouter()


class SelectRequest(BaseModel):
    """Request body for selecting an artwork."""

    artwork_id: str


def _selection_payload(store: SelectionStore) -> dict[str, object]:
    """Describe the state of ``store`` as JSON data."""

    return {"open": store.is_open, "artwork": to_jsonable(store.current)}


def _select_by_id(
    catalog: Catalog, store: SelectionStore, artwork_id: str
) -> None:
    """Select ``artwork_id``, closing the viewer when it is unknown."""

    artwork = catalog.find_artwork(artwork_id)
    if artwork is None:
        # Unknown ids close the viewer before failing the request.
        store.clear()
        raise HTTPException(status_code=404, detail="Artwork not found")
    store.select(artwork)


@router.get("/selection")
async def get_current_selection(
    store: SelectionStore = Depends(get_selection),
) -> JSONResponse:
    """Return the artwork shown in the lightbox, if any."""

    return JSONResponse(_selection_payload(store))


@router.post("/selection")
async def select_artwork(
    payload: SelectRequest,
    catalog: Catalog = Depends(get_catalog),
    store: SelectionStore = Depends(get_selection),
) -> JSONResponse:
    """Open the lightbox on an artwork.

    Args:
        payload: Request payload naming the artwork.
        catalog: Loaded portfolio data.
        store: Selection of the requesting session.

    Returns:
        The new selection state.
    """

    _select_by_id(catalog, store, payload.artwork_id)
    return JSONResponse(_selection_payload(store))


@router.delete("/selection")
async def clear_selection(
    store: SelectionStore = Depends(get_selection),
) -> JSONResponse:
    """Close the lightbox."""

    store.clear()
    return JSONResponse(_selection_payload(store))


@router.post("/artworks/{artwork_id:path}/view")
async def view_artwork(
    artwork_id: str,
    catalog: Catalog = Depends(get_catalog),
    store: SelectionStore = Depends(get_selection),
) -> RedirectResponse:
    """Select an artwork from a card click and show the page again."""

    _select_by_id(catalog, store, artwork_id)
    return RedirectResponse("/#lightbox", status_code=303)


@router.post("/lightbox/close")
async def close_lightbox(
    store: SelectionStore = Depends(get_selection),
) -> RedirectResponse:
    """Dismiss the lightbox and return to the works section."""

    store.clear()
    return RedirectResponse("/#works", status_code=303)
