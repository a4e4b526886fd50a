"""Read-only access to the grouped catalog and artist data."""

from __future__ import annotations

from typing import Literal

from fastapi import (  # type: ignore[import-not-found]
    APIRouter,
    Depends,
    Query,
    Request,
    Response,
)
from fastapi.responses import JSONResponse  # type: ignore[import-not-found]

from folio.catalog import Catalog
from folio.catalog_cache import group_cached
from folio.json_utils import to_jsonable

from ..utils import (
    create_jinja_context,
    find_artwork_or_404,
    get_catalog,
    templates,
)

router = APIRouter()


@router.get("/catalog")
async def grouped_catalog(
    request: Request,
    format: Literal["json", "html"] = Query(default="json"),
    catalog: Catalog = Depends(get_catalog),
) -> Response:
    """Return artworks grouped by chapter.

    Args:
        request: Incoming request used for template rendering.
        format: Desired response format.
        catalog: Loaded portfolio data.

    Returns:
        Either the groups as JSON or the rendered works section.
    """

    groups = group_cached(catalog.chapters, catalog.artworks)

    # Render only the works section when HTML is requested.
    if format == "html":
        return templates.TemplateResponse(
            request,
            "works.html",
            create_jinja_context(request=request, groups=groups),
        )

    return JSONResponse(to_jsonable(groups))


@router.get("/artist")
async def artist(catalog: Catalog = Depends(get_catalog)) -> JSONResponse:
    """Return the artist biography and contact details."""

    return JSONResponse(to_jsonable(catalog.artist))


@router.get("/artworks/{artwork_id:path}")
async def artwork_detail(
    artwork_id: str, catalog: Catalog = Depends(get_catalog)
) -> JSONResponse:
    """Return a single artwork by identifier.

    Args:
        artwork_id: Identifier of the artwork.
        catalog: Loaded portfolio data.

    Returns:
        The artwork record.
    """

    return JSONResponse(to_jsonable(find_artwork_or_404(catalog, artwork_id)))
