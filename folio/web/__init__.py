"""FastAPI application serving the portfolio page."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response  # type: ignore[import-not-found]

from .routes import catalog, home, selection
from .utils import SESSION_COOKIE, new_session_id

app = FastAPI(title="folio")


@app.middleware("http")
async def session_cookie(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Attach a session id to every request and persist it in a cookie."""

    # Reuse the browser's session or start a new one.
    session_id = request.cookies.get(SESSION_COOKIE)
    is_new = not session_id
    request.state.session_id = session_id or new_session_id()

    response = await call_next(request)

    if is_new:
        response.set_cookie(
            SESSION_COOKIE,
            request.state.session_id,
            httponly=True,
            samesite="lax",
        )
    return response


for module in (home, catalog, selection):
    app.include_router(module.router)

__all__ = ["app"]
