"""HTTP boundary for the candidate service."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..container import AppContainer, create_container
from ..schemas import ErrorResponse
from .routes import router


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework errors (unknown routes, bad methods) as ``{"error": ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


def create_app(container: AppContainer | None = None) -> FastAPI:
    """Build the FastAPI application around a dependency container."""
    app = FastAPI(title="Talent Hub", version=__version__)
    app.state.container = container or create_container()
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.include_router(router)
    return app


__all__ = ["create_app"]
