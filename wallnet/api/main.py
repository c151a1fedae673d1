"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wallnet.errors import InvalidGeometry, UnknownElement, WallNetError
from wallnet.api.routes import router


logger = logging.getLogger(__name__)


async def wallnet_exception_handler(request: Request, exc: WallNetError) -> JSONResponse:
    """Map engine exceptions to HTTP status codes."""
    status_code = status.HTTP_400_BAD_REQUEST
    if isinstance(exc, InvalidGeometry):
        status_code = 422
    elif isinstance(exc, UnknownElement):
        status_code = status.HTTP_404_NOT_FOUND

    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={
            "error": type(exc).__name__,
            "message": exc.message,
            "details": exc.details,
        },
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Wall Network Geometry Engine",
        description="Miter corners, opening placement and pointer snapping for floor plans",
        version="0.1.0",
    )

    # CORS: allow the editor dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(WallNetError, wallnet_exception_handler)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
