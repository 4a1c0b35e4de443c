"""FastAPI application wiring for the save viewer."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rimsave import __version__
from rimsave.api import routes
from rimsave.api.runtime import ApiState, build_state
from rimsave.config import get_settings
from rimsave.domain.errors import SaveFormatError

logger = logging.getLogger(__name__)


async def save_format_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report a rejected save document as an unprocessable request."""

    logger.info("rejected save document from %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def create_app(*, state_factory: Callable[[], ApiState] = build_state) -> FastAPI:
    """Build the save viewer app.

    ``state_factory`` runs once at startup; every built game lives in the
    state it returns until evicted or deleted.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        state = state_factory()
        logger.info("api ready with %d preloaded saves", len(state.saves.list_saves()))
        app.state.api_state = state
        yield

    app = FastAPI(title="Rimsave API", version=__version__, lifespan=lifespan)
    app.add_exception_handler(SaveFormatError, save_format_error_handler)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )
    app.include_router(routes.router)
    return app


app = create_app()
