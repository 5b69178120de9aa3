from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.errors import (
    ApiError,
    api_error_handler,
    counter_not_found_handler,
    http_exception_handler,
    invalid_counter_id_handler,
)
from api.routes import get_api_router
from tally import __version__
from tally.core.config import Config
from tally.core.exceptions import CounterNotFoundError, InvalidCounterIdError
from tally.core.store import CounterStore

logger = logging.getLogger(__name__)


def create_app(config: Config | None = None, store: CounterStore | None = None) -> FastAPI:
    """Build the service around one store instance.

    The store is created here, once, and handed to every request through
    ``app.state``; tests may pass their own.
    """
    config = config or Config()
    store = store if store is not None else CounterStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("tally %s serving %d counters", __version__, len(app.state.store))
        yield
        logger.info("tally shutting down with %d counters", len(app.state.store))

    openapi_tags = [
        {"name": "health", "description": "Liveness and version metadata."},
        {"name": "counters", "description": "Create, read, increment and decrement counters."},
    ]

    app = FastAPI(
        title="tally API",
        description="Named in-memory counters",
        version=__version__,
        openapi_tags=openapi_tags,
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.store = store
    app.state.started_at = time.monotonic()

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(InvalidCounterIdError, invalid_counter_id_handler)
    app.add_exception_handler(CounterNotFoundError, counter_not_found_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    cors = config.cors
    if cors.allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors.allow_origins,
            allow_credentials=cors.allow_credentials,
            allow_methods=cors.allow_methods,
            allow_headers=cors.allow_headers,
        )

    app.include_router(get_api_router())
    return app


# Module-level app for uvicorn (e.g. `uvicorn api.main:app`). Reads defaults and
# TALLY_* env vars only; `tally api` also honours config/*.yaml.
app = create_app()
