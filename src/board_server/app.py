import logging
import traceback
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from board_server.database import create_all_tables, create_session_maker
from board_server.errors import BoardError
from board_server.router import router
from board_server.settings import Settings
from board_server.stores.base import ThreadStore
from board_server.stores.fallback import FallbackThreadStore
from board_server.stores.memory import MemoryThreadStore
from board_server.stores.sql import SQLThreadStore

logger = logging.getLogger("board_server")


async def build_store(app: FastAPI, settings: Settings) -> ThreadStore:
    if not settings.use_durable_store:
        logger.info("Durable store disabled, serving from the in-memory mirror only")
        return FallbackThreadStore(None, MemoryThreadStore())

    app.state.engine, app.state.db_session_maker = create_session_maker(settings.database_url)
    if settings.create_tables:
        try:
            await create_all_tables(app.state.engine)
        except Exception as e:
            # Keep the durable store wired in; every call falls back until it recovers.
            logger.warning(f"Failed to create durable schema at {settings.database_url}: {e}")
    logger.info(f"Durable store: {settings.database_url}")
    return FallbackThreadStore(SQLThreadStore(app.state.db_session_maker), MemoryThreadStore())


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    settings: Settings = app.state.settings
    if app.state.store is None:
        app.state.store = await build_store(app, settings)

    yield

    engine = getattr(app.state, "engine", None)
    if engine is not None:
        await engine.dispose()
    logger.info("Application shutdown completed")


def create_app(settings: Settings | None = None, store: ThreadStore | None = None) -> FastAPI:
    app = FastAPI(
        title="Board",
        description="Anonymous message board API",
        lifespan=lifespan,
    )
    app.state.settings = settings or Settings()
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(BoardError)
    async def board_error_handler(request: Request, e: BoardError) -> PlainTextResponse:
        # Domain outcomes are signalled in the body with a 200 status.
        logger.info(f"{request.method} {request.url.path}: {e.message}")
        return PlainTextResponse(e.message, status_code=200)

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, e: ValidationError) -> JSONResponse:
        logger.error(f"Validation error on {request.method} {request.url}: {e}")
        return JSONResponse(
            status_code=422,
            content={"detail": "Validation error", "errors": e.errors(include_url=False, include_context=False)},
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, e: ValueError) -> JSONResponse:
        logger.error(f"ValueError on {request.method} {request.url}: {e}")
        return JSONResponse(
            status_code=400,
            content={"detail": str(e)},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, e: Exception) -> PlainTextResponse:
        logger.error(f"Unhandled exception on {request.method} {request.url}:")
        logger.error(traceback.format_exc())
        return PlainTextResponse("Internal server error", status_code=500)

    app.include_router(router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
