import logging
from contextlib import asynccontextmanager

import logfire
import pydantic
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from newsroom.application.api.v1.errors import map_newsroom_error
from newsroom.application.api.v1.routes import (
    advertisements,
    articles,
    auth,
    categories,
    comments,
    health,
    newspapers,
    users,
)
from newsroom.application.di import create_container
from newsroom.config import Config, configure_logging
from newsroom.domain.auth.service.bootstrap import BootstrapService
from newsroom.domain.shared.authorization.startup import validate_all_handlers
from newsroom.domain.shared.error import NewsroomError
from newsroom.infrastructure.persistence.database import create_schema

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

V1_ROUTERS = (
    health.router,
    auth.router,
    users.router,
    categories.router,
    newspapers.router,
    articles.router,
    comments.router,
    advertisements.router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container
    config = await container.get(Config)

    if config.database.create_schema:
        await create_schema(await container.get(AsyncEngine))

    # The one path that can create a SUPER_ADMIN
    async with container() as request_scope:
        bootstrap = await request_scope.get(BootstrapService)
        await bootstrap.ensure_super_admin()

    try:
        yield
    finally:
        await container.close()


async def _newsroom_error(request: Request, exc: NewsroomError) -> JSONResponse:
    http_exc = map_newsroom_error(exc)
    return JSONResponse(
        status_code=http_exc.status_code,
        content=http_exc.detail,
        headers=http_exc.headers,
    )


async def _model_validation_error(request: Request, exc: pydantic.ValidationError) -> JSONResponse:
    # Raised when a handler builds a command or entity from already-parsed input
    return JSONResponse(
        status_code=422,
        content={
            "code": "VALIDATION_ERROR",
            "message": "Invalid value",
            "errors": exc.errors(include_url=False, include_context=False, include_input=False),
        },
    )


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(config: Config | None = None) -> FastAPI:
    """Build the API: logging, handler gate validation, DI, routes and error mapping."""
    config = config or Config()  # type: ignore[call-arg]

    configure_logging(config.logging)
    logger.info("Starting %s v%s", config.server.name, config.server.version)

    # Refuse to start if any handler lacks an __auth__ gate
    validate_all_handlers()

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )
    logfire.instrument_fastapi(app_instance)

    setup_dishka(create_container(config), app_instance)

    for router in V1_ROUTERS:
        app_instance.include_router(router, prefix=API_PREFIX)

    app_instance.add_exception_handler(NewsroomError, _newsroom_error)
    app_instance.add_exception_handler(pydantic.ValidationError, _model_validation_error)
    app_instance.add_exception_handler(Exception, _unhandled_error)

    return app_instance
