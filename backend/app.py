from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Final, Any

# Third-party
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

# Local application imports
from api.dependencies import get_container
from api.food import router as food_router
from api.nutrition import router as nutrition_router
from graphql_api.context import GraphQLContext, create_context
from graphql_api.schema import create_schema
from infrastructure.config import get_cors_origins, get_openrouter_api_key, mask_secret
from infrastructure.container import AppContainer, build_container

load_dotenv()

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

# Version from env (Docker build ARG -> ENV APP_VERSION)
APP_VERSION = os.getenv("APP_VERSION", "0.0.0-dev")

schema = create_schema()

__all__: list[str] = ["app", "lifespan", "schema"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifecycle: build the container, open sessions, clean up.

    1. STARTUP: build repositories/provider from env, enter provider session,
       publish the container on ``app.state.container``
    2. RUNTIME: serve requests
    3. SHUTDOWN: close provider session and MongoDB client
    """
    logger = _logging.getLogger("startup")

    api_key = get_openrouter_api_key()
    logger.info(
        "startup.config",
        extra={
            "openrouter_key_present": bool(api_key),
            "openrouter_key_masked": mask_secret(api_key),
            "version": APP_VERSION,
        },
    )

    logger.info("lifespan.startup", extra={"phase": "container_init"})
    container = build_container()
    await container.startup()
    app.state.container = container

    logger.info(
        "lifespan.ready",
        extra={
            "status": "serving",
            "provider": type(container.analysis_provider).__name__,
            "repository": type(container.record_repository).__name__,
        },
    )
    try:
        yield
    finally:
        logger.info("lifespan.shutdown", extra={"status": "cleanup"})
        await container.shutdown()
        app.state.container = None


app = FastAPI(
    title="Nutrition Tracker Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


# REST API
app.include_router(nutrition_router)
app.include_router(food_router)


# GraphQL
async def get_graphql_context(
    request: Request, container: AppContainer = Depends(get_container)
) -> GraphQLContext:
    return create_context(container=container, request=request)


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
