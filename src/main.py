"""FastAPI application factory and ASGI entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from api.exception_handlers import setup_exception_handlers
from api.middleware.request_context import RequestContextMiddleware
from api.routes.health import API_VERSION
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from core.config import settings
from core.logging import setup_logging
from infrastructure.database.session import engine

setup_logging()

logger = structlog.get_logger()

DESCRIPTION = """
## Social content service

Profiles with a directed follow graph, posts with paginated retrieval by
creator, category, mention or share, and comments attached to posts.

### Authentication
Every endpoint except `/health` expects `Authorization: Bearer <token>`.
Identity (profile id, post creator, comment author) is always taken from
the token, never from the request body.

### Pagination
`page` is a 0-based index and `size` must be positive. Each page carries
`endpage`, the index of the last page.
"""

OPENAPI_TAGS = [
    {"name": "health", "description": "Liveness and readiness checks"},
    {"name": "profiles", "description": "Profiles and the follow graph"},
    {"name": "posts", "description": "Posts and paginated listings"},
    {"name": "comments", "description": "Comments attached to posts"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("app_started", environment=settings.app_env, version=API_VERSION)
    yield
    await engine.dispose()
    logger.info("app_stopped")


def _add_middleware(app: FastAPI) -> None:
    # Last added runs outermost: CORS answers preflights before anything else
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description=DESCRIPTION,
        version=API_VERSION,
        debug=settings.debug,
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        openapi_tags=OPENAPI_TAGS,
    )

    _add_middleware(app)
    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
