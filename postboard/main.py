"""Postboard GraphQL API - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from postboard.core.config import Settings, get_settings
from postboard.db.store import EntityStore
from postboard.routers.graphql import create_graphql_router
from postboard.services.seeding import seed_store

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    mode = "batched" if settings.batch_loading else "naive"
    logger.info(
        f"Server ready at http://localhost:{settings.port}{settings.graphql_path} "
        f"({mode} relation loading, {settings.resolver_delay_ms}ms resolver delay)"
    )
    yield


def create_app(settings: Settings | None = None, store: EntityStore | None = None) -> FastAPI:
    """Build the app around one store; a freshly seeded store when none is given."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Demo GraphQL API for posts and comments",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else seed_store()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(create_graphql_router(settings), prefix=settings.graphql_path)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
