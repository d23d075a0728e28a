"""EventGraph API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EventGraphError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Each app owns one GraphOperations on app.state.graph; the dataset lives
      and dies with the process

Design Decisions:
    - create_app() factory: tests build an isolated app + dataset per case
    - Seed file loaded in lifespan, after logging is configured
    - Sync route handlers run on FastAPI's thread pool; GraphState's guard keeps
      each operation atomic
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventgraph.api.error_handlers import register_error_handlers
from eventgraph.api.routes import events, health, locations, participants, users
from eventgraph.config import Settings, get_settings
from eventgraph.core.operations import GraphOperations
from eventgraph.infrastructure.observability import setup_logging
from eventgraph.infrastructure.seed_data import load_seed_data

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    if settings.seed_data_path:
        load_seed_data(app.state.graph.state, settings.seed_data_path)
    logger.info("EventGraph API started")
    yield
    logger.info(
        "EventGraph API shutting down, discarding in-memory dataset",
        extra={"count": sum(app.state.graph.state.counts.values())},
    )


def create_app(
    settings: Settings | None = None, graph: GraphOperations | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="EventGraph API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.graph = graph or GraphOperations()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(events.router)
    app.include_router(locations.router)
    app.include_router(participants.router)

    register_error_handlers(app)
    return app


app = create_app()
