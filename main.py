import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from rentdesk.config import get_settings
from rentdesk.infrastructure.database import engine, initialize_database
from rentdesk.infrastructure.notifications import RealtimeBroadcaster, RoomConnectionManager
from rentdesk.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on startup and release pooled connections on shutdown."""

    initialize_database()
    yield
    engine.dispose()


async def _handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error while handling %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    app = FastAPI(title="rentdesk", lifespan=lifespan)

    # Browser access for the admin console.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    connections = RoomConnectionManager()
    app.state.connections = connections
    app.state.broadcaster = RealtimeBroadcaster(connections)
    app.add_exception_handler(SQLAlchemyError, _handle_database_error)

    register_routes(app)
    return app


app = create_app()
