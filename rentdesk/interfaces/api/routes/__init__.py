from fastapi import FastAPI

from .activity_logs import router as activity_logs_router
from .auth import router as auth_router
from .cars import router as cars_router
from .content import router as content_router
from .notifications import router as notifications_router
from .promotions import router as promotions_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(cars_router)
    app.include_router(promotions_router)
    app.include_router(content_router)
    app.include_router(notifications_router)
    app.include_router(activity_logs_router)
