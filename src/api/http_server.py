"""FastAPI HTTP server setup."""

from typing import Optional
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from config import settings
from store import TaskStore
from .endpoints import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    # Startup
    logger.info(f"TaskTracker started with {app.state.task_store.count()} task(s)")

    yield

    # Shutdown
    logger.info("TaskTracker shut down, in-memory tasks discarded")


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report undecodable requests as 400 rather than FastAPI's 422."""
    logger.debug(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())}
    )


def create_app(store: Optional[TaskStore] = None, seed: bool = True) -> FastAPI:
    """Build an application around a task store.

    When no store is given a fresh one is created and, unless ``seed`` is
    false, given the initial task every new service starts with.
    """
    if store is None:
        store = TaskStore()
        if seed:
            store.seed(settings.seed_task_name)

    app = FastAPI(
        title="TaskTracker",
        description="A small in-memory task tracking service",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.task_store = store

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "TaskTracker",
            "version": "1.0.0",
            "status": "running"
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "tasks": app.state.task_store.count()
        }

    return app


# Served by uvicorn
app = create_app()
