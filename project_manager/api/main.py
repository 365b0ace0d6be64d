from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from project_manager import __version__
from project_manager.api.deps import get_store
from project_manager.api.routers import clients as clients_routes
from project_manager.api.routers import packages as packages_routes
from project_manager.api.routers import projects as projects_routes
from project_manager.config import Settings, get_settings
from project_manager.db.store import Store, open_store
from project_manager.errors import (
    ProjectManagerError,
    project_manager_exception_handler,
    request_validation_exception_handler,
)
from project_manager.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """
    Build the FastAPI application.

    When no store is passed in, one is opened on startup and disposed on
    shutdown. A failure to open it aborts startup.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_store = app.state.store is None
        if owns_store:
            app.state.store = open_store(settings)
        logger.info("Project manager API ready")
        try:
            yield
        finally:
            if owns_store:
                app.state.store.dispose()
                app.state.store = None

    app = FastAPI(
        title="Project Manager API",
        version=__version__,
        description="CRUD API for portfolio projects, packages and clients.",
        docs_url="/swagger/",
        openapi_url="/swagger/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
        expose_headers=settings.cors_expose_headers,
        max_age=settings.cors_max_age,
    )

    app.add_exception_handler(ProjectManagerError, project_manager_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    # ---------------------------------------------------------------------------
    # Routers (all mounted under /api)
    # ---------------------------------------------------------------------------
    app.include_router(projects_routes.router, prefix="/api")   # /api/projects/...
    app.include_router(packages_routes.router, prefix="/api")   # /api/packages/...
    app.include_router(clients_routes.router, prefix="/api")    # /api/clients/...

    @app.get("/health", tags=["system"])
    def health_check(store: Store = Depends(get_store)):
        """
        Health check endpoint for monitoring / readiness probes.
        """
        if store.ping():
            return {"status": "ok", "database": "ok"}
        return JSONResponse(status_code=503, content={"status": "degraded", "database": "error"})

    return app
