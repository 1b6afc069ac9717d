"""
FastAPI application setup with dependency injection.

Serves the Map, Updates and About views of the map client as JSON view
models and dispatches the map controls' commands to the coordinator.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging
import time
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from h2ok.core.dependencies import ServiceContainer
from h2ok.core.error_handlers import setup_error_handlers
from h2ok.core.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(service_container: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        service_container: container to use instead of one built from settings

    Returns:
        FastAPI: Configured application instance
    """
    container = service_container or ServiceContainer()
    settings = container.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup phase: logging, marker icon and services; shutdown closes them."""
        configure_logging(settings.log_level.value, settings.log_format)
        logger.info(f"Starting {settings.app_name} v{settings.app_version}")

        try:
            await container.initialize_services()
            app.state.service_container = container
            logger.info("Application startup complete")

            yield

        except Exception as e:
            logger.error(f"Application startup failed: {e}", exc_info=True)
            raise

        finally:
            logger.info("Shutting down application")
            await container.cleanup_services()
            logger.info("Application shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )

    setup_error_handlers(app)

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log requests and responses with timing information."""
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        logger.info(
            f"Request {request_id} started: {request.method} {request.url.path}",
            extra={
                'request_id': request_id,
                'method': request.method,
                'path': request.url.path,
            }
        )

        response = await call_next(request)

        processing_time = (time.time() - start_time) * 1000

        logger.info(
            f"Request {request_id} completed: {response.status_code} ({processing_time:.2f}ms)",
            extra={
                'request_id': request_id,
                'status_code': response.status_code,
                'processing_time_ms': processing_time
            }
        )

        return response

    from h2ok.api import map_router, updates_router, site_router
    app.include_router(map_router)
    app.include_router(updates_router)
    app.include_router(site_router)

    @app.get("/")
    async def root():
        """Root endpoint for basic health check."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        """Liveness plus whether the services finished starting."""
        ready = container.initialized
        return {
            "status": "healthy" if ready else "starting",
            "version": settings.app_version,
            "backend_url": settings.backend_url,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


# Create application instance
app = create_app()
