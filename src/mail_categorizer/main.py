"""
FastAPI application entry point for the Mail Categorizer.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from mail_categorizer.api.dependencies import get_categorizer
from mail_categorizer.api.middleware import RequestTracingMiddleware
from mail_categorizer.api.routes import router
from mail_categorizer.config import settings
from mail_categorizer.logging_config import configure_logging

# Configure structured logging before the app is built
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Select the provider at startup and close the HTTP pool on shutdown."""
    categorizer = get_categorizer()
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        active_provider=categorizer.active_provider.value if categorizer.active_provider else None,
    )
    yield
    await categorizer.close()
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    description="Email categorization and reply suggestions with AI providers and rule-based fallback",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# Request tracing middleware (request_id in all logs)
app.add_middleware(RequestTracingMiddleware)

app.include_router(router, tags=["categorization"])

# Prometheus metrics instrumentation
if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/")
async def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health",
        "providers": "/providers/status",
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mail_categorizer.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Only for development
    )
