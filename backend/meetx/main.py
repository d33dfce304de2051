"""
MeetX Activity Booking API - Main Application Entry Point

Users register, log in with a signed session token, browse activities and
book them:
- Stateless JWT sessions checked by a FastAPI dependency guard
- At most one booking per user and activity, enforced by a unique constraint
- Structured logging with request correlation
- Prometheus metrics at /metrics
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from meetx.core.config import get_settings
from meetx.core.logging import setup_logging, get_logger
from meetx.core.metrics import metrics_endpoint
from meetx.api.errors import register_exception_handlers
from meetx.api.router import api_router
from meetx.api.middleware import RequestLoggingMiddleware
from meetx.db.session import dispose_engine

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )
    if settings.uses_default_secret and settings.ENVIRONMENT == "production":
        logger.warning("default_secret_key", message="Set SECRET_KEY; tokens are forgeable")

    yield

    await dispose_engine()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Activity booking API with token auth and duplicate-safe bookings",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for Docker and load balancers."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
    }


@app.get("/metrics", include_in_schema=False)
def metrics():
    return metrics_endpoint()


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"{settings.APP_NAME} is running",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }
