"""
Maps domain errors to HTTP responses.

Services raise `ServiceError` subclasses; the boundary turns them into
`{"detail": ...}` bodies with a stable status code. Anything else is logged
with its traceback and reported as a bare 500 so internals never leak.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from meetx.core.exceptions import ServiceError
from meetx.core.logging import get_logger

logger = get_logger(__name__)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    if exc.status_code >= 500:
        logger.error("service_error", error_type=type(exc).__name__, error=str(exc))
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": ServiceError.detail},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=headers,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", error_type=type(exc).__name__)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": ServiceError.detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
