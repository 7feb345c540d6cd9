"""Exception handlers turning domain errors into HTTP responses."""

from http import HTTPStatus
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.exceptions import ActivityNotFoundError, ActivityValidationError
from infrastructure.config import get_logger
from presentation.security_headers import SECURITY_HEADERS

logger = get_logger(__name__)


def error_response(
    status_code: int,
    message: str,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Build the error body shared by every handled failure."""
    return JSONResponse(
        status_code=status_code,
        content={
            "statusCode": status_code,
            "message": message,
            "error": HTTPStatus(status_code).phrase,
        },
        headers=headers,
    )


async def handle_validation_error(request: Request, exc: ActivityValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def handle_not_found(request: Request, exc: ActivityNotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, exc.message)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """
    Log the traceback and answer 500.
    
    This handler runs in Starlette's outermost error middleware, outside
    every middleware added by the app, so the security headers are set
    here. CORS headers are not added to 500 responses.
    """
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {str(exc)}",
        exc_info=exc,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        headers=SECURITY_HEADERS,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the activity error handlers to the application."""
    app.add_exception_handler(ActivityValidationError, handle_validation_error)
    app.add_exception_handler(ActivityNotFoundError, handle_not_found)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
