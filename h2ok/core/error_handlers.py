"""
Error handlers for the view surface.

Every error leaves the API as the standard envelope with ``status="error"``.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from h2ok.core.exceptions import H2OkException, ErrorCode
from h2ok.schemas.base import Envelope

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Maps exceptions onto error envelopes."""

    async def handle_h2ok_exception(self, request: Request, exc: H2OkException) -> JSONResponse:
        request_id = getattr(request.state, 'request_id', 'unknown')
        logger.error(
            f"H2OkException in request {request_id}: {exc.message}",
            extra={
                'request_id': request_id,
                'error_code': exc.error_code.value,
                'status_code': exc.status_code,
                'request_path': request.url.path,
            }
        )
        return self._create_error_response(exc.message, exc.status_code)

    async def handle_validation_error(self, request: Request, exc: RequestValidationError) -> JSONResponse:
        request_id = getattr(request.state, 'request_id', 'unknown')
        fields = ['.'.join(str(loc) for loc in error['loc']) for error in exc.errors()]
        logger.warning(
            f"Validation error in request {request_id}: {len(fields)} field errors",
            extra={'request_id': request_id, 'fields': fields}
        )
        return self._create_error_response(
            f"Request validation failed: {', '.join(fields)}", 422
        )

    async def handle_http_exception(self, request: Request, exc: StarletteHTTPException) -> JSONResponse:
        request_id = getattr(request.state, 'request_id', 'unknown')
        code = ErrorCode.NOT_FOUND if exc.status_code == 404 else ErrorCode.INTERNAL_SERVER_ERROR
        logger.warning(
            f"HTTP exception in request {request_id}: {exc.status_code} - {exc.detail}",
            extra={'request_id': request_id, 'error_code': code.value}
        )
        return self._create_error_response(str(exc.detail), exc.status_code)

    async def handle_generic_exception(self, request: Request, exc: Exception) -> JSONResponse:
        request_id = getattr(request.state, 'request_id', 'unknown')
        logger.error(
            f"Unhandled exception in request {request_id}: {type(exc).__name__}: {str(exc)}",
            exc_info=True,
            extra={'request_id': request_id, 'request_path': request.url.path}
        )
        return self._create_error_response("An internal server error occurred", 500)

    def _create_error_response(self, message: str, status_code: int) -> JSONResponse:
        body = Envelope(status="error", error=message)
        return JSONResponse(status_code=status_code, content=body.model_dump())


# Global error handler instance
error_handler = ErrorHandler()


def setup_error_handlers(app):
    """
    Set up all error handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(H2OkException)
    async def h2ok_exception_handler(request: Request, exc: H2OkException):
        return await error_handler.handle_h2ok_exception(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return await error_handler.handle_validation_error(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return await error_handler.handle_http_exception(request, exc)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        return await error_handler.handle_generic_exception(request, exc)
