"""
Middleware for request logging and standardized error responses.

This module provides:
- Request logging middleware (logs every request path before delegating)
- Exception handling middleware for FastAPI
- HTTP status code mapping for the error categories
"""

import uuid
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
import logging

from .exceptions import (
    BaseAPIException,
    ErrorCategory,
    handle_unexpected_error
)

logger = logging.getLogger('api')


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Pipeline stage that logs the incoming request path, then calls the next stage."""

    async def dispatch(self, request: Request, call_next):
        logger.info(f"Request received: {request.url.path}")
        return await call_next(request)


class ExceptionHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware to handle exceptions and provide standardized error responses."""

    async def dispatch(self, request: Request, call_next):
        # Generate trace ID for request tracking
        trace_id = str(uuid.uuid4())
        request.state.trace_id = trace_id

        try:
            response = await call_next(request)
            return response
        except BaseAPIException as e:
            error_response = e.to_error_response(path=str(request.url))
            error_response.trace_id = trace_id

            status_code = self._get_status_code_for_exception(e)

            self._log_exception(e, request, trace_id, status_code)

            return JSONResponse(
                status_code=status_code,
                content=error_response.to_dict()
            )
        except Exception as e:
            unexpected_exception = handle_unexpected_error(e, trace_id)
            error_response = unexpected_exception.to_error_response(path=str(request.url))

            self._log_exception(unexpected_exception, request, trace_id, 500)

            return JSONResponse(
                status_code=500,
                content=error_response.to_dict()
            )

    def _get_status_code_for_exception(self, exception: BaseAPIException) -> int:
        """Map exception categories to HTTP status codes."""
        status_mapping = {
            ErrorCategory.VALIDATION: 400,
            ErrorCategory.NOT_FOUND: 404,
            ErrorCategory.BUSINESS_LOGIC: 422,
            ErrorCategory.SYSTEM: 500
        }

        return status_mapping.get(exception.category, 500)

    def _log_exception(
        self,
        exception: BaseAPIException,
        request: Request,
        trace_id: str,
        status_code: int
    ):
        """Log exception with appropriate level based on severity."""
        log_data = {
            'trace_id': trace_id,
            'path': str(request.url),
            'method': request.method,
            'status_code': status_code,
            'error_code': exception.error_code.code,
            'error_category': exception.category.value,
            'client_ip': request.client.host if request.client else None
        }

        if status_code >= 500:
            cause = exception.original_exception
            logger.error(
                f"Server Error [{exception.error_code.code}]: {exception.message}"
                + (f" caused by {type(cause).__name__}: {cause}" if cause else ""),
                extra=log_data,
                exc_info=exception.original_exception
            )
        else:
            logger.warning(
                f"Client Error [{exception.error_code.code}]: {exception.message}",
                extra=log_data
            )
