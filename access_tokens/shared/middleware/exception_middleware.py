# access_tokens/shared/middleware/exception_middleware.py (async version)

"""
Middleware for centralized exception handling.

This module defines middleware that intercepts exceptions and formats
appropriate error responses for the client. Only validation and
authorization failures carry detail; everything else is reduced to a
generic message and logged server-side.
"""

import logging
from typing import Callable

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from access_tokens.domain.exceptions import DomainException, InvalidInputException
from access_tokens.adapters.configuration.config import settings
from access_tokens.shared.utils.request_validation import field_errors

# Configure logger
logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"
VALIDATION_FAILED = "Validation failed"


def internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR},
    )


def validation_error_response(exc: InvalidInputException) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": VALIDATION_FAILED,
            "details": [error.to_dict() for error in exc.details],
        },
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Replaces FastAPI's 422 with the 400 validation shape."""
    logger.warning(f"Request validation error | Path: {request.url.path}")
    return validation_error_response(InvalidInputException(details=field_errors(exc.errors())))


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        try:
            return await call_next(request)

        except DomainException as exc:
            # Domain exceptions: mapping from pure exception to HTTP code based on 'internal_code'
            if exc.internal_code == "VALIDATION_ERROR":
                logger.warning(f"Validation error: {str(exc)} | Path: {request.url.path}")
                return validation_error_response(exc)

            if exc.internal_code == "INVALID_CREDENTIALS":
                logger.warning(
                    f"Authorization error | Path: {request.url.path} | "
                    f"Client: {request.client.host if request.client else 'N/A'}"
                )
                return JSONResponse(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    content={"error": str(exc.detail)},
                )

            # RESOURCE_ALREADY_EXISTS, DATABASE_OPERATION_ERROR and anything unknown
            if settings.ENVIRONMENT == "production":
                logger.error(
                    f"Domain exception: Code={exc.internal_code} | "
                    f"Type={type(exc).__name__} | Path: {request.url.path}"
                )
            else:
                logger.exception(
                    f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                    f"Path: {request.url.path}"
                )
            return internal_error_response()

        except SQLAlchemyError as exc:
            # SQLAlchemy errors that escaped the repositories
            if settings.ENVIRONMENT == "production":
                logger.error(
                    f"Database error: Type={type(exc).__name__} | "
                    f"Path: {request.url.path}"
                )
            else:
                logger.exception(f"Database error: {str(exc)} | Path: {request.url.path}")
            return internal_error_response()

        except Exception as exc:
            # Unhandled exceptions
            logger.exception(
                f"Unhandled exception: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return internal_error_response()
