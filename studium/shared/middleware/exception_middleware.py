# studium/shared/middleware/exception_middleware.py (async version)

"""
Middleware for centralized exception handling.

Last line of defence: anything a controller did not turn into a
response ends here. Clients get ``{"error": ...}`` with a generic
message; the details go to the log only.
"""

import time
import logging
from typing import Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from starlette.middleware.base import BaseHTTPMiddleware

from studium.shared.utils.integrity import classify_integrity_error, extract_violation_fields

# Configure logger
logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        client = request.client.host if request.client else "N/A"
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except IntegrityError as exc:
            # Violação que a camada de dados não soube classificar
            logger.error(
                f"Integrity error: Kind={classify_integrity_error(exc) or 'N/A'} | "
                f"Columns={extract_violation_fields(exc) or 'N/A'} | "
                f"Path: {request.url.path} | Client: {client} | Error: {str(exc.orig)}"
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": INTERNAL_ERROR_MESSAGE},
            )

        except SQLAlchemyError as exc:
            logger.error(
                f"Database error: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | Client: {client} | Error: {str(exc)}"
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": INTERNAL_ERROR_MESSAGE},
            )

        except Exception as exc:
            # Unhandled exceptions
            logger.exception(
                f"Unhandled exception: Type={type(exc).__name__} | "
                f"{request.method} {request.url.path} | Client: {client} | Error: {str(exc)}"
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": INTERNAL_ERROR_MESSAGE},
            )
