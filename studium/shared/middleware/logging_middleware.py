# studium/shared/middleware/logging_middleware.py (async version)

"""
Middleware for HTTP request logging.

One line when the request arrives and one when the response leaves.
The response line carries the authenticated user id (the ``sub`` claim
that ``get_current_user`` stores in ``request.state.user``) or
``anon`` for public routes and rejected tokens.
"""

import time
import logging
from typing import Any, Mapping, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

# Configure logger
logger = logging.getLogger(__name__)

ANONYMOUS = "anon"


def request_user_id(request: Request) -> str:
    """User id of the token accepted for this request, or ``anon``."""
    claims: Optional[Mapping[str, Any]] = getattr(request.state, "user", None)
    if not claims or claims.get("sub") is None:
        return ANONYMOUS
    return str(claims["sub"])


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request logging.

    In production the query string and client address are left out.
    """

    def __init__(self, app, production: bool = False):
        super().__init__(app)
        self.production = production

    async def dispatch(self, request: Request, call_next):
        route = f"{request.method} {request.url.path}"
        if self.production:
            logger.info(f"Request: {route}")
        else:
            query_params = dict(request.query_params)
            logger.info(
                f"Request: {route} | "
                f"Query: {query_params if query_params else 'N/A'} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )

        start_time = time.time()
        response = await call_next(request)
        elapsed = time.time() - start_time

        # o token só é lido durante a rota: o usuário aparece na resposta
        logger.info(
            f"Response: {response.status_code} for {route} | "
            f"User: {request_user_id(request)} | Time: {elapsed:.4f}s"
        )
        return response
