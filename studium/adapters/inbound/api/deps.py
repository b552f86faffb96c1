# studium/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for authentication, database access and the
per-request controllers.
"""

import logging
from typing import Any, Callable, Dict, Optional, Type

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.exceptions import RequestValidationError
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from studium.adapters.outbound.persistence.database import get_db
from studium.adapters.outbound.persistence.repositories.base_repository import BaseRepository
from studium.adapters.outbound.security.auth_user_manager import UserAuthManager

# Configure logger
logger = logging.getLogger(__name__)

# Bearer scheme only documents the security in OpenAPI; header errors are reported below
bearer_scheme = HTTPBearer(auto_error=False)

########################################################################
# User Token Authentication
########################################################################

def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
) -> Dict[str, Any]:
    """
    Validate the bearer token and return its claims.

    Runs before any controller or repository work; no database access.

    Raises:
        HTTPException: 401 when the token is absent, malformed, invalid or expired
    """
    authorization = request.headers.get("Authorization")
    if not authorization:
        logger.warning(f"Acesso sem token: {request.method} {request.url.path}")
        raise _unauthorized("Token não fornecido")

    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        logger.warning(f"Token mal formatado: {request.method} {request.url.path}")
        raise _unauthorized("Token mal formatado")

    payload = await UserAuthManager.verify_access_token(credentials.credentials)
    request.state.user = payload
    return payload


########################################################################
# Request Body
########################################################################

async def get_json_body(request: Request) -> Dict[str, Any]:
    """
    Read the JSON object sent as the request body.

    Declared after the route authentication dependencies, so a request
    without a valid token gets 401 before its body is even read.

    Raises:
        RequestValidationError: When the body is not valid JSON or not an object
    """
    try:
        payload = await request.json()
    except ValueError as e:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "ctx": {"error": str(e)}}]
        )

    if not isinstance(payload, dict):
        raise RequestValidationError(
            [{"type": "dict_type", "loc": ("body",), "msg": "Input should be a valid dictionary"}]
        )
    return payload


########################################################################
# Controllers
########################################################################

def controller_provider(controller_class: Type, repository_class: Type[BaseRepository]) -> Callable:
    """
    Build a dependency that wires ``controller_class`` to a fresh
    ``repository_class`` bound to the request session.
    """

    def provide(db: AsyncSession = Depends(get_db)):
        return controller_class(repository_class(db))

    provide.__name__ = f"get_{controller_class.__name__}"
    provide.controller_class = controller_class
    return provide
