# studium/adapters/outbound/security/auth_user_manager.py (async version)

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt, JWTError
from fastapi import HTTPException, status
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from studium.adapters.configuration.config import settings

SECRET_KEY = settings.SECRET_KEY
ALGORITHM = settings.ALGORITHM
DEFAULT_EXPIRES_MIN = settings.ACCESS_TOKEN_EXPIRE_MINUTES


class UserAuthManager:
    """
    Password hashing and JWT authentication for users.

    bcrypt runs in the threadpool so hashing does not block the event loop.
    """

    crypt_context = CryptContext(
        schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS
    )

    @classmethod
    async def hash_password(cls, password: str) -> str:
        """Return the hash of a plain text password."""
        return await run_in_threadpool(cls.crypt_context.hash, password)

    @classmethod
    async def verify_password(cls, plain_password: str, hashed_password: str) -> bool:
        """Verify if the plain text password matches the stored hash."""
        if not plain_password or not hashed_password:
            return False
        return await run_in_threadpool(cls.crypt_context.verify, plain_password, hashed_password)

    @classmethod
    async def create_access_token(
            cls, subject: Any, username: Optional[str] = None, expires_delta: timedelta = None
    ) -> str:
        """
        Create a JWT access token for the authenticated user.

        - subject: the user's id.
        - expires_delta: custom expiration time.
        """
        if expires_delta is None:
            expires_delta = timedelta(minutes=DEFAULT_EXPIRES_MIN)

        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(subject),
            "username": username,
            "iat": int(now.timestamp()),
            "exp": int((now + expires_delta).timestamp()),
            "type": "access",
            "jti": str(uuid.uuid4()),
        }
        return jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)

    @classmethod
    async def verify_access_token(cls, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT access token.

        Raises:
            HTTPException: 401 when the token is invalid, expired or of another type
        """
        try:
            payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        except JWTError:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token inválido ou expirado",
                headers={"WWW-Authenticate": "Bearer"},
            )

        if payload.get("type") != "access" or not payload.get("sub"):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token inválido ou expirado",
                headers={"WWW-Authenticate": "Bearer"},
            )
        return payload
