"""Security infrastructure for the StyleHub application.

This module provides:
- Password hashing and verification (passlib/bcrypt)
- JWT access token creation and validation (python-jose)
- The principal resolver used by every endpoint

A verified bearer token resolves to a ``Principal`` carrying the user id and
role. Endpoints always receive an optional principal; deciding whether an
anonymous caller is acceptable belongs to the access decision engine.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import get_settings
from app.core.exceptions import UnauthorizedError
from app.core.logging import get_logger
from app.models.domain.common import Role

logger = get_logger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Bearer credential extraction; absence is not an error at this layer
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Principal:
    """The authenticated actor making a request."""
    id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def get_password_hash(password: str) -> str:
    """Generate password hash."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hashed version."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Create JWT access token with optional expiration."""
    settings = get_settings()
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM
    )


def create_principal_token(user_id: str, role: Role) -> str:
    return create_access_token({"sub": str(user_id), "role": Role(role).value})


def decode_principal(token: str) -> Principal:
    """Validate a bearer token and return the principal it names.

    Raises:
        UnauthorizedError: signature, expiry or claim validation failed.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError as e:
        raise UnauthorizedError("Invalid or expired token") from e

    user_id = payload.get("sub")
    role = payload.get("role")
    if not user_id or role not in {r.value for r in Role}:
        raise UnauthorizedError("Invalid or expired token")

    return Principal(id=str(user_id), role=Role(role))


async def get_optional_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Principal]:
    """Resolve the bearer credential, or ``None`` for anonymous callers.

    An invalid token is treated as no credential; routes that need a
    principal reject ``None`` with 401 through the access engine.
    """
    if credentials is None:
        return None
    try:
        return decode_principal(credentials.credentials)
    except UnauthorizedError:
        logger.debug("Rejected bearer token")
        return None
