"""Dependencies for FastAPI application.

This module defines dependencies used across API endpoints including:
- Database session management
- Service instances bound to the request session
- The optional principal resolved from the bearer token
- Raw query parameters handed to the filter builder
"""

from typing import Any, AsyncGenerator, Callable, Dict, Optional, Type, TypeVar

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import Principal, get_optional_principal
from app.database.session import get_session

ServiceType = TypeVar("ServiceType")


# Database Dependencies
async def get_db(session: AsyncSession = Depends(get_session)) -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting database session."""
    yield session


# Service Dependencies
def service(service_class: Type[ServiceType]) -> Callable[..., ServiceType]:
    """Build a dependency returning ``service_class`` bound to the request session."""
    def provider(db: AsyncSession = Depends(get_db)) -> ServiceType:
        return service_class(db)
    provider.__name__ = f"get_{service_class.__name__}"
    return provider


# Principal Dependencies
async def get_principal(
    principal: Optional[Principal] = Depends(get_optional_principal),
) -> Optional[Principal]:
    """Current principal, or ``None``; services decide whether that is acceptable."""
    return principal


# Common Query Parameters
def get_query(request: Request) -> Dict[str, Any]:
    """Raw query string values; the last value wins for repeated keys."""
    return dict(request.query_params)
