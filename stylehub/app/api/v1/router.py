"""Router configuration for the StyleHub application.

This module organizes and configures all API routes, combining endpoints from
different modules into a unified API structure.
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

# Import endpoint routers
from app.api.v1.endpoints import (
    auth,
    occasions,
    partner_clothes,
    partners,
    payments,
    styler_clothes,
    stylers,
    users
)

# Create main router
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(occasions.router, prefix="/occasions", tags=["occasions"])
# Public directory first so "/partners/public" never matches "/partners/{id}"
api_router.include_router(partners.public_router, prefix="/partners/public", tags=["partners"])
api_router.include_router(partners.router, prefix="/partners", tags=["partners"])
api_router.include_router(stylers.router, prefix="/stylers", tags=["stylers"])
api_router.include_router(styler_clothes.router, prefix="/stylerclothes", tags=["styler clothes"])
api_router.include_router(partner_clothes.router, prefix="/partnerclothes", tags=["partner clothes"])
api_router.include_router(payments.router, prefix="/payment", tags=["payments"])


# Health check endpoint
@api_router.get("/health", tags=["health"])
async def health_check(request: Request):
    """Health check endpoint; reports store connectivity."""
    database = request.app.state.database
    healthy = await database.healthcheck()
    content = {
        "status": "healthy" if healthy else "unhealthy",
        "version": request.app.version,
        "database": "connected" if healthy else "unavailable",
        "metrics": database.get_metrics(),
    }
    if healthy:
        return content
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=content)
