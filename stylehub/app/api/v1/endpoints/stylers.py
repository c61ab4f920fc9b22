"""Styler profile endpoints.

Profiles are created by ``POST /auth/signup``; there is no create route.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from app.api.dependencies import get_principal, get_query, service
from app.core.logging import monitor_performance
from app.core.security import Principal
from app.services.stylers import StylerService

router = APIRouter()

get_service = service(StylerService)


@router.get("")
@monitor_performance("list_stylers")
async def list_stylers(
    query: Dict[str, Any] = Depends(get_query),
    principal: Optional[Principal] = Depends(get_principal),
    stylers: StylerService = Depends(get_service)
):
    """Admin directory of stylers."""
    return await stylers.list(principal, query)


@router.get("/{styler_id}")
async def get_styler(
    styler_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    stylers: StylerService = Depends(get_service)
):
    return await stylers.get(principal, styler_id)


@router.put("/{styler_id}")
@monitor_performance("update_styler")
async def update_styler(
    styler_id: str,
    body: Dict[str, Any] = Body(...),
    principal: Optional[Principal] = Depends(get_principal),
    stylers: StylerService = Depends(get_service)
):
    return await stylers.update(principal, styler_id, body)


@router.delete("/{styler_id}")
@monitor_performance("delete_styler")
async def delete_styler(
    styler_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    stylers: StylerService = Depends(get_service)
):
    return await stylers.delete(principal, styler_id)
