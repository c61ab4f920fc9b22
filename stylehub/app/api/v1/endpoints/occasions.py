"""Occasion endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status

from app.api.dependencies import get_principal, get_query, service
from app.core.logging import monitor_performance
from app.core.security import Principal
from app.services.occasions import OccasionService

router = APIRouter()

get_service = service(OccasionService)


@router.get("")
@monitor_performance("list_occasions")
async def list_occasions(
    query: Dict[str, Any] = Depends(get_query),
    principal: Optional[Principal] = Depends(get_principal),
    occasions: OccasionService = Depends(get_service)
):
    """List occasions; non-admins only ever see their own.

    Filters: type, startDate, endDate, location, dressCode, search, user (admin).
    Sorting: sort in title/date/type/location/dressCode/createdAt, order=asc|desc.
    """
    return await occasions.list(principal, query)


@router.post("", status_code=status.HTTP_201_CREATED)
@monitor_performance("create_occasion")
async def create_occasion(
    body: Dict[str, Any] = Body(...),
    principal: Optional[Principal] = Depends(get_principal),
    occasions: OccasionService = Depends(get_service)
):
    return await occasions.create(principal, body)


@router.get("/{occasion_id}")
@monitor_performance("get_occasion")
async def get_occasion(
    occasion_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    occasions: OccasionService = Depends(get_service)
):
    return await occasions.get(principal, occasion_id)


@router.put("/{occasion_id}")
@monitor_performance("update_occasion")
async def update_occasion(
    occasion_id: str,
    body: Dict[str, Any] = Body(...),
    principal: Optional[Principal] = Depends(get_principal),
    occasions: OccasionService = Depends(get_service)
):
    return await occasions.update(principal, occasion_id, body)


@router.delete("/{occasion_id}")
@monitor_performance("delete_occasion")
async def delete_occasion(
    occasion_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    occasions: OccasionService = Depends(get_service)
):
    return await occasions.delete(principal, occasion_id)
