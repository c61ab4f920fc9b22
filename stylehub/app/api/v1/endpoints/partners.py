"""Partner profile endpoints.

``public_router`` is mounted at ``/partners/public`` ahead of ``router`` so
the literal path is never captured as a partner id.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status

from app.api.dependencies import get_principal, get_query, service
from app.core.logging import monitor_performance
from app.core.security import Principal
from app.services.partners import PartnerService, PublicPartnerService

router = APIRouter()
public_router = APIRouter()

get_service = service(PartnerService)
get_public_service = service(PublicPartnerService)


@public_router.get("")
@monitor_performance("list_public_partners")
async def list_public_partners(
    query: Dict[str, Any] = Depends(get_query),
    principal: Optional[Principal] = Depends(get_principal),
    partners: PublicPartnerService = Depends(get_public_service)
):
    """Anonymous partner directory. Filters: name, company, search."""
    return await partners.list(principal, query)


@public_router.get("/{partner_id}")
async def get_public_partner(
    partner_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    partners: PublicPartnerService = Depends(get_public_service)
):
    return await partners.get(principal, partner_id)


@router.get("")
async def list_partners(
    query: Dict[str, Any] = Depends(get_query),
    principal: Optional[Principal] = Depends(get_principal),
    partners: PartnerService = Depends(get_service)
):
    """Always 405; use ``/partners/public``."""
    return await partners.list(principal, query)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_partner(
    body: Optional[Dict[str, Any]] = Body(default=None),
    principal: Optional[Principal] = Depends(get_principal),
    partners: PartnerService = Depends(get_service)
):
    """Always 405; partners are created through signup."""
    return await partners.create(principal, body)


@router.get("/{partner_id}")
async def get_partner(
    partner_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    partners: PartnerService = Depends(get_service)
):
    return await partners.get(principal, partner_id)


@router.put("/{partner_id}")
@monitor_performance("update_partner")
async def update_partner(
    partner_id: str,
    body: Dict[str, Any] = Body(...),
    principal: Optional[Principal] = Depends(get_principal),
    partners: PartnerService = Depends(get_service)
):
    return await partners.update(principal, partner_id, body)


@router.delete("/{partner_id}")
@monitor_performance("delete_partner")
async def delete_partner(
    partner_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    partners: PartnerService = Depends(get_service)
):
    return await partners.delete(principal, partner_id)
