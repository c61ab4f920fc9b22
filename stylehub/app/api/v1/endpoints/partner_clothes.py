"""Partner catalogue endpoints.

``/mine`` is declared before ``/{cloth_id}`` so it is never read as an id.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status

from app.api.dependencies import get_principal, get_query, service
from app.core.logging import monitor_performance
from app.core.security import Principal
from app.services.partner_clothes import PartnerClothesService

router = APIRouter()

get_service = service(PartnerClothesService)


@router.get("")
@monitor_performance("list_public_partner_clothes")
async def list_public_partner_clothes(
    query: Dict[str, Any] = Depends(get_query),
    principal: Optional[Principal] = Depends(get_principal),
    clothes: PartnerClothesService = Depends(get_service)
):
    """Public catalogue.

    Filters: category, color, brand, size, minPrice, maxPrice, name, search,
    partner. Sorting: sort in price/name/createdAt, order=asc|desc.
    """
    return await clothes.list_public(principal, query)


@router.get("/mine")
@monitor_performance("list_my_partner_clothes")
async def list_my_partner_clothes(
    query: Dict[str, Any] = Depends(get_query),
    principal: Optional[Principal] = Depends(get_principal),
    clothes: PartnerClothesService = Depends(get_service)
):
    """The calling partner's own items, public and private."""
    return await clothes.list(principal, query)


@router.post("", status_code=status.HTTP_201_CREATED)
@monitor_performance("create_partner_cloth")
async def create_partner_cloth(
    body: Dict[str, Any] = Body(...),
    principal: Optional[Principal] = Depends(get_principal),
    clothes: PartnerClothesService = Depends(get_service)
):
    return await clothes.create(principal, body)


@router.get("/{cloth_id}")
async def get_partner_cloth(
    cloth_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    clothes: PartnerClothesService = Depends(get_service)
):
    return await clothes.get(principal, cloth_id)


@router.put("/{cloth_id}")
@monitor_performance("update_partner_cloth")
async def update_partner_cloth(
    cloth_id: str,
    body: Dict[str, Any] = Body(...),
    principal: Optional[Principal] = Depends(get_principal),
    clothes: PartnerClothesService = Depends(get_service)
):
    return await clothes.update(principal, cloth_id, body)


@router.delete("/{cloth_id}")
@monitor_performance("delete_partner_cloth")
async def delete_partner_cloth(
    cloth_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    clothes: PartnerClothesService = Depends(get_service)
):
    return await clothes.delete(principal, cloth_id)
