"""Styler wardrobe endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status

from app.api.dependencies import get_principal, get_query, service
from app.core.logging import monitor_performance
from app.core.security import Principal
from app.services.styler_clothes import StylerClothesService

router = APIRouter()

get_service = service(StylerClothesService)


@router.get("")
@monitor_performance("list_styler_clothes")
async def list_styler_clothes(
    query: Dict[str, Any] = Depends(get_query),
    principal: Optional[Principal] = Depends(get_principal),
    clothes: StylerClothesService = Depends(get_service)
):
    """List wardrobe items.

    Filters: category, color, skinTone, gender, name, search, owner (admin).
    """
    return await clothes.list(principal, query)


@router.post("", status_code=status.HTTP_201_CREATED)
@monitor_performance("create_styler_cloth")
async def create_styler_cloth(
    body: Dict[str, Any] = Body(...),
    principal: Optional[Principal] = Depends(get_principal),
    clothes: StylerClothesService = Depends(get_service)
):
    return await clothes.create(principal, body)


@router.get("/{cloth_id}")
async def get_styler_cloth(
    cloth_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    clothes: StylerClothesService = Depends(get_service)
):
    return await clothes.get(principal, cloth_id)


@router.put("/{cloth_id}")
@monitor_performance("update_styler_cloth")
async def update_styler_cloth(
    cloth_id: str,
    body: Dict[str, Any] = Body(...),
    principal: Optional[Principal] = Depends(get_principal),
    clothes: StylerClothesService = Depends(get_service)
):
    return await clothes.update(principal, cloth_id, body)


@router.delete("/{cloth_id}")
@monitor_performance("delete_styler_cloth")
async def delete_styler_cloth(
    cloth_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    clothes: StylerClothesService = Depends(get_service)
):
    return await clothes.delete(principal, cloth_id)
