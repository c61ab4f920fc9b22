"""User management endpoints (admin only).

Roles are fixed at creation; updates may change name, email and password.
Password hashes are never returned.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status

from app.api.dependencies import get_principal, get_query, service
from app.core.logging import get_logger, monitor_performance
from app.core.security import Principal
from app.services.users import UserService

router = APIRouter()
logger = get_logger(__name__)

get_service = service(UserService)


@router.get("")
@monitor_performance("list_users")
async def list_users(
    query: Dict[str, Any] = Depends(get_query),
    principal: Optional[Principal] = Depends(get_principal),
    users: UserService = Depends(get_service)
):
    return await users.list(principal, query)


@router.post("", status_code=status.HTTP_201_CREATED)
@monitor_performance("create_user")
async def create_user(
    body: Dict[str, Any] = Body(...),
    principal: Optional[Principal] = Depends(get_principal),
    users: UserService = Depends(get_service)
):
    return await users.create(principal, body)


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    users: UserService = Depends(get_service)
):
    return await users.get(principal, user_id)


@router.put("/{user_id}")
@monitor_performance("update_user")
async def update_user(
    user_id: str,
    body: Dict[str, Any] = Body(...),
    principal: Optional[Principal] = Depends(get_principal),
    users: UserService = Depends(get_service)
):
    if "role" in body:
        logger.warning("Ignored role change on user update", user_id=user_id)
    return await users.update(principal, user_id, body)


@router.delete("/{user_id}")
@monitor_performance("delete_user")
async def delete_user(
    user_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    users: UserService = Depends(get_service)
):
    return await users.delete(principal, user_id)
