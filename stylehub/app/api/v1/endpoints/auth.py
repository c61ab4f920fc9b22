"""Signup and login endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from app.api.dependencies import service
from app.core.logging import monitor_performance
from app.services.auth import AuthService

router = APIRouter()

get_service = service(AuthService)


@router.post("/signup", status_code=status.HTTP_201_CREATED)
@monitor_performance("signup")
async def signup(
    body: Dict[str, Any] = Body(...),
    auth: AuthService = Depends(get_service)
):
    """Register an account.

    This endpoint:
    1. Validates email, password, name and role (user, styler or partner)
    2. Rejects an email that is already registered
    3. Creates the account and, for stylers and partners, their profile
    4. Returns a bearer token for the new account
    """
    return await auth.signup(body)


@router.post("/login")
@monitor_performance("login")
async def login(
    body: Dict[str, Any] = Body(...),
    auth: AuthService = Depends(get_service)
):
    return await auth.login(body)
