"""Payment record endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status

from app.api.dependencies import get_principal, get_query, service
from app.core.logging import monitor_performance
from app.core.security import Principal
from app.services.payments import PaymentService

router = APIRouter()

get_service = service(PaymentService)


@router.get("")
@monitor_performance("list_payments")
async def list_payments(
    query: Dict[str, Any] = Depends(get_query),
    principal: Optional[Principal] = Depends(get_principal),
    payments: PaymentService = Depends(get_service)
):
    return await payments.list(principal, query)


@router.post("", status_code=status.HTTP_201_CREATED)
@monitor_performance("create_payment")
async def create_payment(
    body: Dict[str, Any] = Body(...),
    principal: Optional[Principal] = Depends(get_principal),
    payments: PaymentService = Depends(get_service)
):
    return await payments.create(principal, body)


@router.get("/{payment_id}")
async def get_payment(
    payment_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    payments: PaymentService = Depends(get_service)
):
    return await payments.get(principal, payment_id)


@router.put("/{payment_id}")
@monitor_performance("update_payment")
async def update_payment(
    payment_id: str,
    body: Dict[str, Any] = Body(...),
    principal: Optional[Principal] = Depends(get_principal),
    payments: PaymentService = Depends(get_service)
):
    return await payments.update(principal, payment_id, body)


@router.delete("/{payment_id}")
@monitor_performance("delete_payment")
async def delete_payment(
    payment_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    payments: PaymentService = Depends(get_service)
):
    return await payments.delete(principal, payment_id)
