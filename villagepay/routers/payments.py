from __future__ import annotations

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field, field_validator

from villagepay.domain.models import Amount, PaymentStatus
from villagepay.routers.deps import get_payment_service
from villagepay.services.payment_service import PaymentService

router = APIRouter(prefix="/api/payments", tags=["payments"])


class SubmitPaymentBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    house_no: str = Field(..., alias="houseNo", min_length=1)
    amount: Amount
    month: str = ""
    date: str = ""
    slip_file_name: Optional[str] = Field(None, alias="slipFileName")

    @field_validator("amount")
    @classmethod
    def _positive(cls, value):
        if value <= 0:
            raise ValueError("amount must be positive")
        return value


class StatusBody(BaseModel):
    status: Literal["APPROVED", "REJECTED"]


@router.get("")
def list_payments(
    house_no: Optional[str] = Query(None, alias="houseNo"),
    status: Optional[PaymentStatus] = None,
    newest_first: bool = Query(False, alias="newestFirst"),
    svc: PaymentService = Depends(get_payment_service),
):
    payments = svc.list_payments(house_no, status=status, newest_first=newest_first)
    return [p.to_document() for p in payments]


@router.get("/summary")
def payment_summary(svc: PaymentService = Depends(get_payment_service)):
    return svc.summarize().as_dict()


@router.post("", status_code=201)
def submit_payment(body: SubmitPaymentBody, svc: PaymentService = Depends(get_payment_service)):
    payment = svc.submit_payment(body.model_dump(by_alias=True, exclude_none=True))
    return payment.to_document()


@router.post("/{payment_id}/status")
def set_payment_status(payment_id: str, body: StatusBody, svc: PaymentService = Depends(get_payment_service)):
    payment = svc.set_status(payment_id, body.status)
    return {"updated": payment is not None, "payment": payment.to_document() if payment else None}
