from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from villagepay.domain.constants import BANKS
from villagepay.routers.deps import get_settings_service
from villagepay.services.settings_service import SettingsService

router = APIRouter(prefix="/api/settings", tags=["settings"])


class SettingsPatch(BaseModel):
    """Only the fields present in the request body are merged."""

    model_config = ConfigDict(populate_by_name=True)

    payment_qr_code: Optional[str] = Field(None, alias="paymentQrCode")
    bank_name: Optional[str] = Field(None, alias="bankName")
    account_name: Optional[str] = Field(None, alias="accountName")
    account_number: Optional[str] = Field(None, alias="accountNumber")
    contact_number: Optional[str] = Field(None, alias="contactNumber")


@router.get("")
def read_settings(svc: SettingsService = Depends(get_settings_service)):
    return svc.get_settings().to_document()


@router.post("")
def save_settings(body: SettingsPatch, svc: SettingsService = Depends(get_settings_service)):
    partial = body.model_dump(by_alias=True, exclude_unset=True)
    return svc.save_settings(partial).to_document()


@router.get("/banks")
def list_banks():
    return list(BANKS)
