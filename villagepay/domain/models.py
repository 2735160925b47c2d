"""Pydantic models mirroring the records kept in the JSON document."""
from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Role = Literal["user", "admin"]
PaymentStatus = Literal["PENDING", "APPROVED", "REJECTED"]
Amount = Union[int, float]

PENDING = "PENDING"
APPROVED = "APPROVED"
REJECTED = "REJECTED"
REVIEW_STATUSES = (APPROVED, REJECTED)


class Record(BaseModel):
    """Base for stored records: camelCase on the wire, unknown keys preserved."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @model_validator(mode="before")
    @classmethod
    def _nulls_as_defaults(cls, data):
        # documents saved through /api/save are not validated; null falls back to the field default
        if not isinstance(data, dict):
            return data
        known = set()
        for name, info in cls.model_fields.items():
            known.add(name)
            if info.alias:
                known.add(info.alias)
        return {k: v for k, v in data.items() if not (v is None and k in known)}

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class User(Record):
    username: str
    # PINs are stored and compared in plaintext; existing documents depend on it.
    password: str = ""
    # values outside Role survive a rewrite untouched
    role: Union[Role, str] = "user"
    name: str = ""
    common_fee: Optional[Amount] = Field(None, alias="commonFee")
    is_setup: bool = Field(False, alias="isSetup")

    def public(self) -> dict:
        """Wire view without the password."""
        data = self.to_document()
        data.pop("password", None)
        return data


class Payment(Record):
    id: str = ""
    date: str = ""
    house_no: str = Field("", alias="houseNo")
    amount: Amount = 0
    status: Union[PaymentStatus, str] = PENDING
    month: str = ""
    slip_file_name: Optional[str] = Field(None, alias="slipFileName")

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value):
        return value if isinstance(value, str) else str(value)


class AccountSettings(Record):
    """Receiving-account details shown to residents."""

    payment_qr_code: Optional[str] = Field(None, alias="paymentQrCode")
    bank_name: str = Field("", alias="bankName")
    account_name: str = Field("", alias="accountName")
    account_number: str = Field("", alias="accountNumber")
    contact_number: str = Field("", alias="contactNumber")

    def to_document(self) -> dict:
        # paymentQrCode is null until an image is uploaded
        return self.model_dump(by_alias=True)
