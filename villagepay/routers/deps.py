from __future__ import annotations

from fastapi import Request

from villagepay.repositories import DocumentStore
from villagepay.services.payment_service import PaymentService
from villagepay.services.settings_service import SettingsService
from villagepay.services.user_service import UserService


def _state_attr(request: Request, name: str):
    value = getattr(getattr(request.app, "state", None), name, None)
    if value is None:
        raise RuntimeError(f"{name} is not configured")
    return value


def get_store(request: Request) -> DocumentStore:
    return _state_attr(request, "store")


def get_user_service(request: Request) -> UserService:
    return _state_attr(request, "user_service")


def get_payment_service(request: Request) -> PaymentService:
    return _state_attr(request, "payment_service")


def get_settings_service(request: Request) -> SettingsService:
    return _state_attr(request, "settings_service")
