from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field, model_validator

from villagepay.domain.models import Role
from villagepay.routers.deps import get_user_service
from villagepay.services.user_service import Created, InvalidCredentialsError, UserService

router = APIRouter(prefix="/api/auth", tags=["auth"])

PIN_PATTERN = r"^[0-9]{4}$"


class StatusBody(BaseModel):
    username: str = Field(..., min_length=1)


class LoginBody(BaseModel):
    username: str = ""
    password: str = Field(..., pattern=PIN_PATTERN)
    role: Role = "user"


class SetupPasswordBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., min_length=1)
    password: str = Field(..., pattern=PIN_PATTERN)
    confirm_password: str = Field(..., alias="confirmPassword")

    @model_validator(mode="after")
    def _confirm_matches(self):
        if self.password != self.confirm_password:
            raise ValueError("passwords do not match")
        return self


class ChangePasswordBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., min_length=1)
    current_password: str = Field(..., alias="currentPassword")
    new_password: str = Field(..., alias="newPassword", pattern=PIN_PATTERN)
    confirm_password: str = Field(..., alias="confirmPassword")

    @model_validator(mode="after")
    def _confirm_matches(self):
        if self.new_password != self.confirm_password:
            raise ValueError("passwords do not match")
        return self


@router.post("/status")
def account_status(body: StatusBody, svc: UserService = Depends(get_user_service)):
    status = svc.check_status(body.username)
    return {"exists": status.exists, "isSetup": status.is_setup}


@router.post("/login")
def login(body: LoginBody, svc: UserService = Depends(get_user_service)):
    username = body.username
    if not username and body.role == "admin":
        # the admin form has no username field
        username = svc.config.admin_username
    try:
        user = svc.authenticate(username, body.password, body.role)
    except InvalidCredentialsError:
        raise HTTPException(401, "incorrect credentials")
    return user.public()


@router.post("/setup-password")
def setup_password(body: SetupPasswordBody, svc: UserService = Depends(get_user_service)):
    result = svc.setup_or_change_password(body.username, body.password)
    kind = "created" if isinstance(result, Created) else "updated"
    return {"result": kind, "user": result.user.public()}


@router.post("/change-password")
def change_password(body: ChangePasswordBody, svc: UserService = Depends(get_user_service)):
    try:
        user = svc.change_password(body.username, body.current_password, body.new_password)
    except InvalidCredentialsError:
        raise HTTPException(401, "incorrect credentials")
    return user.public()
