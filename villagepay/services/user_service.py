"""
Login and first-time setup use cases.

PINs are kept in plaintext because existing documents (and the residents who
already chose a PIN) depend on exact string comparison.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from villagepay.core.config import Config, get_config
from villagepay.core.log import get_logger
from villagepay.domain.models import Role, User
from villagepay.repositories import DocumentStore, build_store

logger = get_logger(__name__)


class UserError(Exception):
    """Base class for user/authentication exceptions."""


class InvalidCredentialsError(UserError):
    pass


class UserExistsError(UserError):
    pass


class UserNotFoundError(UserError):
    pass


@dataclass
class AccountStatus:
    exists: bool
    is_setup: bool


@dataclass
class Created:
    """Password setup registered a new resident."""

    user: User


@dataclass
class Updated:
    """Password setup changed an existing account."""

    user: User


PasswordSetupResult = Created | Updated


def _find_index(users: list, username: str) -> int:
    for idx, record in enumerate(users):
        if isinstance(record, dict) and record.get("username") == username:
            return idx
    return -1


@dataclass
class UserService:
    """Lookup, first-time password setup and login against the document store."""

    store: DocumentStore = field(default_factory=build_store)
    config: Config = field(default_factory=get_config)

    def find_user(self, username: str) -> Optional[User]:
        users = self.store.fetch_all()["users"]
        idx = _find_index(users, username)
        if idx == -1:
            return None
        return User.model_validate(users[idx])

    def check_status(self, username: str) -> AccountStatus:
        user = self.find_user(username)
        if not user:
            return AccountStatus(exists=False, is_setup=False)
        return AccountStatus(exists=True, is_setup=user.is_setup)

    def setup_or_change_password(self, username: str, new_password: str) -> PasswordSetupResult:
        """
        Set the PIN of an existing account, or self-register a resident when
        the username is unknown. Format checks are the caller's job.
        """
        doc = self.store.fetch_all()
        users = doc["users"]
        idx = _find_index(users, username)
        if idx == -1:
            user = User(
                username=username,
                password=new_password,
                role="user",
                name=username,
                common_fee=self.config.default_common_fee,
                is_setup=True,
            )
            users.append(user.to_document())
            self.store.replace_all(doc)
            logger.info("user_self_registered", username=username)
            return Created(user)

        user = User.model_validate(users[idx])
        user.password = new_password
        user.is_setup = True
        users[idx] = user.to_document()
        self.store.replace_all(doc)
        logger.info("user_password_set", username=username, role=user.role)
        return Updated(user)

    def authenticate(self, username: str, password: str, expected_role: Role) -> User:
        for record in self.store.fetch_all()["users"]:
            if not isinstance(record, dict):
                continue
            if (
                record.get("username") == username
                and record.get("password") == password
                and record.get("role") == expected_role
            ):
                return User.model_validate(record)
        logger.info("login_rejected", username=username, role=expected_role)
        raise InvalidCredentialsError("incorrect credentials")

    def change_password(self, username: str, current_password: str, new_password: str) -> User:
        user = self.find_user(username)
        if not user or user.password != current_password:
            raise InvalidCredentialsError("incorrect credentials")
        result = self.setup_or_change_password(username, new_password)
        return result.user

    # -------------------------------------- admin tooling --------------------------------------
    def provision_user(
        self,
        username: str,
        *,
        name: str = "",
        role: Role = "user",
        common_fee: int | float | None = None,
    ) -> User:
        """Create an account that still has to pick its PIN on first login."""
        raw = (username or "").strip()
        if not raw:
            raise UserError("username is required")
        doc = self.store.fetch_all()
        if _find_index(doc["users"], raw) != -1:
            raise UserExistsError(f"user '{raw}' already exists")
        fee = common_fee if common_fee is not None else (self.config.default_common_fee if role == "user" else None)
        user = User(username=raw, password="", role=role, name=name or raw, common_fee=fee, is_setup=False)
        doc["users"].append(user.to_document())
        self.store.replace_all(doc)
        logger.info("user_provisioned", username=raw, role=role)
        return user

    def reset_password(self, username: str) -> User:
        """Blank the PIN so the next login goes through first-time setup again."""
        doc = self.store.fetch_all()
        users = doc["users"]
        idx = _find_index(users, username)
        if idx == -1:
            raise UserNotFoundError(f"user '{username}' not found")
        user = User.model_validate(users[idx])
        user.password = ""
        user.is_setup = False
        users[idx] = user.to_document()
        self.store.replace_all(doc)
        logger.info("user_password_reset", username=username)
        return user
