"""Receiving-account settings (bank details, QR image, contact number)."""

from __future__ import annotations

from dataclasses import dataclass, field

from villagepay.core.config import Config, get_config
from villagepay.core.log import get_logger
from villagepay.domain.models import AccountSettings
from villagepay.repositories import DocumentStore, build_store

logger = get_logger(__name__)


@dataclass
class SettingsService:
    store: DocumentStore = field(default_factory=build_store)
    config: Config = field(default_factory=get_config)

    def defaults(self) -> dict:
        return AccountSettings(contact_number=self.config.default_contact_number).to_document()

    def get_settings(self) -> AccountSettings:
        """Stored settings merged over the defaults."""
        stored = self.store.fetch_all()["settings"]
        merged = self.defaults()
        if isinstance(stored, dict):
            merged.update({k: v for k, v in stored.items() if v is not None})
        return AccountSettings.model_validate(merged)

    def save_settings(self, partial: dict) -> AccountSettings:
        """Shallow-merge the given fields into the stored record and persist it."""
        doc = self.store.fetch_all()
        current = doc["settings"] if isinstance(doc["settings"], dict) else {}
        updated = {**current, **partial}
        # reject bad values before the document is rewritten
        AccountSettings.model_validate({**self.defaults(), **{k: v for k, v in updated.items() if v is not None}})
        doc["settings"] = updated
        self.store.replace_all(doc)
        logger.info("settings_saved", fields=sorted(partial))
        return self.get_settings()
