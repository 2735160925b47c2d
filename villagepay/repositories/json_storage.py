"""
JSON document persistence.

The whole store (users, payments, settings) is one JSON document that is
always read and written as a single blob. There is no locking and no version
stamp: when two writers overlap, the last one wins.
"""

from __future__ import annotations

import copy
import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol

from villagepay.core.log import get_logger

logger = get_logger(__name__)


class StoreError(Exception):
    """The document could not be read or written."""

    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation
        self.message = message


class DocumentStore(Protocol):
    def fetch_all(self) -> dict: ...

    def replace_all(self, doc: dict) -> None: ...


def initial_document(admin_username: str = "admin") -> dict:
    """First-run document: empty collections and an admin still without a PIN."""
    return {
        "users": [
            {
                "username": admin_username,
                "password": "",
                "role": "admin",
                "name": "ผู้ดูแลระบบ",
                "isSetup": False,
            }
        ],
        "payments": [],
        "settings": {},
    }


def db_defaults(doc: dict) -> dict:
    for key, factory in (("users", list), ("payments", list), ("settings", dict)):
        if doc.get(key) is None:
            doc[key] = factory()
    return doc


def parse_document(raw: str, source: str) -> dict:
    try:
        doc = json.loads(raw)
    except ValueError as exc:
        raise StoreError("read", f"{source} is not valid JSON") from exc
    if not isinstance(doc, dict):
        raise StoreError("read", f"{source} does not hold a JSON object")
    return db_defaults(doc)


class JsonFileStore:
    """Store backed by a local JSON file."""

    def __init__(self, path: Path | str, *, admin_username: str = "admin") -> None:
        self.path = Path(path)
        self.admin_username = admin_username

    def fetch_all(self) -> dict:
        try:
            raw = self.path.read_text(encoding="utf-8") if self.path.exists() else ""
        except OSError as exc:
            logger.error("store_read_failed", path=str(self.path), error=str(exc))
            raise StoreError("read", f"Could not read {self.path}") from exc
        if not raw.strip():
            doc = initial_document(self.admin_username)
            try:
                self.replace_all(doc)
            except StoreError as exc:
                # first-run creation is part of the read
                raise StoreError("read", exc.message) from exc
            logger.info("store_initialized", path=str(self.path))
            return doc
        return parse_document(raw, str(self.path))

    def replace_all(self, doc: dict) -> None:
        try:
            payload = json.dumps(doc, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as exc:
            raise StoreError("write", "Document is not JSON serializable") from exc
        tmp_name: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            # readers see either the old or the new document, never half of one
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error("store_write_failed", path=str(self.path), error=str(exc))
            raise StoreError("write", f"Could not write {self.path}") from exc
        logger.debug("store_saved", path=str(self.path), users=len(doc.get("users") or []), payments=len(doc.get("payments") or []))


class MemoryStore:
    """In-process store used by tests and tooling."""

    def __init__(self, doc: dict | None = None, *, admin_username: str = "admin") -> None:
        self._doc = copy.deepcopy(doc) if doc is not None else initial_document(admin_username)
        self.writes = 0

    def fetch_all(self) -> dict:
        return db_defaults(copy.deepcopy(self._doc))

    def replace_all(self, doc: dict) -> None:
        self._doc = copy.deepcopy(doc)
        self.writes += 1
