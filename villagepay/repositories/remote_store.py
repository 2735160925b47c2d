"""Store that reads/writes the document through another instance's HTTP API."""

from __future__ import annotations

import httpx

from villagepay.core.log import get_logger
from villagepay.repositories.json_storage import StoreError, db_defaults

logger = get_logger(__name__)

DATA_PATH = "/api/data"
SAVE_PATH = "/api/save"


class RemoteStore:
    """
    Fetches the entire document with GET /api/data and replaces it with
    POST /api/save. Any transport error or non-2xx answer becomes a StoreError.
    """

    def __init__(self, base_url: str = "", *, timeout: float = 10.0, client: httpx.Client | None = None) -> None:
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def fetch_all(self) -> dict:
        try:
            response = self._client.get(DATA_PATH)
            response.raise_for_status()
            doc = response.json()
        except httpx.HTTPError as exc:
            logger.error("remote_store_read_failed", error=str(exc))
            raise StoreError("read", "Could not fetch the remote document") from exc
        except ValueError as exc:
            raise StoreError("read", "Remote document is not valid JSON") from exc
        if not isinstance(doc, dict):
            raise StoreError("read", "Remote document is not a JSON object")
        return db_defaults(doc)

    def replace_all(self, doc: dict) -> None:
        try:
            response = self._client.post(SAVE_PATH, json=doc)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("remote_store_write_failed", error=str(exc))
            raise StoreError("write", "Could not save the remote document") from exc

    def close(self) -> None:
        self._client.close()
