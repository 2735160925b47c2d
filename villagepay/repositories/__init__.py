"""
Persistence adapters.

Every adapter exposes fetch_all()/replace_all() over the whole document;
services depend on that contract rather than on a concrete file or URL.
"""

from __future__ import annotations

from villagepay.core.config import Config, get_config
from villagepay.repositories.json_storage import DocumentStore, JsonFileStore, MemoryStore, StoreError
from villagepay.repositories.remote_store import RemoteStore


def build_store(config: Config | None = None) -> DocumentStore:
    """Remote store when STORE_URL is set, local JSON file otherwise."""
    cfg = config or get_config()
    if cfg.store_url:
        return RemoteStore(cfg.store_url, timeout=cfg.store_timeout)
    return JsonFileStore(cfg.data_file, admin_username=cfg.admin_username)


__all__ = ["DocumentStore", "JsonFileStore", "MemoryStore", "RemoteStore", "StoreError", "build_store"]
