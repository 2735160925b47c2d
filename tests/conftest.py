from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the villagepay package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from villagepay.core import config as core_config  # noqa: E402
from villagepay.repositories import MemoryStore  # noqa: E402


@pytest.fixture()
def config(tmp_path, monkeypatch):
    """Config pointing at a temporary data file, with env caches reset."""
    monkeypatch.setenv("DATA_FILE", str(tmp_path / "db.json"))
    monkeypatch.delenv("STORE_URL", raising=False)
    monkeypatch.delenv("DEFAULT_COMMON_FEE", raising=False)
    monkeypatch.delenv("DEFAULT_CONTACT_NUMBER", raising=False)
    monkeypatch.delenv("ADMIN_USERNAME", raising=False)
    core_config.get_config.cache_clear()
    yield core_config.get_config()
    core_config.get_config.cache_clear()


@pytest.fixture()
def store():
    return MemoryStore()


@pytest.fixture()
def empty_store():
    return MemoryStore({"users": [], "payments": [], "settings": {}})
