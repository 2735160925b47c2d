"""
HTTP contract: whole-document endpoints plus the JSON API over the services.
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from villagepay.app import create_app
from villagepay.repositories import JsonFileStore, StoreError


class BrokenStore:
    def fetch_all(self) -> dict:
        raise StoreError("read", "disk on fire")

    def replace_all(self, doc: dict) -> None:
        raise StoreError("write", "disk on fire")


@pytest.fixture()
def client(config, store):
    return TestClient(create_app(config, store))


def test_get_data_returns_whole_document(client, store):
    resp = client.get("/api/data")

    assert resp.status_code == 200
    assert resp.json() == store.fetch_all()


def test_save_replaces_whole_document(client, store):
    doc = {"users": [], "payments": [{"id": "1", "anything": "goes"}], "settings": {"bankName": "X"}}

    resp = client.post("/api/save", json=doc)

    assert resp.status_code == 200
    assert resp.json() == {"message": "Data saved successfully"}
    assert store.fetch_all() == doc
    assert client.get("/api/data").json() == doc


def test_file_store_first_run_over_http(config):
    client = TestClient(create_app(config, JsonFileStore(config.data_file)))

    resp = client.get("/api/data")

    assert resp.status_code == 200
    assert resp.json()["users"][0]["role"] == "admin"
    assert config.data_file.exists()


def test_store_failures_are_500(config):
    client = TestClient(create_app(config, BrokenStore()))

    read = client.get("/api/data")
    assert read.status_code == 500
    assert read.json() == {"message": "Error reading database"}

    write = client.post("/api/save", json={"users": [], "payments": [], "settings": {}})
    assert write.status_code == 500
    assert write.json() == {"message": "Error saving database"}

    assert client.post("/api/auth/status", json={"username": "99/01"}).status_code == 500


def test_first_time_setup_and_login(client):
    status = client.post("/api/auth/status", json={"username": "99/01"})
    assert status.json() == {"exists": False, "isSetup": False}

    setup = client.post(
        "/api/auth/setup-password",
        json={"username": "99/01", "password": "1234", "confirmPassword": "1234"},
    )
    assert setup.status_code == 200
    body = setup.json()
    assert body["result"] == "created"
    assert body["user"]["username"] == "99/01"
    assert "password" not in body["user"]

    login = client.post("/api/auth/login", json={"username": "99/01", "password": "1234", "role": "user"})
    assert login.status_code == 200
    assert login.json()["isSetup"] is True
    assert "password" not in login.json()

    wrong = client.post("/api/auth/login", json={"username": "99/01", "password": "1234", "role": "admin"})
    assert wrong.status_code == 401
    assert wrong.json() == {"detail": "incorrect credentials"}


def test_admin_login_defaults_username(client):
    setup = client.post(
        "/api/auth/setup-password",
        json={"username": "admin", "password": "9999", "confirmPassword": "9999"},
    )
    assert setup.json()["result"] == "updated"

    resp = client.post("/api/auth/login", json={"password": "9999", "role": "admin"})

    assert resp.status_code == 200
    assert resp.json()["role"] == "admin"


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "1/1", "password": "123", "confirmPassword": "123"},
        {"username": "1/1", "password": "12a4", "confirmPassword": "12a4"},
        {"username": "1/1", "password": "1234", "confirmPassword": "4321"},
        {"username": "", "password": "1234", "confirmPassword": "1234"},
    ],
)
def test_setup_password_validation(client, store, payload):
    resp = client.post("/api/auth/setup-password", json=payload)

    assert resp.status_code == 422
    assert store.writes == 0


def test_blank_pin_never_reaches_login(client):
    # the seeded admin has an empty password until setup
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "", "role": "admin"})

    assert resp.status_code == 422


def test_change_password(client):
    client.post("/api/auth/setup-password", json={"username": "3/3", "password": "1111", "confirmPassword": "1111"})

    bad = client.post(
        "/api/auth/change-password",
        json={"username": "3/3", "currentPassword": "0000", "newPassword": "2222", "confirmPassword": "2222"},
    )
    assert bad.status_code == 401

    ok = client.post(
        "/api/auth/change-password",
        json={"username": "3/3", "currentPassword": "1111", "newPassword": "2222", "confirmPassword": "2222"},
    )
    assert ok.status_code == 200
    assert client.post("/api/auth/login", json={"username": "3/3", "password": "2222"}).status_code == 200


def test_payment_flow(client):
    created = client.post(
        "/api/payments",
        json={"houseNo": "99/01", "amount": 500, "month": "มกราคม", "slipFileName": "slip.png", "status": "APPROVED"},
    )
    assert created.status_code == 201
    payment = created.json()
    assert payment["status"] == "PENDING"
    client.post("/api/payments", json={"houseNo": "99/02", "amount": 500})

    mine = client.get("/api/payments", params={"houseNo": "99/01"}).json()
    assert [p["id"] for p in mine] == [payment["id"]]

    review = client.post(f"/api/payments/{payment['id']}/status", json={"status": "APPROVED"})
    assert review.json()["updated"] is True
    assert review.json()["payment"] == {**payment, "status": "APPROVED"}

    assert client.get("/api/payments", params={"status": "PENDING"}).json()[0]["houseNo"] == "99/02"
    assert client.get("/api/payments/summary").json() == {
        "totalApproved": 500,
        "pendingCount": 1,
        "approvedCount": 1,
        "rejectedCount": 0,
    }


def test_unknown_payment_id_is_not_an_error(client):
    resp = client.post("/api/payments/nope/status", json={"status": "REJECTED"})

    assert resp.status_code == 200
    assert resp.json() == {"updated": False, "payment": None}


def test_status_must_be_a_review_outcome(client):
    resp = client.post("/api/payments/1/status", json={"status": "PENDING"})

    assert resp.status_code == 422


def test_settings_roundtrip(client):
    assert client.get("/api/settings").json()["contactNumber"] == "02-123-4567"

    client.post("/api/settings", json={"bankName": "ธนาคารกสิกรไทย (KBANK)", "accountNumber": "111"})
    resp = client.post("/api/settings", json={"bankName": "X"})

    assert resp.json() == {
        "paymentQrCode": None,
        "bankName": "X",
        "accountName": "",
        "accountNumber": "111",
        "contactNumber": "02-123-4567",
    }
    assert "ธนาคารออมสิน (GSB)" in client.get("/api/settings/banks").json()


def test_access_log_does_not_break_root(client):
    assert client.get("/").json() == {"message": "Village Pay API running"}


def test_payment_amount_must_be_positive(client, store):
    resp = client.post("/api/payments", json={"houseNo": "1/1", "amount": 0})

    assert resp.status_code == 422
    assert store.writes == 0


def test_partial_records_saved_by_clients_still_list_and_review(client, store):
    doc = store.fetch_all()
    doc["payments"] = [{"id": "1", "houseNo": "9/9", "amount": 500, "status": "PENDING"}]
    assert client.post("/api/save", json=doc).status_code == 200

    listed = client.get("/api/payments")
    assert listed.status_code == 200
    assert listed.json()[0]["houseNo"] == "9/9"
    assert client.get("/api/payments/summary").json()["pendingCount"] == 1

    review = client.post("/api/payments/1/status", json={"status": "APPROVED"})
    assert review.status_code == 200
    assert review.json()["payment"]["status"] == "APPROVED"
    # the stored record is not padded with defaults
    assert store.fetch_all()["payments"] == [{"id": "1", "houseNo": "9/9", "amount": 500, "status": "APPROVED"}]


def test_first_run_failure_reports_read_error(config, tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x", encoding="utf-8")
    client = TestClient(create_app(config, JsonFileStore(blocker / "db.json")))

    resp = client.get("/api/data")

    assert resp.status_code == 500
    assert resp.json() == {"message": "Error reading database"}
