"""Whole-document endpoints: fetch everything, replace everything."""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends

from villagepay.repositories import DocumentStore
from villagepay.routers.deps import get_store

router = APIRouter(prefix="/api", tags=["store"])


@router.get("/data")
def read_data(store: DocumentStore = Depends(get_store)):
    return store.fetch_all()


@router.post("/save")
def save_data(payload: dict = Body(...), store: DocumentStore = Depends(get_store)):
    # no schema validation: the caller owns the shape of the document
    store.replace_all(payload)
    return {"message": "Data saved successfully"}
