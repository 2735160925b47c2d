from __future__ import annotations

import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from villagepay.core.config import Config, get_config
from villagepay.core.log import configure_logging, get_logger
from villagepay.repositories import DocumentStore, StoreError, build_store
from villagepay.routers import auth as auth_router
from villagepay.routers import payments as payments_router
from villagepay.routers import settings as settings_router
from villagepay.routers import store as store_router
from villagepay.services.payment_service import PaymentService
from villagepay.services.settings_service import SettingsService
from villagepay.services.user_service import UserService

logger = get_logger(__name__)

STORE_ERROR_MESSAGES = {
    "read": "Error reading database",
    "write": "Error saving database",
}


class AccessLogMiddleware(BaseHTTPMiddleware):
    """One structured log line per request."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return response


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("store_error", operation=exc.operation, error=exc.message, path=request.url.path)
    message = STORE_ERROR_MESSAGES.get(exc.operation, "Error accessing database")
    return JSONResponse({"message": message}, status_code=500)


def create_app(config: Config | None = None, store: DocumentStore | None = None) -> FastAPI:
    """Factory compatible with uvicorn (--factory) and with tests that inject a store."""
    cfg = config or get_config()
    configure_logging(cfg)
    doc_store = store if store is not None else build_store(cfg)

    app = FastAPI(title="Village Pay API")
    app.state.config = cfg
    app.state.store = doc_store
    app.state.user_service = UserService(store=doc_store, config=cfg)
    app.state.payment_service = PaymentService(store=doc_store)
    app.state.settings_service = SettingsService(store=doc_store, config=cfg)

    if cfg.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(cfg.cors_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(AccessLogMiddleware)
    app.add_exception_handler(StoreError, store_error_handler)

    app.include_router(store_router.router)
    app.include_router(auth_router.router)
    app.include_router(payments_router.router)
    app.include_router(settings_router.router)

    @app.get("/")
    def root():
        return {"message": "Village Pay API running"}

    logger.info("app_created", env=cfg.app_env, store=type(doc_store).__name__)
    return app
