"""Entry point for ASGI servers: `uvicorn villagepay.app_factory:app`."""
from villagepay.app import create_app

app = create_app()

__all__ = ["app", "create_app"]
