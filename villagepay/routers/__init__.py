"""
FastAPI routers grouped by domain (store, auth, payments, settings).

Each module exposes an APIRouter included by app.py. Services are looked up
on request.app.state so tests can swap the store behind them.
"""
