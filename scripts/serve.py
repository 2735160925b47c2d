#!/usr/bin/env python3
"""
Run the Village Pay API with uvicorn.

Usage:
  python scripts/serve.py [--host 0.0.0.0] [--port 3001] [--reload]
"""
from __future__ import annotations

import argparse
import os

import uvicorn


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Run the Village Pay API")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=int(os.getenv("PORT", "3001")))
    ap.add_argument("--reload", action="store_true", help="Reload on code changes (dev only)")
    args = ap.parse_args(argv)
    uvicorn.run(
        "villagepay.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
