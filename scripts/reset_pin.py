#!/usr/bin/env python3
"""
Blank an account's PIN so the next login runs first-time setup again.

Usage:
  python scripts/reset_pin.py --username 99/01
"""
from __future__ import annotations

import argparse
import sys

from villagepay.services.user_service import UserService


def main(argv: list[str] | None = None, service: UserService | None = None) -> None:
    ap = argparse.ArgumentParser(description="Reset a Village Pay PIN")
    ap.add_argument("--username", required=True, help="Account to reset")
    args = ap.parse_args(argv)

    username = (args.username or "").strip()
    if not username:
        raise SystemExit("Invalid username")
    svc = service or UserService()
    svc.reset_password(username)
    print("OK: PIN reset")
    print(f"  Username: {username}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
