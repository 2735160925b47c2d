#!/usr/bin/env python3
"""
Provision a resident (or admin) account that picks its PIN on first login.

Usage:
  python scripts/add_resident.py --username 99/01 [--name "Somchai"] [--fee 500] [--admin]
"""
from __future__ import annotations

import argparse
import sys

from villagepay.services.user_service import UserService


def main(argv: list[str] | None = None, service: UserService | None = None) -> None:
    ap = argparse.ArgumentParser(description="Provision a Village Pay account")
    ap.add_argument("--username", required=True, help="House number (ex.: 99/01) or admin username")
    ap.add_argument("--name", default="", help="Display name (default: the username)")
    ap.add_argument("--fee", type=float, help="Monthly common fee (default: DEFAULT_COMMON_FEE)")
    ap.add_argument("--admin", action="store_true", help="Create an admin instead of a resident")
    args = ap.parse_args(argv)

    fee = args.fee
    if fee is not None and fee.is_integer():
        fee = int(fee)
    svc = service or UserService()
    user = svc.provision_user(
        args.username,
        name=args.name,
        role="admin" if args.admin else "user",
        common_fee=fee,
    )
    print("OK: account created")
    print(f"  Username: {user.username}")
    print(f"  Role: {user.role}")
    if user.common_fee is not None:
        print(f"  Fee: {user.common_fee}")
    print("  PIN: chosen on first login")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
