#!/usr/bin/env python3
"""
Create (or update the password of) an admin account.

Usage:
  python scripts/add_admin.py --email ops@dymnds.ca --password 's3cret'
"""
from __future__ import annotations

import argparse
import sys

from dymnds.core.security import hash_password
from dymnds.core.utils import utcnow
from dymnds.repositories.sql_repository import SQLRepository


def main() -> None:
    ap = argparse.ArgumentParser(description="Create an admin account")
    ap.add_argument("--email", required=True, help="Admin e-mail (must be allow-listed via ADMIN_EMAILS)")
    ap.add_argument("--password", required=True, help="Plain password; stored as an Argon2 hash")
    args = ap.parse_args()

    email = (args.email or "").strip().lower()
    if "@" not in email:
        raise SystemExit("Invalid e-mail")
    if len(args.password or "") < 12:
        raise SystemExit("Password must have at least 12 characters")

    SQLRepository().upsert_user(email, hash_password(args.password), email_verified_at=utcnow())
    print(f"OK: admin account ready for {email}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
