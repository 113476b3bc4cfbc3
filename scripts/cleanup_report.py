#!/usr/bin/env python3
"""
Print the data cleanup report as JSON. Read-only: nothing is deleted.

Usage:
  python scripts/cleanup_report.py [--retention-days 90]
"""
from __future__ import annotations

import argparse
import json
import sys

from dymnds.core.config import get_settings
from dymnds.core.logging_setup import configure_logging
from dymnds.core.utils import iso_utc
from dymnds.services.cleanup_service import CleanupService


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Print the orphaned/stale data report")
    ap.add_argument("--retention-days", type=int, default=settings.cleanup_retention_days)
    args = ap.parse_args()

    configure_logging(settings.log_level)
    report = CleanupService().build_report(args.retention_days)
    payload = {"generated_at": iso_utc(), "total_issues": report.total_issues(), "report": report.to_dict()}
    print(json.dumps(payload, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
