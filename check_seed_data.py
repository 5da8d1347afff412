#!/usr/bin/env python3
"""
Validate a Wonders seed data file without starting the API.

The file is parsed exactly as the application does at startup.  On
success the number of wonders and their names are printed.

Usage:
    python check_seed_data.py --path ./seed-data.json

Exit codes: 0 valid, 1 file not found, 2 file could not be parsed.
"""

import argparse
import sys

from wonders_api.app.core.errors import SeedFileNotFoundError, SeedParseError
from wonders_api.app.services.seed_service import SeedService


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Validate a Wonders seed data file.")
    ap.add_argument("--path", default="seed-data.json", help="Path to the JSON seed file (default: seed-data.json)")
    ap.add_argument("--quiet", action="store_true", help="Only print the summary line")
    args = ap.parse_args(argv)

    try:
        records = SeedService.load_from(args.path)
    except SeedFileNotFoundError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1
    except SeedParseError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 2

    if not args.quiet:
        for record in records:
            print(f"    {record.name} ({record.country}, {record.discovery_year})")
    print(f"[+] {len(records)} wonders in {args.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
