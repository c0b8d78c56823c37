"""
Seed script for the Waste Alert Hub record store.

Usage:
  - Dry run (default): python scripts/seed_db.py
  - Reset the configured store to seed data: python scripts/seed_db.py --apply
  - Use another backend for this run: python scripts/seed_db.py --apply --backend json

Behavior:
  - Builds the demo alerts, messages and notifications (timestamps relative to now).
  - Overwrites each record in the backend selected by STORAGE_BACKEND (or --backend).

NOTE: When applying to Firestore, ensure FIREBASE_CREDENTIALS_PATH (or application
default credentials) is configured in .env before running.
"""

import argparse
from typing import Dict, List

from app.config.backends import build_backend
from app.config.seed import RECORD_KEYS, build_seed_records
from app.core.errors import PersistenceUnavailable


def write_to_store(backend, seed: Dict[str, List[Dict]], apply: bool = False) -> int:
    written = 0
    for key in RECORD_KEYS:
        items = seed[key]
        print(f"Preparing: {key} ({len(items)} item(s))")
        if not apply:
            continue
        try:
            backend.save({key: items})
            written += 1
            print(f"Wrote: {key}")
        except PersistenceUnavailable as e:
            print(f"Failed to write {key}: {e.message}")
    return written


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--apply", action="store_true", help="Write seed to the store instead of dry-run")
    parser.add_argument("--backend", choices=["json", "memory", "firestore"], help="Override STORAGE_BACKEND")
    args = parser.parse_args()

    backend = build_backend(args.backend)
    print(f"Target backend: {backend.describe()}")

    write_to_store(backend, build_seed_records(), apply=args.apply)

    if args.apply:
        print("Seeding completed.")
    else:
        print("Dry run complete. Re-run with --apply to write to the store.")


if __name__ == "__main__":
    main()
