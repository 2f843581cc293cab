from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from oneapply.database import Base, SessionLocal, engine  # noqa: E402
import oneapply.models  # noqa: F401,E402
from oneapply.services.profile_service import SqlProfileStore, normalize_profile  # noqa: E402
from oneapply.services.query_builder import build_query  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Load a profile JSON document into the profile store.")
    parser.add_argument("user_id", help="Opaque user id the profile is stored under.")
    parser.add_argument("profile_json", type=Path, help="Path to a JSON object with profile fields.")
    parser.add_argument("--create-tables", action="store_true", help="Create tables first (sqlite/dev only).")
    args = parser.parse_args(argv)

    try:
        data = json.loads(args.profile_json.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"cannot read {args.profile_json}: {exc}")
        return 1
    if not isinstance(data, dict):
        print("profile JSON must be an object")
        return 1

    if args.create_tables:
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        saved = SqlProfileStore(db).save(args.user_id, data)
    finally:
        db.close()

    query = build_query(normalize_profile(saved))
    print(f"saved profile for {args.user_id}")
    print(f"  query:            {query.query_string}")
    print(f"  employment_types: {query.employment_types}")
    print(f"  country:          {query.country_code}")
    print(f"  date_posted:      {query.date_posted}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
