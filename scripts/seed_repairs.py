from __future__ import annotations

import argparse
import os
import sqlite3
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import for type checkers only
    from src.repositories.repairs import RepairsRepo


def ensure_import_path() -> None:
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


def seed_demo_repairs(repo: RepairsRepo) -> tuple[int, int]:
    """Register the demo repairs, skipping any whose phone number is taken."""
    from src.application.services.repair_service import RepairService
    from src.domain.entities import RegistrationRequest
    from src.domain.exceptions import DuplicateResourceError
    from src.repositories.memory.demo_data import DEMO_REPAIRS

    svc = RepairService(repo)
    inserted = 0
    skipped = 0
    for repair in DEMO_REPAIRS:
        try:
            svc.add(RegistrationRequest(**repair.model_dump(exclude={"id"})))
        except DuplicateResourceError:
            skipped += 1
            continue
        inserted += 1
    return inserted, skipped


def main(argv: list[str] | None = None) -> int:
    ensure_import_path()

    from src.config.settings import settings
    from src.repositories.sqlite.repairs_sqlite import RepairsRepoSqlite

    parser = argparse.ArgumentParser(description="Seed the repairs table with demo tickets")
    parser.add_argument(
        "--db",
        default=settings.db_path,
        help="Path to SQLite DB file",
    )
    args = parser.parse_args(argv)

    db_path = os.path.abspath(args.db)
    os.makedirs(os.path.dirname(db_path), exist_ok=True)

    conn = sqlite3.connect(db_path)
    try:
        ins, skip = seed_demo_repairs(RepairsRepoSqlite(conn))
    finally:
        conn.close()

    print(f"Repairs seeding done. inserted={ins} skipped={skip}")
    print(f"DB: {db_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
