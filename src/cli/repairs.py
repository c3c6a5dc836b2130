from __future__ import annotations

import argparse
import os
import sqlite3
import sys
from typing import Iterable, List, Optional, Sequence

from pydantic import ValidationError

from src.application.services.repair_service import RepairService
from src.config.settings import settings
from src.domain.entities import RegistrationRequest, Repair, UpdateRequest
from src.domain.exceptions import (
    DuplicateResourceError,
    RepairError,
    RequestValidationError,
    ResourceNotFoundError,
)
from src.logging_config import get_logger
from src.repositories.memory.demo_data import DEMO_REPAIRS
from src.repositories.memory.repairs_memory import RepairsRepoMemory
from src.repositories.repairs import RepairsRepo
from src.repositories.sqlite.repairs_sqlite import RepairsRepoSqlite

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2
EXIT_CONFLICT = 3

_EXIT_CODES: dict[type[RepairError], int] = {
    ResourceNotFoundError: EXIT_NOT_FOUND,
    RequestValidationError: EXIT_INVALID,
    DuplicateResourceError: EXIT_CONFLICT,
}


def _format_repair(r: Repair) -> str:
    return f"[id={r.id}] {r.name} | {r.brand} {r.title} | {r.issue} | phone={r.phone_number}"


def _format_rows(rows: Iterable[Repair]) -> str:
    out_lines: List[str] = [_format_repair(r) for r in rows]
    return "\n".join(out_lines)


def _add_field_options(p: argparse.ArgumentParser, *, required: bool) -> None:
    p.add_argument("--name", required=required, help="Customer name")
    p.add_argument("--title", required=required, help="Device model or title")
    p.add_argument("--brand", required=required, help="Device brand")
    p.add_argument("--issue", required=required, help="Description of the fault")
    p.add_argument(
        "--phone", type=int, required=required, metavar="NUMBER", help="Customer phone number"
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Manage device repair tickets")
    p.add_argument(
        "--db",
        default=settings.db_path,
        help="Path to SQLite DB file (will be created if missing)",
    )
    p.add_argument(
        "--store",
        choices=("sqlite", "memory"),
        default=settings.store_backend,
        help="Record store backend",
    )
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all repairs")

    get_p = sub.add_parser("get", help="Show one repair")
    get_p.add_argument("id", type=int)

    add_p = sub.add_parser("add", help="Register a new repair")
    _add_field_options(add_p, required=True)

    upd_p = sub.add_parser("update", help="Change fields of an existing repair")
    upd_p.add_argument("id", type=int)
    _add_field_options(upd_p, required=False)

    del_p = sub.add_parser("delete", help="Remove a repair")
    del_p.add_argument("id", type=int)
    return p


def _open_repo(store: str, db_path: str) -> tuple[RepairsRepo, Optional[sqlite3.Connection]]:
    if store == "memory":
        return RepairsRepoMemory(DEMO_REPAIRS), None
    db_path = os.path.abspath(db_path)
    os.makedirs(os.path.dirname(db_path), exist_ok=True)
    conn = sqlite3.connect(db_path)
    return RepairsRepoSqlite(conn), conn


def _run(svc: RepairService, args: argparse.Namespace) -> None:
    if args.command == "list":
        rows = svc.list_all()
        if not rows:
            print("No repairs found.")
        else:
            print(_format_rows(rows))
    elif args.command == "get":
        print(_format_repair(svc.get(args.id)))
    elif args.command == "add":
        svc.add(
            RegistrationRequest(
                name=args.name,
                title=args.title,
                brand=args.brand,
                issue=args.issue,
                phone_number=args.phone,
            )
        )
        print("Repair added.")
    elif args.command == "update":
        svc.update(
            args.id,
            UpdateRequest(
                name=args.name,
                title=args.title,
                brand=args.brand,
                phone_number=args.phone,
                issue=args.issue,
            ),
        )
        print("Repair updated.")
    elif args.command == "delete":
        svc.delete_by_id(args.id)
        print("Repair deleted.")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = get_logger(settings.log_level)

    repo, conn = _open_repo(args.store, args.db)
    try:
        _run(RepairService(repo), args)
    except RepairError as exc:
        logger.warning(
            "Repair command rejected",
            extra={"command": args.command, "error": type(exc).__name__},
        )
        print(f"Error: {exc}", file=sys.stderr)
        return _EXIT_CODES.get(type(exc), EXIT_INVALID)
    except ValidationError as exc:
        logger.warning(
            "Repair command has invalid fields",
            extra={"command": args.command, "error_count": exc.error_count()},
        )
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INVALID
    finally:
        if conn is not None:
            conn.close()
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
