from __future__ import annotations

import logging
import sqlite3
from typing import Any, Optional, Sequence

from src.domain.entities import Repair
from src.domain.exceptions import DuplicateResourceError

from ..repairs import RepairsRepo

logger = logging.getLogger(__name__)

_COLUMNS = "repair_id, name, title, brand, issue, phone_number"


def _row_to_repair(row: Sequence[Any]) -> Repair:
    return Repair(
        id=row[0],
        name=row[1],
        title=row[2],
        brand=row[3],
        issue=row[4],
        phone_number=row[5],
    )


def _is_phone_conflict(exc: sqlite3.IntegrityError) -> bool:
    return "repairs.phone_number" in str(exc)


class RepairsRepoSqlite(RepairsRepo):
    """SQLite implementation of :class:`RepairsRepo`."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS repairs (
                repair_id INTEGER PRIMARY KEY,
                name TEXT NOT NULL,
                title TEXT NOT NULL,
                brand TEXT NOT NULL,
                issue TEXT NOT NULL,
                phone_number INTEGER NOT NULL UNIQUE
            )
            """
        )
        self._conn.commit()

    def list_all(self) -> list[Repair]:
        cur = self._conn.execute(f"SELECT {_COLUMNS} FROM repairs ORDER BY repair_id")
        return [_row_to_repair(row) for row in cur.fetchall()]

    def get_by_id(self, repair_id: int) -> Optional[Repair]:
        cur = self._conn.execute(
            f"SELECT {_COLUMNS} FROM repairs WHERE repair_id = ?",
            (repair_id,),
        )
        row = cur.fetchone()
        if row:
            return _row_to_repair(row)
        return None

    def exists_by_id(self, repair_id: int) -> bool:
        cur = self._conn.execute("SELECT 1 FROM repairs WHERE repair_id = ?", (repair_id,))
        return cur.fetchone() is not None

    def exists_by_phone_number(self, phone_number: int) -> bool:
        cur = self._conn.execute(
            "SELECT 1 FROM repairs WHERE phone_number = ?", (phone_number,)
        )
        return cur.fetchone() is not None

    def insert(self, repair: Repair) -> int:
        values = (repair.name, repair.title, repair.brand, repair.issue, repair.phone_number)
        try:
            if repair.id is None:
                cur = self._conn.execute(
                    "INSERT INTO repairs (name, title, brand, issue, phone_number)"
                    " VALUES (?, ?, ?, ?, ?)",
                    values,
                )
            else:
                cur = self._conn.execute(
                    f"INSERT INTO repairs ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
                    (repair.id, *values),
                )
        except sqlite3.IntegrityError as exc:
            self._conn.rollback()
            if _is_phone_conflict(exc):
                raise DuplicateResourceError() from exc
            raise
        self._conn.commit()
        rowid = cur.lastrowid
        if rowid is None:
            raise RuntimeError("SQLite insert failed: no lastrowid (table: repairs)")
        logger.debug("Inserted repair", extra={"repair_id": rowid})
        return int(rowid)

    def update(self, repair: Repair) -> None:
        if repair.id is None:
            raise ValueError("Cannot update a repair without id")
        try:
            self._conn.execute(
                "UPDATE repairs SET name = ?, title = ?, brand = ?, issue = ?,"
                " phone_number = ? WHERE repair_id = ?",
                (
                    repair.name,
                    repair.title,
                    repair.brand,
                    repair.issue,
                    repair.phone_number,
                    repair.id,
                ),
            )
        except sqlite3.IntegrityError as exc:
            self._conn.rollback()
            if _is_phone_conflict(exc):
                raise DuplicateResourceError() from exc
            raise
        self._conn.commit()

    def delete(self, repair_id: int) -> None:
        self._conn.execute(
            "DELETE FROM repairs WHERE repair_id = ?",
            (repair_id,),
        )
        self._conn.commit()
