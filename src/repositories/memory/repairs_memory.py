from __future__ import annotations

import logging
from typing import Iterable, Optional

from src.domain.entities import Repair
from src.domain.value_objects.ids import RepairId

from ..repairs import RepairsRepo

logger = logging.getLogger(__name__)


class RepairsRepoMemory(RepairsRepo):
    """In-memory implementation of :class:`RepairsRepo`.

    Each instance owns its own record set. ``seed`` repairs are inserted in
    order on construction; ids are assigned as ``max(existing) + 1``, so the
    id of a deleted highest repair is handed out again, like a SQLite rowid.
    """

    def __init__(self, seed: Iterable[Repair] = ()) -> None:
        self._repairs: dict[int, Repair] = {}
        for repair in seed:
            self.insert(repair)

    def list_all(self) -> list[Repair]:
        return list(self._repairs.values())

    def get_by_id(self, repair_id: int) -> Optional[Repair]:
        return self._repairs.get(repair_id)

    def exists_by_id(self, repair_id: int) -> bool:
        return repair_id in self._repairs

    def exists_by_phone_number(self, phone_number: int) -> bool:
        return any(r.phone_number == phone_number for r in self._repairs.values())

    def insert(self, repair: Repair) -> int:
        if repair.id is None:
            repair_id = max(self._repairs, default=0) + 1
        elif repair.id in self._repairs:
            raise ValueError(f"Repair id {repair.id} is already stored")
        else:
            repair_id = int(repair.id)
        self._repairs[repair_id] = repair.model_copy(update={"id": RepairId(repair_id)})
        logger.debug("Inserted repair", extra={"repair_id": repair_id})
        return repair_id

    def update(self, repair: Repair) -> None:
        if repair.id is None:
            raise ValueError("Cannot update a repair without id")
        if repair.id in self._repairs:
            self._repairs[repair.id] = repair

    def delete(self, repair_id: int) -> None:
        self._repairs.pop(repair_id, None)
