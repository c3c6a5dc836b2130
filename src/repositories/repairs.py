from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Repair


class RepairsRepo(ABC):
    """Record store interface for :class:`Repair` entities.

    Implementations own id assignment and their own consistency; business
    rules such as phone number uniqueness live in the service layer.
    """

    @abstractmethod
    def list_all(self) -> list[Repair]:
        """Return every stored repair in store order."""

    @abstractmethod
    def get_by_id(self, repair_id: int) -> Optional[Repair]:
        """Return a repair by its identifier if present."""

    @abstractmethod
    def exists_by_id(self, repair_id: int) -> bool:
        """Return True if a repair with this identifier is stored."""

    @abstractmethod
    def exists_by_phone_number(self, phone_number: int) -> bool:
        """Return True if any stored repair uses this phone number."""

    @abstractmethod
    def insert(self, repair: Repair) -> int:
        """Persist a new repair and return the assigned identifier."""

    @abstractmethod
    def update(self, repair: Repair) -> None:
        """Overwrite the stored repair that has the same identifier."""

    @abstractmethod
    def delete(self, repair_id: int) -> None:
        """Remove a repair by its identifier."""
