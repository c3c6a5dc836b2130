from __future__ import annotations

from src.domain.entities import RegistrationRequest, Repair, UpdateRequest
from src.domain.exceptions import (
    REPAIR_IS_NOT_FOUND,
    DuplicateResourceError,
    RequestValidationError,
    ResourceNotFoundError,
)
from src.repositories.repairs import RepairsRepo


class RepairService:
    """Business rules for repair tickets on top of an injected record store.

    - Lookups by id fail with :class:`ResourceNotFoundError` instead of
      returning ``None``.
    - A phone number may belong to one repair only; collisions on add or
      update raise :class:`DuplicateResourceError`.
    - Updates are per-field patches; a patch that changes nothing raises
      :class:`RequestValidationError`.

    Every check runs before the store is written to, so a rejected call leaves
    the store untouched.
    """

    def __init__(self, repo: RepairsRepo) -> None:
        self._repo = repo

    def list_all(self) -> list[Repair]:
        return self._repo.list_all()

    def get(self, repair_id: int) -> Repair:
        repair = self._repo.get_by_id(repair_id)
        if repair is None:
            raise ResourceNotFoundError(repair_id, REPAIR_IS_NOT_FOUND)
        return repair

    def add(self, request: RegistrationRequest) -> None:
        if self._repo.exists_by_phone_number(request.phone_number):
            raise DuplicateResourceError()

        self._repo.insert(
            Repair(
                name=request.name,
                title=request.title,
                brand=request.brand,
                issue=request.issue,
                phone_number=request.phone_number,
            )
        )

    def delete_by_id(self, repair_id: int) -> None:
        if not self._repo.exists_by_id(repair_id):
            raise ResourceNotFoundError(repair_id)
        self._repo.delete(repair_id)

    def update(self, repair_id: int, request: UpdateRequest) -> None:
        current = self.get(repair_id)

        staged = {
            field: value
            for field, value in request.changes().items()
            if getattr(current, field) != value
        }

        # Only a number that differs from the repair's own one can collide
        if "phone_number" in staged and self._repo.exists_by_phone_number(
            staged["phone_number"]
        ):
            raise DuplicateResourceError()

        if not staged:
            raise RequestValidationError()

        self._repo.update(current.merged(staged))
