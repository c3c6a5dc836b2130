"""Business-rule failures raised by the repair service.

All three are recoverable by the caller; the front end decides how to present
them (exit code, status code, message).
"""

from __future__ import annotations

REPAIR_NOT_FOUND = "Repair with id [{}] not found"
REPAIR_IS_NOT_FOUND = "Repair with id [{}] is not found"
PHONE_NUMBER_IN_USE = "Phone Number already in use"
NO_DATA_CHANGES = "No data changes found"


class RepairError(Exception):
    """Base class for repair service rejections."""


class ResourceNotFoundError(RepairError):
    """Raised when no repair exists with the requested identifier."""

    def __init__(self, repair_id: int, template: str = REPAIR_NOT_FOUND) -> None:
        super().__init__(template.format(repair_id))
        self.repair_id = repair_id


class DuplicateResourceError(RepairError):
    """Raised when a phone number is already registered to a repair."""

    def __init__(self, message: str = PHONE_NUMBER_IN_USE) -> None:
        super().__init__(message)


class RequestValidationError(RepairError):
    """Raised when an update request would not change anything."""

    def __init__(self, message: str = NO_DATA_CHANGES) -> None:
        super().__init__(message)
