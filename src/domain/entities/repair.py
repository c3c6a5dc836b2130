from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..value_objects.ids import PhoneNumber, RepairId

TEXT_FIELDS = ("name", "title", "brand", "issue")
# Largest value a SQLite INTEGER column can hold
MAX_PHONE_NUMBER = 2**63 - 1


def clean_text(v: Any) -> Any:
    """Strip surrounding whitespace and reject blank strings."""
    if isinstance(v, str):
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
    return v


def check_phone_number(v: int) -> int:
    if v <= 0:
        raise ValueError("phone_number must be a positive integer")
    if v > MAX_PHONE_NUMBER:
        raise ValueError("phone_number is too large")
    return v


class Repair(BaseModel):
    """A repair ticket for one customer device."""

    id: RepairId | None = Field(
        default=None, description="Store-assigned identifier, None until persisted"
    )
    name: str = Field(..., description="Customer name")
    title: str = Field(..., description="Device model or title")
    brand: str = Field(..., description="Device brand")
    issue: str = Field(..., description="Free-text description of the fault")
    phone_number: PhoneNumber = Field(..., description="Customer phone, unique per repair")

    model_config = ConfigDict(frozen=True)

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _clean_text(cls, v: Any) -> Any:
        return clean_text(v)

    @field_validator("phone_number")
    @classmethod
    def _check_phone_number(cls, v: int) -> int:
        return check_phone_number(v)

    def merged(self, changes: Mapping[str, Any]) -> "Repair":
        """Return a copy carrying ``changes``; the identifier is never overwritten."""
        data = self.model_dump()
        data.update({k: v for k, v in changes.items() if k != "id"})
        return Repair(**data)
