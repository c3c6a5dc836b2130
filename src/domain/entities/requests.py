"""Caller-supplied shapes accepted by the repair service.

Neither is persisted. ``RegistrationRequest`` carries a complete new repair;
``UpdateRequest`` is a per-field patch where an absent or ``None`` field means
"leave unchanged".
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ..value_objects.ids import PhoneNumber
from .repair import TEXT_FIELDS, check_phone_number, clean_text


class RegistrationRequest(BaseModel):
    name: str
    title: str
    brand: str
    issue: str
    phone_number: PhoneNumber

    model_config = ConfigDict(frozen=True)

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _clean_text(cls, v: Any) -> Any:
        return clean_text(v)

    @field_validator("phone_number")
    @classmethod
    def _check_phone_number(cls, v: int) -> int:
        return check_phone_number(v)


class UpdateRequest(BaseModel):
    name: str | None = None
    title: str | None = None
    brand: str | None = None
    phone_number: PhoneNumber | None = None
    issue: str | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _clean_text(cls, v: Any) -> Any:
        return clean_text(v)

    @field_validator("phone_number")
    @classmethod
    def _check_phone_number(cls, v: int | None) -> int | None:
        if v is None:
            return v
        return check_phone_number(v)

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller actually supplied a value for."""
        return {k: v for k, v in self.model_dump().items() if v is not None}
