"""Tickets the shop starts out with when no persistent store is used."""

from __future__ import annotations

from src.domain.entities import Repair

DEMO_REPAIRS: tuple[Repair, ...] = (
    Repair(
        name="Mucomba",
        title="Nokia 3310",
        brand="Nokia",
        issue="The phone is not charging",
        phone_number=722000000,
    ),
    Repair(
        name="Ruger",
        title="Lenovo 500",
        brand="Lenovo",
        issue="The Screen is broken",
        phone_number=722111111,
    ),
)
