"""Domain Types — identity aliases and entity kinds shared across the core.

Invariants:
    - Identifiers are opaque strings; an id from one kind is never valid in another
    - EntityKind values double as store names and resource names in error messages

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
EventId = NewType("EventId", str)
LocationId = NewType("LocationId", str)
ParticipantId = NewType("ParticipantId", str)

Record = dict[str, Any]


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """The four entity kinds, one store each."""
    USER = "user"
    EVENT = "event"
    LOCATION = "location"
    PARTICIPANT = "participant"

    @property
    def label(self) -> str:
        return self.value.capitalize()


# Foreign-key fields per kind — everything else is a plain attribute
FOREIGN_KEYS: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.USER: (),
    EntityKind.EVENT: ("user_id", "location_id"),
    EntityKind.LOCATION: ("event_id",),
    EntityKind.PARTICIPANT: ("user_id", "event_id"),
}
