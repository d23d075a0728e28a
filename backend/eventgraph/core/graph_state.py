"""Graph State — the four entity stores plus the guard that serializes access to them.

Invariants:
    - Exactly one EntityStore per EntityKind, created empty
    - Every read or mutation made through the operation layer holds `guard`
    - State is owned (held by the app or a test), never a module-level global

Design Decisions:
    - One RLock for all four stores: operations never span stores while mutating,
      but resolvers read across stores and must see a consistent snapshot
    - RLock (not Lock): a caller holding the guard for a composite read
      (record + its relations) can still call operations and resolvers
"""

import threading
from dataclasses import dataclass, field

from eventgraph.core.domain_types import EntityKind
from eventgraph.core.entity_store import EntityStore


@dataclass
class GraphState:
    """Process-resident dataset — pure container, no IO."""

    users: EntityStore = field(default_factory=lambda: EntityStore(EntityKind.USER))
    events: EntityStore = field(default_factory=lambda: EntityStore(EntityKind.EVENT))
    locations: EntityStore = field(
        default_factory=lambda: EntityStore(EntityKind.LOCATION),
    )
    participants: EntityStore = field(
        default_factory=lambda: EntityStore(EntityKind.PARTICIPANT),
    )
    guard: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def store_for(self, kind: EntityKind) -> EntityStore:
        return {
            EntityKind.USER: self.users,
            EntityKind.EVENT: self.events,
            EntityKind.LOCATION: self.locations,
            EntityKind.PARTICIPANT: self.participants,
        }[kind]

    @property
    def counts(self) -> dict[str, int]:
        with self.guard:
            return {kind.value: len(self.store_for(kind)) for kind in EntityKind}
