"""Operation Layer — create/update/delete/delete_all/get/list per entity kind.

Invariants:
    - create always assigns a fresh generated id; an `id` in the input is ignored
    - update is a shallow merge: supplied fields overwrite, absent fields survive,
      `id` is never overwritten
    - update/delete raise ResourceNotFoundError for unknown ids; get returns None
    - delete at index 0 is a normal hit (first record is deletable)
    - delete_all never fails and reports how many rows it removed
    - Each operation holds the state guard for its whole duration

Design Decisions:
    - Records are never mutated in place: update builds a new dict and replaces
      the slot, so records already handed out keep their old values
    - GraphOperations bundles the four kinds plus the resolvers over one state,
      so the façade depends on a single object
    - traverse() keeps the parent lookup and the relation scan atomic together;
      a delete cannot land between them
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, TypeVar

from eventgraph.core import relationships
from eventgraph.core.domain_types import EntityKind, Record
from eventgraph.core.entity_store import EntityStore
from eventgraph.core.errors import ResourceNotFoundError
from eventgraph.core.graph_state import GraphState
from eventgraph.core.identifiers import generate_id

T = TypeVar("T")


@dataclass
class EntityOperations:
    """CRUD over one entity kind of a GraphState."""

    state: GraphState
    kind: EntityKind

    @property
    def store(self) -> EntityStore:
        return self.state.store_for(self.kind)

    def create(self, data: Mapping[str, Any]) -> Record:
        fields = {k: v for k, v in data.items() if k != "id"}
        record = {"id": generate_id(), **fields}
        with self.state.guard:
            self.store.append(record)
        return record

    def update(self, record_id: str, data: Mapping[str, Any]) -> Record:
        with self.state.guard:
            index = self._index_or_raise(record_id)
            current = self.store.records[index]
            changes = {k: v for k, v in data.items() if k != "id"}
            updated = {**current, **changes}
            self.store.replace(index, updated)
        return updated

    def delete(self, record_id: str) -> Record:
        with self.state.guard:
            index = self._index_or_raise(record_id)
            return self.store.remove_at(index)

    def delete_all(self) -> dict[str, int]:
        with self.state.guard:
            return {"count": self.store.clear()}

    def get(self, record_id: str) -> Record | None:
        with self.state.guard:
            return self.store.get(record_id)

    def list(self) -> list[Record]:
        with self.state.guard:
            return self.store.list()

    def _index_or_raise(self, record_id: str) -> int:
        index = self.store.find_index(record_id)
        if index is None:
            raise ResourceNotFoundError(self.kind.label, record_id)
        return index


@dataclass
class GraphOperations:
    """Entry point used by the façade: CRUD per kind plus relationship traversal."""

    state: GraphState = field(default_factory=GraphState)

    def __post_init__(self):
        self.users = EntityOperations(self.state, EntityKind.USER)
        self.events = EntityOperations(self.state, EntityKind.EVENT)
        self.locations = EntityOperations(self.state, EntityKind.LOCATION)
        self.participants = EntityOperations(self.state, EntityKind.PARTICIPANT)

    def for_kind(self, kind: EntityKind) -> EntityOperations:
        return {
            EntityKind.USER: self.users,
            EntityKind.EVENT: self.events,
            EntityKind.LOCATION: self.locations,
            EntityKind.PARTICIPANT: self.participants,
        }[kind]

    # ─── Relationships ──────────────────────────────────────────

    def traverse(
        self, kind: EntityKind, record_id: str, resolve: Callable[[Record], T],
    ) -> T | None:
        """Look up a record and resolve one of its relations under one hold of the guard.

        None when the record itself is absent; otherwise whatever `resolve` returns.
        """
        with self.state.guard:
            parent = self.for_kind(kind).get(record_id)
            if parent is None:
                return None
            return resolve(parent)

    def user_events(self, user: Record) -> list[Record]:
        return relationships.user_events(self.state, user)

    def event_user(self, event: Record) -> Record | None:
        return relationships.event_user(self.state, event)

    def event_location(self, event: Record) -> Record | None:
        return relationships.event_location(self.state, event)

    def event_participants(self, event: Record) -> list[Record]:
        return relationships.event_participants(self.state, event)

    def location_events(self, location: Record) -> list[Record]:
        return relationships.location_events(self.state, location)

    def participant_user(self, participant: Record) -> Record | None:
        return relationships.participant_user(self.state, participant)

    def participant_event(self, participant: Record) -> Record | None:
        return relationships.participant_event(self.state, participant)
