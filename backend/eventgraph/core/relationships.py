"""Relationship Resolver — foreign-key traversal across the entity stores.

Invariants:
    - Computed on demand at read time: no caching, no index, O(n) per call
    - Keys compared as strings, same as EntityStore.find_index
    - To-many results follow the target store's order
    - Dangling foreign keys resolve to None (to-one) or [] (to-many), never an error
"""

from eventgraph.core.domain_types import Record
from eventgraph.core.entity_store import EntityStore
from eventgraph.core.graph_state import GraphState


def _matching(store: EntityStore, key: str, value: object) -> list[Record]:
    wanted = str(value)
    return [r for r in store.records if str(r.get(key)) == wanted]


def _single(store: EntityStore, record_id: object) -> Record | None:
    if record_id is None:
        return None
    return store.get(record_id)


# ─── User ────────────────────────────────────────────────────────

def user_events(state: GraphState, user: Record) -> list[Record]:
    """Events owned by this user."""
    with state.guard:
        return _matching(state.events, "user_id", user["id"])


# ─── Event ───────────────────────────────────────────────────────

def event_user(state: GraphState, event: Record) -> Record | None:
    with state.guard:
        return _single(state.users, event.get("user_id"))


def event_location(state: GraphState, event: Record) -> Record | None:
    with state.guard:
        return _single(state.locations, event.get("location_id"))


def event_participants(state: GraphState, event: Record) -> list[Record]:
    with state.guard:
        return _matching(state.participants, "event_id", event["id"])


# ─── Location ────────────────────────────────────────────────────

def location_events(state: GraphState, location: Record) -> list[Record]:
    """Events that point at this location through Event.location_id."""
    with state.guard:
        return _matching(state.events, "location_id", location["id"])


# ─── Participant ─────────────────────────────────────────────────

def participant_user(state: GraphState, participant: Record) -> Record | None:
    with state.guard:
        return _single(state.users, participant.get("user_id"))


def participant_event(state: GraphState, participant: Record) -> Record | None:
    with state.guard:
        return _single(state.events, participant.get("event_id"))
