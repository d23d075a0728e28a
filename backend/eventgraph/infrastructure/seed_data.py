"""Seed Data — loads a fixture dataset from JSON into a GraphState at startup.

Invariants:
    - File shape: {"users": [...], "events": [...], "locations": [...], "participants": [...]};
      every key optional, unknown keys rejected
    - Records keep their own ids (so fixtures can wire foreign keys); a record
      without one gets a generated id
    - Every row must fit its output schema (User, Event, Location, Participant);
      fields outside the schema are dropped
    - A seeded id may not repeat within its section or match a record already
      in that store
    - All or nothing: the stores are untouched unless the whole file is valid

Design Decisions:
    - Appends through the stores directly, not EntityOperations.create: create
      always generates a fresh id, fixtures need theirs preserved
    - Ids and foreign keys are stringified before validation, so numeric ids
      in hand-written fixtures still load
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

from eventgraph.core.domain_types import FOREIGN_KEYS, EntityKind, Record
from eventgraph.core.errors import SeedDataError
from eventgraph.core.graph_state import GraphState
from eventgraph.core.identifiers import generate_id
from eventgraph.schemas.event import Event
from eventgraph.schemas.location import Location
from eventgraph.schemas.participant import Participant
from eventgraph.schemas.user import User

logger = logging.getLogger(__name__)

SEED_KEYS: dict[str, EntityKind] = {
    "users": EntityKind.USER,
    "events": EntityKind.EVENT,
    "locations": EntityKind.LOCATION,
    "participants": EntityKind.PARTICIPANT,
}

RECORD_SCHEMAS: dict[EntityKind, type[BaseModel]] = {
    EntityKind.USER: User,
    EntityKind.EVENT: Event,
    EntityKind.LOCATION: Location,
    EntityKind.PARTICIPANT: Participant,
}


def load_seed_data(state: GraphState, path: str | Path) -> dict[str, int]:
    """Load the seed file at `path` into `state`. Returns records added per key."""
    payload = _read_payload(Path(path))
    with state.guard:
        batches = {
            key: _prepare_section(state, key, payload.get(key, []), str(path))
            for key in SEED_KEYS
        }
        for key, records in batches.items():
            store = state.store_for(SEED_KEYS[key])
            for record in records:
                store.append(record)
    counts = {key: len(records) for key, records in batches.items()}
    logger.info(
        f"Loaded seed data from {path}: {counts}",
        extra={"path": str(path), "count": sum(counts.values())},
    )
    return counts


def _read_payload(path: Path) -> dict:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise SeedDataError("file not found", str(path))
    except json.JSONDecodeError as e:
        raise SeedDataError(f"invalid JSON ({e.msg} at line {e.lineno})", str(path))
    if not isinstance(payload, dict):
        raise SeedDataError("top level must be an object", str(path))
    unknown = set(payload) - set(SEED_KEYS)
    if unknown:
        raise SeedDataError(
            f"unknown keys: {', '.join(sorted(unknown))}", str(path),
        )
    return payload


def _prepare_section(
    state: GraphState, key: str, rows: object, path: str,
) -> list[Record]:
    """Validate one section into ready-to-append records. Caller holds the guard."""
    if not isinstance(rows, list):
        raise SeedDataError(f"'{key}' must be a list", path)
    kind = SEED_KEYS[key]
    taken = {str(r.get("id")) for r in state.store_for(kind).records}
    records = []
    for position, row in enumerate(rows):
        record = _normalize(row, kind, f"{key}[{position}]", path)
        if record["id"] in taken:
            raise SeedDataError(f"duplicate id '{record['id']}' in '{key}'", path)
        taken.add(record["id"])
        records.append(record)
    return records


def _normalize(row: object, kind: EntityKind, where: str, path: str) -> Record:
    if not isinstance(row, dict):
        raise SeedDataError(f"{where}: {kind.label} rows must be objects", path)
    raw = dict(row)
    raw["id"] = str(raw["id"]) if raw.get("id") is not None else generate_id()
    for key in FOREIGN_KEYS[kind]:
        if raw.get(key) is not None:
            raw[key] = str(raw[key])
    try:
        model = RECORD_SCHEMAS[kind].model_validate(raw)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise SeedDataError(f"{where}: {problems}", path)
    return model.model_dump(by_alias=True)
