"""Event Routes — CRUD on events plus owner, location and participants.

Invariants:
    - Relation routes answer null for an unknown event
    - A dangling user_id / location_id answers null, not 404
"""

import logging

from fastapi import APIRouter, Depends, status

from eventgraph.api.dependencies import get_graph
from eventgraph.core.domain_types import EntityKind
from eventgraph.core.operations import GraphOperations
from eventgraph.schemas.common import DeleteAllOutput
from eventgraph.schemas.event import CreateEventInput, Event, UpdateEventInput
from eventgraph.schemas.location import Location
from eventgraph.schemas.participant import Participant
from eventgraph.schemas.user import User

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/events", tags=["events"])


@router.get("", response_model=list[Event])
def list_events(graph: GraphOperations = Depends(get_graph)):
    return graph.events.list()


@router.get("/{event_id}", response_model=Event | None)
def get_event(event_id: str, graph: GraphOperations = Depends(get_graph)):
    return graph.events.get(event_id)


@router.post("", response_model=Event, status_code=status.HTTP_201_CREATED)
def create_event(body: CreateEventInput, graph: GraphOperations = Depends(get_graph)):
    event = graph.events.create(body.to_record())
    logger.info("Event created", extra={"entity": "event", "entity_id": event["id"]})
    return event


@router.patch("/{event_id}", response_model=Event)
def update_event(
    event_id: str, body: UpdateEventInput, graph: GraphOperations = Depends(get_graph),
):
    event = graph.events.update(event_id, body.changes())
    logger.info("Event updated", extra={"entity": "event", "entity_id": event_id})
    return event


@router.delete("/{event_id}", response_model=Event)
def delete_event(event_id: str, graph: GraphOperations = Depends(get_graph)):
    event = graph.events.delete(event_id)
    logger.info("Event deleted", extra={"entity": "event", "entity_id": event_id})
    return event


@router.delete("", response_model=DeleteAllOutput)
def delete_all_events(graph: GraphOperations = Depends(get_graph)):
    result = graph.events.delete_all()
    logger.info(
        "All events deleted", extra={"entity": "event", "count": result["count"]},
    )
    return result


# ─── Relationships ───────────────────────────────────────────────

@router.get("/{event_id}/user", response_model=User | None)
def get_event_user(event_id: str, graph: GraphOperations = Depends(get_graph)):
    return graph.traverse(EntityKind.EVENT, event_id, graph.event_user)


@router.get("/{event_id}/location", response_model=Location | None)
def get_event_location(event_id: str, graph: GraphOperations = Depends(get_graph)):
    return graph.traverse(EntityKind.EVENT, event_id, graph.event_location)


@router.get("/{event_id}/participants", response_model=list[Participant] | None)
def get_event_participants(event_id: str, graph: GraphOperations = Depends(get_graph)):
    return graph.traverse(EntityKind.EVENT, event_id, graph.event_participants)
