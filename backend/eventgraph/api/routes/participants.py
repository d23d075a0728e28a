"""Participant Routes — CRUD on participants plus their user and event."""

import logging

from fastapi import APIRouter, Depends, status

from eventgraph.api.dependencies import get_graph
from eventgraph.core.domain_types import EntityKind
from eventgraph.core.operations import GraphOperations
from eventgraph.schemas.common import DeleteAllOutput
from eventgraph.schemas.event import Event
from eventgraph.schemas.participant import (
    CreateParticipantInput, Participant, UpdateParticipantInput,
)
from eventgraph.schemas.user import User

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/participants", tags=["participants"])


@router.get("", response_model=list[Participant])
def list_participants(graph: GraphOperations = Depends(get_graph)):
    return graph.participants.list()


@router.get("/{participant_id}", response_model=Participant | None)
def get_participant(participant_id: str, graph: GraphOperations = Depends(get_graph)):
    return graph.participants.get(participant_id)


@router.post("", response_model=Participant, status_code=status.HTTP_201_CREATED)
def create_participant(
    body: CreateParticipantInput, graph: GraphOperations = Depends(get_graph),
):
    participant = graph.participants.create(body.to_record())
    logger.info(
        "Participant created",
        extra={"entity": "participant", "entity_id": participant["id"]},
    )
    return participant


@router.patch("/{participant_id}", response_model=Participant)
def update_participant(
    participant_id: str,
    body: UpdateParticipantInput,
    graph: GraphOperations = Depends(get_graph),
):
    participant = graph.participants.update(participant_id, body.changes())
    logger.info(
        "Participant updated",
        extra={"entity": "participant", "entity_id": participant_id},
    )
    return participant


@router.delete("/{participant_id}", response_model=Participant)
def delete_participant(participant_id: str, graph: GraphOperations = Depends(get_graph)):
    participant = graph.participants.delete(participant_id)
    logger.info(
        "Participant deleted",
        extra={"entity": "participant", "entity_id": participant_id},
    )
    return participant


@router.delete("", response_model=DeleteAllOutput)
def delete_all_participants(graph: GraphOperations = Depends(get_graph)):
    result = graph.participants.delete_all()
    logger.info(
        "All participants deleted",
        extra={"entity": "participant", "count": result["count"]},
    )
    return result


@router.get("/{participant_id}/user", response_model=User | None)
def get_participant_user(participant_id: str, graph: GraphOperations = Depends(get_graph)):
    return graph.traverse(EntityKind.PARTICIPANT, participant_id, graph.participant_user)


@router.get("/{participant_id}/event", response_model=Event | None)
def get_participant_event(participant_id: str, graph: GraphOperations = Depends(get_graph)):
    return graph.traverse(EntityKind.PARTICIPANT, participant_id, graph.participant_event)
