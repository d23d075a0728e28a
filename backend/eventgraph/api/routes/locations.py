"""Location Routes — CRUD on locations plus the events held there."""

import logging

from fastapi import APIRouter, Depends, status

from eventgraph.api.dependencies import get_graph
from eventgraph.core.domain_types import EntityKind
from eventgraph.core.operations import GraphOperations
from eventgraph.schemas.common import DeleteAllOutput
from eventgraph.schemas.event import Event
from eventgraph.schemas.location import (
    CreateLocationInput, Location, UpdateLocationInput,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/locations", tags=["locations"])


@router.get("", response_model=list[Location])
def list_locations(graph: GraphOperations = Depends(get_graph)):
    return graph.locations.list()


@router.get("/{location_id}", response_model=Location | None)
def get_location(location_id: str, graph: GraphOperations = Depends(get_graph)):
    return graph.locations.get(location_id)


@router.post("", response_model=Location, status_code=status.HTTP_201_CREATED)
def create_location(
    body: CreateLocationInput, graph: GraphOperations = Depends(get_graph),
):
    location = graph.locations.create(body.to_record())
    logger.info(
        "Location created", extra={"entity": "location", "entity_id": location["id"]},
    )
    return location


@router.patch("/{location_id}", response_model=Location)
def update_location(
    location_id: str,
    body: UpdateLocationInput,
    graph: GraphOperations = Depends(get_graph),
):
    location = graph.locations.update(location_id, body.changes())
    logger.info(
        "Location updated", extra={"entity": "location", "entity_id": location_id},
    )
    return location


@router.delete("/{location_id}", response_model=Location)
def delete_location(location_id: str, graph: GraphOperations = Depends(get_graph)):
    location = graph.locations.delete(location_id)
    logger.info(
        "Location deleted", extra={"entity": "location", "entity_id": location_id},
    )
    return location


@router.delete("", response_model=DeleteAllOutput)
def delete_all_locations(graph: GraphOperations = Depends(get_graph)):
    result = graph.locations.delete_all()
    logger.info(
        "All locations deleted",
        extra={"entity": "location", "count": result["count"]},
    )
    return result


@router.get("/{location_id}/events", response_model=list[Event] | None)
def get_location_events(location_id: str, graph: GraphOperations = Depends(get_graph)):
    return graph.traverse(EntityKind.LOCATION, location_id, graph.location_events)
