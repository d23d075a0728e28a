"""User Routes — CRUD on users plus the events each user owns.

Invariants:
    - DELETE /users clears every user and reports the count; events keep their user_id
    - GET /users/{id}/events answers null for an unknown user, [] for a user with no events
"""

import logging

from fastapi import APIRouter, Depends, status

from eventgraph.api.dependencies import get_graph
from eventgraph.core.domain_types import EntityKind
from eventgraph.core.operations import GraphOperations
from eventgraph.schemas.common import DeleteAllOutput
from eventgraph.schemas.event import Event
from eventgraph.schemas.user import CreateUserInput, UpdateUserInput, User

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("", response_model=list[User])
def list_users(graph: GraphOperations = Depends(get_graph)):
    return graph.users.list()


@router.get("/{user_id}", response_model=User | None)
def get_user(user_id: str, graph: GraphOperations = Depends(get_graph)):
    return graph.users.get(user_id)


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(body: CreateUserInput, graph: GraphOperations = Depends(get_graph)):
    user = graph.users.create(body.to_record())
    logger.info("User created", extra={"entity": "user", "entity_id": user["id"]})
    return user


@router.patch("/{user_id}", response_model=User)
def update_user(
    user_id: str, body: UpdateUserInput, graph: GraphOperations = Depends(get_graph),
):
    user = graph.users.update(user_id, body.changes())
    logger.info("User updated", extra={"entity": "user", "entity_id": user_id})
    return user


@router.delete("/{user_id}", response_model=User)
def delete_user(user_id: str, graph: GraphOperations = Depends(get_graph)):
    user = graph.users.delete(user_id)
    logger.info("User deleted", extra={"entity": "user", "entity_id": user_id})
    return user


@router.delete("", response_model=DeleteAllOutput)
def delete_all_users(graph: GraphOperations = Depends(get_graph)):
    result = graph.users.delete_all()
    logger.info(
        "All users deleted", extra={"entity": "user", "count": result["count"]},
    )
    return result


@router.get("/{user_id}/events", response_model=list[Event] | None)
def get_user_events(user_id: str, graph: GraphOperations = Depends(get_graph)):
    """Events whose user_id points at this user, in creation order."""
    return graph.traverse(EntityKind.USER, user_id, graph.user_events)
