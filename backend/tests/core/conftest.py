"""Core fixtures — a fresh dataset per test, plus ready-made records."""

import pytest

from eventgraph.core.graph_state import GraphState
from eventgraph.core.operations import GraphOperations


@pytest.fixture
def graph():
    return GraphOperations(GraphState())


@pytest.fixture
def alice(graph):
    return graph.users.create({"username": "alice", "email": "a@x.com"})


@pytest.fixture
def park(graph):
    return graph.locations.create(
        {"name": "Park", "desc": "", "lat": 0.0, "lng": 0.0, "event_id": "x"},
    )


@pytest.fixture
def meetup(graph, alice, park):
    return graph.events.create({
        "title": "Meetup", "desc": "", "date": "2024-01-01",
        "from": "10:00", "to": "12:00",
        "location_id": park["id"], "user_id": alice["id"],
    })
