"""API test fixtures — an isolated app + dataset per test, driven through httpx.

Invariants:
    - Every test gets its own GraphOperations via create_app(graph=...)
    - ASGITransport does not run lifespan, so no seed file is loaded
"""

import pytest
from httpx import ASGITransport, AsyncClient

from eventgraph.config import Settings
from eventgraph.core.operations import GraphOperations
from eventgraph.main import create_app


@pytest.fixture
def graph():
    return GraphOperations()


@pytest.fixture
async def client(graph):
    app = create_app(Settings(), graph)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def alice(client):
    res = await client.post(
        "/api/v1/users", json={"username": "alice", "email": "a@x.com"},
    )
    return res.json()


@pytest.fixture
async def park(client):
    res = await client.post("/api/v1/locations", json={
        "name": "Park", "desc": "", "lat": 0, "lng": 0, "event_id": "x",
    })
    return res.json()


@pytest.fixture
async def meetup(client, alice, park):
    res = await client.post("/api/v1/events", json={
        "title": "Meetup", "desc": "", "date": "2024-01-01",
        "from": "10:00", "to": "12:00",
        "location_id": park["id"], "user_id": alice["id"],
    })
    return res.json()
