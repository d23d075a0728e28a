"""Error Handlers — one envelope shape for domain, validation and unexpected errors.

Tests cover:
    - 404 envelope carries the entity and id
    - 400 envelope lists each failing field
    - Unhandled exceptions answer 500 without leaking the exception text
"""

from httpx import ASGITransport, AsyncClient

from eventgraph.config import Settings
from eventgraph.main import create_app


async def test_not_found_envelope(client):
    res = await client.delete("/api/v1/events/missing")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["category"] == "resource_not_found"
    assert error["severity"] == "error"
    assert error["context"] == {"entity": "Event", "entity_id": "missing"}


async def test_validation_envelope_lists_fields(client):
    res = await client.post("/api/v1/locations", json={"name": "Park"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["category"] == "validation"
    fields = {d["field"] for d in error["details"]}
    assert {"body.desc", "body.lat", "body.lng", "body.event_id"} <= fields


async def test_unexpected_error_is_opaque_500():
    app = create_app(Settings())

    @app.get("/api/v1/boom")
    def boom():
        raise RuntimeError("secret internals")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        res = await c.get("/api/v1/boom")

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["severity"] == "critical"
    assert "secret internals" not in res.text
