"""Health Probe — liveness plus record counts."""


async def test_health_reports_counts(client, alice):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["records"]["user"] == 1
    assert body["records"]["event"] == 0
