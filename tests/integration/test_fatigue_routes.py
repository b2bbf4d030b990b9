import pytest

from app.config import settings
from app.infrastructure.db.database import get_db


CALCULATE_URL = "/api/v1/fatigue/calculate"

NIGHT_SHIFT_BODY = {
    "sleepLast24": 4,
    "sleepPrevious24": 4,
    "wakeTime": "20:00",
    "workStartTime": "02:00",
}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_calculate_returns_result_and_records_assessment(client):
    resp = await client.post(CALCULATE_URL, json=NIGHT_SHIFT_BODY)
    assert resp.status_code == 200
    data = resp.json()

    assert data["score"] == 10
    assert data["level"] == "Extreme"
    assert data["totalSleep48"] == 8
    assert data["hoursAwake"] == 6.0
    assert len(data["projections"]) == 24
    assert data["projections"][0]["time"] == "02:00"
    assert data["projections"][-1]["time"] == "01:00"
    assert data["segments"] == [
        {"level": "Extreme", "start": "02:00", "end": "01:00", "hours": 24, "sharePct": 100.0}
    ]
    assert isinstance(data["assessmentId"], int)

    stored = await client.get(f"/api/v1/fatigue/assessments/{data['assessmentId']}")
    assert stored.status_code == 200
    record = stored.json()
    assert record["sleepLast24"] == 4
    assert record["wakeTime"] == "20:00"
    assert record["workStartTime"] == "02:00"
    assert record["score"] == 10
    assert record["level"] == "Extreme"
    assert record["hoursAwake"] == 6.0
    assert "projections" not in record
    assert record["createdAt"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_calculate_without_audit_omits_assessment_id(client, monkeypatch):
    monkeypatch.setattr(settings, "AUDIT_ENABLED", False)

    resp = await client.post(CALCULATE_URL, json=NIGHT_SHIFT_BODY)
    assert resp.status_code == 200
    assert "assessmentId" not in resp.json()

    recent = await client.get("/api/v1/fatigue/assessments")
    assert recent.json() == []


@pytest.mark.asyncio
@pytest.mark.integration
@pytest.mark.parametrize(
    "field,value",
    [
        ("sleepLast24", 25),
        ("sleepLast24", True),
        ("sleepLast24", "8"),
        ("sleepPrevious24", -1),
        ("sleepPrevious24", False),
        ("wakeTime", "24:00"),
        ("workStartTime", "7:5"),
    ],
)
async def test_calculate_rejects_invalid_input(client, field, value):
    resp = await client.post(CALCULATE_URL, json={**NIGHT_SHIFT_BODY, field: value})
    assert resp.status_code == 422


@pytest.mark.asyncio
@pytest.mark.integration
async def test_recent_assessments_newest_first_with_limit(client):
    for start in ("06:00", "07:00", "08:00"):
        body = {**NIGHT_SHIFT_BODY, "wakeTime": "05:00", "workStartTime": start}
        resp = await client.post(CALCULATE_URL, json=body)
        assert resp.status_code == 200

    resp = await client.get("/api/v1/fatigue/assessments", params={"limit": 2})
    assert resp.status_code == 200
    starts = [r["workStartTime"] for r in resp.json()]
    assert starts == ["08:00", "07:00"]

    resp = await client.get("/api/v1/fatigue/assessments")
    assert len(resp.json()) == 3


@pytest.mark.asyncio
@pytest.mark.integration
@pytest.mark.parametrize("limit", [0, 10_000])
async def test_recent_assessments_rejects_bad_limit(client, limit):
    resp = await client.get("/api/v1/fatigue/assessments", params={"limit": limit})
    assert resp.status_code == 400


@pytest.mark.asyncio
@pytest.mark.integration
async def test_missing_assessment_is_404(client):
    resp = await client.get("/api/v1/fatigue/assessments/999")
    assert resp.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_guidelines(client):
    resp = await client.get("/api/v1/fatigue/guidelines")
    assert resp.status_code == 200
    data = resp.json()
    assert [g["level"] for g in data] == ["Low", "Moderate", "High", "Extreme"]
    assert data[2]["stopWork"] is True

    resp = await client.get("/api/v1/fatigue/guidelines/moderate")
    assert resp.status_code == 200
    assert resp.json()["level"] == "Moderate"
    assert resp.json()["stopWork"] is False

    resp = await client.get("/api/v1/fatigue/guidelines/sleepy")
    assert resp.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_time_options(client):
    resp = await client.get("/api/v1/fatigue/time-options")
    assert resp.status_code == 200
    options = resp.json()
    assert len(options) == 48
    assert options[0] == {"value": "00:00", "display": "12:00 AM"}
    assert options[25] == {"value": "12:30", "display": "12:30 PM"}
    assert options[-1] == {"value": "23:30", "display": "11:30 PM"}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}

    resp = await client.get("/ready")
    assert resp.json()["db_connected"] is True


class BrokenSession:
    """Session whose connection is gone; commit fails unless rolled back first"""

    def __init__(self):
        self.rolled_back = False

    async def execute(self, statement):
        raise ConnectionError("database unavailable")

    async def rollback(self):
        self.rolled_back = True

    async def commit(self):
        if not self.rolled_back:
            raise ConnectionError("commit on failed transaction")

    async def close(self):
        pass


@pytest.mark.asyncio
@pytest.mark.integration
async def test_ready_reports_not_ready_when_database_fails(app, client):
    broken = BrokenSession()

    async def override_get_db():
        try:
            yield broken
            await broken.commit()
        except Exception:
            await broken.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db

    resp = await client.get("/ready")
    assert resp.status_code == 200
    assert resp.json() == {"status": "not_ready", "db_connected": False}
    assert broken.rolled_back is True
