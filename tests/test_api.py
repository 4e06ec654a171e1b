"""Tests for the HTTP API."""

from datetime import UTC, datetime
from uuid import uuid4

from fastapi.testclient import TestClient

from poker_tracker.api.app import create_app
from poker_tracker.services.stats import StatsService
from tests.conftest import FailingSessionRepository, make_session


def _create(client: TestClient, **overrides: object) -> dict:
    payload = {
        "startTime": "2024-01-01T10:00:00Z",
        "gameType": "CASH",
        "environment": "LIVE",
        "location": "CasinoA",
        "buyIn": 100,
    }
    payload.update(overrides)
    response = client.post("/poker-sessions", json=payload)
    assert response.status_code == 201
    return response.json()


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.json() == {"status": "ok"}


def test_create_session_omits_unknown_fields(container) -> None:
    client = TestClient(create_app(container))

    data = _create(client)

    assert data["isActive"] is True
    assert data["buyIn"] == 100
    assert data["gameType"] == "CASH"
    assert "profit" not in data
    assert "cashOut" not in data
    assert "endTime" not in data


def test_create_session_rejects_negative_buy_in(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/poker-sessions",
        json={
            "gameType": "CASH",
            "environment": "ONLINE",
            "location": "App",
            "buyIn": -5,
        },
    )

    assert response.status_code == 422


def test_create_session_rejects_blank_location(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/poker-sessions",
        json={"gameType": "CASH", "environment": "LIVE", "location": " ", "buyIn": 5},
    )

    assert response.status_code == 400


def test_end_session_flow(container) -> None:
    client = TestClient(create_app(container))
    created = _create(client)

    response = client.put(
        f"/poker-sessions/{created['id']}/end",
        json={"endTime": "2024-01-01T12:30:00Z", "cashOut": 250},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["duration"] == 150
    assert data["profit"] == 150
    assert data["profitPerHour"] == 60.0
    assert data["isActive"] is False
    assert client.get("/poker-sessions/active").json() == []

    second = client.put(f"/poker-sessions/{created['id']}/end", json={"cashOut": 1})
    assert second.status_code == 400


def test_end_session_without_cash_out(container) -> None:
    client = TestClient(create_app(container))
    created = _create(client)

    data = client.put(f"/poker-sessions/{created['id']}/end", json={}).json()

    assert data["duration"] == 150
    assert "profit" not in data
    assert "profitPerHour" not in data


def test_unknown_session_returns_404(container) -> None:
    client = TestClient(create_app(container))
    missing = uuid4()

    assert client.get(f"/poker-sessions/{missing}").status_code == 404
    assert client.put(f"/poker-sessions/{missing}/end", json={}).status_code == 404
    assert client.delete(f"/poker-sessions/{missing}").status_code == 404


def test_update_and_delete_session(container) -> None:
    client = TestClient(create_app(container))
    created = _create(client)

    updated = client.put(
        f"/poker-sessions/{created['id']}", json={"location": "CasinoB"}
    ).json()
    deleted = client.delete(f"/poker-sessions/{created['id']}").json()

    assert updated["location"] == "CasinoB"
    assert deleted["id"] == created["id"]
    assert client.get("/poker-sessions").json() == []


def test_negative_cash_out_is_rejected(container) -> None:
    client = TestClient(create_app(container))
    created = _create(client)
    session_url = f"/poker-sessions/{created['id']}"

    end = client.put(f"{session_url}/end", json={"cashOut": -5})
    patch = client.put(session_url, json={"cashOut": -5})

    assert end.status_code == 422
    assert patch.status_code == 422
    assert client.get(session_url).json()["isActive"] is True


def test_list_sessions_newest_first(container) -> None:
    client = TestClient(create_app(container))
    _create(client, startTime="2024-01-01T10:00:00Z", location="Old")
    _create(client, startTime="2024-02-01T10:00:00Z", location="New")

    locations = [item["location"] for item in client.get("/poker-sessions").json()]

    assert locations == ["New", "Old"]


def test_stats_endpoints(container, session_repository) -> None:
    session_repository.add(
        make_session(
            start_time=datetime(2024, 1, 1, 10, tzinfo=UTC),
            location="Home",
            profit=100,
            duration=60,
        )
    )
    session_repository.add(
        make_session(
            start_time=datetime(2024, 1, 2, 10, tzinfo=UTC),
            location="Casino",
            profit=-20,
            duration=30,
        )
    )
    client = TestClient(create_app(container))

    stats = client.get("/stats").json()
    weekly = client.get("/stats/weekly").json()
    monthly = client.get("/stats/monthly").json()
    locations = client.get("/stats/locations").json()

    assert stats == {
        "totalHours": 1.5,
        "totalProfit": 80.0,
        "mostProfitableWeek": "2023-12-31",
        "bestLocation": "Home",
    }
    assert weekly == [{"week": "2023-12-31", "totalHours": 1.5, "totalProfit": 80.0}]
    assert monthly == [{"month": "2024-01", "totalHours": 1.5, "totalProfit": 80.0}]
    assert [item["location"] for item in locations] == ["Home", "Casino"]
    assert locations[1]["profitPerHour"] == -40.0


def test_empty_stats(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/stats").json() == {
        "totalHours": 0,
        "totalProfit": 0,
        "mostProfitableWeek": "N/A",
        "bestLocation": "N/A",
    }
    assert client.get("/stats/locations").json() == []


def test_store_failure_returns_502(container) -> None:
    repository = FailingSessionRepository()
    container.stats_service = StatsService(repository)
    client = TestClient(create_app(container))

    response = client.get("/stats")

    assert response.status_code == 502
