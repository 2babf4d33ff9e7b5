"""
Tests for the readings API endpoints.

Validates POST /readings/create (and its /readings/store alias) and
GET /readings/read/{smart_meter_id}: plain-text confirmation, stored
order, offset-preserving timestamps, empty history for unknown meters,
and request validation.

CHANGELOG:
- 2026-10-18: Initial creation
- 2026-10-18: Reject non-finite reading values

TODO:
- None
"""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from joi_energy.store import ReadingsStore

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def create_body() -> dict:
    """Valid upload body with three readings one minute apart."""
    return {
        "smart_meter_id": "smart-meter-0",
        "electricity_readings": [
            {"time": "2020-11-29T08:00:00Z", "reading": 1.0},
            {"time": "2020-11-29T08:01:00Z", "reading": 2.0},
            {"time": "2020-11-29T08:02:00Z", "reading": 3.0},
        ],
    }


# ---------------------------------------------------------------------------
# POST /readings/create
# ---------------------------------------------------------------------------


class TestCreateReadings:
    """Uploading readings appends them to the store."""

    def test_returns_plain_text_confirmation(
        self, client: TestClient, create_body: dict,
    ) -> None:
        """Successful upload returns 200 with a text body."""
        response = client.post("/readings/create", json=create_body)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Readings created successfully"

    def test_readings_are_stored(
        self, client: TestClient, store: ReadingsStore, create_body: dict,
    ) -> None:
        """The batch lands in the store in submitted order."""
        client.post("/readings/create", json=create_body)

        stored = store.get_readings("smart-meter-0")
        assert [r.reading for r in stored] == [1.0, 2.0, 3.0]

    def test_offset_is_preserved(self, client: TestClient, store: ReadingsStore) -> None:
        """Non-UTC offsets are kept on the stored timestamp."""
        body = {
            "smart_meter_id": "m",
            "electricity_readings": [
                {"time": "2020-11-29T09:00:00+01:00", "reading": 0.5},
            ],
        }
        client.post("/readings/create", json=body)

        (reading,) = store.get_readings("m")
        assert reading.time.utcoffset() == timedelta(hours=1)
        assert reading.time.hour == 9

    def test_empty_batch_accepted(self, client: TestClient) -> None:
        """An empty readings list is a valid no-op upload."""
        response = client.post(
            "/readings/create",
            json={"smart_meter_id": "m", "electricity_readings": []},
        )
        assert response.status_code == 200

    def test_store_alias(
        self, client: TestClient, store: ReadingsStore, create_body: dict,
    ) -> None:
        """POST /readings/store behaves like /readings/create."""
        response = client.post("/readings/store", json=create_body)

        assert response.status_code == 200
        assert response.text == "Readings stored successfully"
        assert len(store.get_readings("smart-meter-0")) == 3


class TestCreateReadingsValidation:
    """Malformed bodies are rejected before reaching the store."""

    def test_unparseable_time_returns_422(
        self, client: TestClient, store: ReadingsStore,
    ) -> None:
        """A non-timestamp string is rejected."""
        body = {
            "smart_meter_id": "m",
            "electricity_readings": [{"time": "yesterday", "reading": 1.0}],
        }
        response = client.post("/readings/create", json=body)

        assert response.status_code == 422
        assert store.get_readings("m") == []

    def test_naive_time_returns_422(self, client: TestClient) -> None:
        """Timestamps without an offset are rejected."""
        body = {
            "smart_meter_id": "m",
            "electricity_readings": [{"time": "2020-11-29T08:00:00", "reading": 1.0}],
        }
        assert client.post("/readings/create", json=body).status_code == 422

    def test_missing_meter_id_returns_422(self, client: TestClient) -> None:
        """smart_meter_id is required."""
        response = client.post("/readings/create", json={"electricity_readings": []})
        assert response.status_code == 422

    def test_non_numeric_reading_returns_422(self, client: TestClient) -> None:
        """reading must be a number."""
        body = {
            "smart_meter_id": "m",
            "electricity_readings": [
                {"time": "2020-11-29T08:00:00Z", "reading": "lots"},
            ],
        }
        assert client.post("/readings/create", json=body).status_code == 422

    def test_one_bad_reading_rejects_whole_batch(
        self, client: TestClient, store: ReadingsStore,
    ) -> None:
        """Nothing is stored when any reading in the batch is invalid."""
        body = {
            "smart_meter_id": "m",
            "electricity_readings": [
                {"time": "2020-11-29T08:00:00Z", "reading": 1.0},
                {"time": "not-a-time", "reading": 2.0},
            ],
        }
        assert client.post("/readings/create", json=body).status_code == 422
        assert store.get_readings("m") == []

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_reading_returns_422(
        self, client: TestClient, store: ReadingsStore, token: str,
    ) -> None:
        """NaN and infinities are rejected and nothing is stored."""
        raw = (
            '{"smart_meter_id": "m", "electricity_readings": ['
            '{"time": "2020-11-29T08:00:00Z", "reading": 1.0}, '
            '{"time": "2020-11-29T08:01:00Z", "reading": ' + token + "}]}"
        )
        response = client.post(
            "/readings/create",
            content=raw,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert store.get_readings("m") == []


# ---------------------------------------------------------------------------
# GET /readings/read/{smart_meter_id}
# ---------------------------------------------------------------------------


class TestGetReadings:
    """Reading back a meter's history."""

    def test_unknown_meter_returns_empty_array(self, client: TestClient) -> None:
        """Unknown meters return [] with status 200."""
        response = client.get("/readings/read/no-such-meter")

        assert response.status_code == 200
        assert response.json() == []

    def test_returns_stored_readings(
        self, client: TestClient, create_body: dict,
    ) -> None:
        """Readings come back in stored order with time and value."""
        client.post("/readings/create", json=create_body)

        response = client.get("/readings/read/smart-meter-0")

        assert response.status_code == 200
        body = response.json()
        assert [r["reading"] for r in body] == [1.0, 2.0, 3.0]
        times = [datetime.fromisoformat(r["time"]) for r in body]
        assert times == [
            datetime.fromisoformat(r["time"])
            for r in create_body["electricity_readings"]
        ]

    def test_offset_round_trips(self, client: TestClient) -> None:
        """A +05:30 offset is returned unchanged."""
        client.post(
            "/readings/create",
            json={
                "smart_meter_id": "m",
                "electricity_readings": [
                    {"time": "2020-11-29T13:30:00+05:30", "reading": 1.0},
                ],
            },
        )

        (entry,) = client.get("/readings/read/m").json()
        assert entry["time"] == "2020-11-29T13:30:00+05:30"

    def test_successive_uploads_accumulate(self, client: TestClient) -> None:
        """Two uploads for one meter are concatenated in order."""
        for value in (1.0, 2.0):
            client.post(
                "/readings/create",
                json={
                    "smart_meter_id": "m",
                    "electricity_readings": [
                        {"time": "2020-11-29T08:00:00Z", "reading": value},
                    ],
                },
            )

        body = client.get("/readings/read/m").json()
        assert [r["reading"] for r in body] == [1.0, 2.0]
