"""
Tests for check-in endpoints.
"""
import json
from datetime import date
from wellness.core.config import settings
from wellness.schemas.checkin import CheckInCreate
from wellness.models.snapshot import StorageSnapshot


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_submit_checkin_defaults_to_today(client):
    """Test that a check-in without a date is filed under the clock's today."""
    response = client.post(
        "/api/checkins",
        json={"moodValue": 2, "note": "I feel great"}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["date"] == "2024-03-15"
    assert data["moodValue"] == 2
    assert data["sentimentLabel"] == "Positive"
    assert abs(data["sentimentScore"] - 0.8) < 1e-9
    assert "createdAt" in data


def test_submit_checkin_for_given_date(client):
    response = client.post(
        "/api/checkins",
        json={"date": "2024-03-01", "moodValue": -1, "note": "stressed"}
    )
    assert response.status_code == 201
    assert response.json()["date"] == "2024-03-01"
    assert response.json()["sentimentLabel"] == "Negative"


def test_list_checkins_sorted(client):
    for day in ("2024-03-10", "2024-03-02", "2024-03-05"):
        client.put(f"/api/checkins/{day}", json={"moodValue": 0, "note": ""})

    response = client.get("/api/checkins")
    assert response.status_code == 200
    assert [c["date"] for c in response.json()] == ["2024-03-02", "2024-03-05", "2024-03-10"]


def test_put_replaces_existing_date(client):
    """Test that writing a date twice replaces the entry."""
    client.put("/api/checkins/2024-03-10", json={"moodValue": -2, "note": "sad"})
    response = client.put("/api/checkins/2024-03-10", json={"moodValue": 2, "note": "happy"})
    assert response.status_code == 200
    assert response.json()["note"] == "happy"

    checkins = client.get("/api/checkins").json()
    assert len(checkins) == 1
    assert checkins[0]["sentimentLabel"] == "Positive"


def test_get_checkin(client):
    client.put("/api/checkins/2024-03-10", json={"moodValue": 1, "note": "calm"})
    response = client.get("/api/checkins/2024-03-10")
    assert response.status_code == 200
    assert response.json()["note"] == "calm"


def test_get_missing_checkin(client):
    response = client.get("/api/checkins/2024-03-10")
    assert response.status_code == 404


def test_latest_checkin(client):
    assert client.get("/api/checkins/latest").status_code == 404

    client.put("/api/checkins/2024-03-12", json={"moodValue": 0, "note": ""})
    client.put("/api/checkins/2024-03-01", json={"moodValue": 0, "note": "edited later"})

    response = client.get("/api/checkins/latest")
    assert response.status_code == 200
    assert response.json()["date"] == "2024-03-12"


def test_delete_checkin(client):
    client.put("/api/checkins/2024-03-10", json={"moodValue": 0, "note": ""})
    response = client.delete("/api/checkins/2024-03-10")
    assert response.status_code == 204
    assert client.get("/api/checkins").json() == []


def test_delete_missing_checkin_is_not_an_error(client):
    client.put("/api/checkins/2024-03-10", json={"moodValue": 0, "note": ""})
    response = client.delete("/api/checkins/2024-01-01")
    assert response.status_code == 204
    assert len(client.get("/api/checkins").json()) == 1


def test_mood_out_of_range_rejected(client):
    response = client.post("/api/checkins", json={"moodValue": 3, "note": ""})
    assert response.status_code == 422


def test_malformed_date_rejected(client):
    response = client.put("/api/checkins/not-a-date", json={"moodValue": 0, "note": ""})
    assert response.status_code == 422


def test_corrupted_snapshot_fails_loudly(client, db_session):
    """Test that a malformed stored payload is reported, not read as empty."""
    db_session.add(StorageSnapshot(key=settings.STORAGE_KEY, payload="{oops"))
    db_session.commit()

    response = client.get("/api/checkins")
    assert response.status_code == 500
    assert response.json()["error"] == "Stored check-in data is corrupted"


def test_create_schema_accepts_explicit_date():
    checkin_data = CheckInCreate.model_validate({"date": "2024-03-01", "moodValue": 0})
    assert checkin_data.date == date(2024, 3, 1)
    assert CheckInCreate(mood_value=1).date is None


def test_file_backend_persists_checkins(client, tmp_path, monkeypatch):
    """Test that the API writes to the JSON file when the file backend is configured."""
    path = tmp_path / "checkins.json"
    monkeypatch.setattr(settings, "STORAGE_BACKEND", "file")
    monkeypatch.setattr(settings, "STORAGE_FILE", str(path))

    response = client.put("/api/checkins/2024-03-10", json={"moodValue": 1, "note": "calm"})
    assert response.status_code == 200

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert [item["date"] for item in stored] == ["2024-03-10"]
    assert stored[0]["sentimentLabel"] == "Positive"

    response = client.get("/api/checkins")
    assert [item["date"] for item in response.json()] == ["2024-03-10"]
