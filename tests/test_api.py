"""Tests for the HTTP API."""

from tests.conftest import burst_start_times


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_rhythm_endpoint(client, bursts):
    response = client.post("/api/rhythm", json={"start_times": bursts})
    assert response.status_code == 200

    data = response.json()
    assert data["event_count"] == 12
    assert data["duration"] == 1300

    patterns = data["patterns"]
    assert len(patterns) == 4
    assert patterns[0]["previous_index"] is None
    assert patterns[0]["start_time_interval"] is None
    assert [p["previous_index"] for p in patterns[1:]] == [0, 1, 2]
    assert [p["start_time_interval"] for p in patterns[1:]] == [400, 400, 400]
    assert [p["member_indices"] for p in patterns] == [
        [0, 1, 2], [3, 4, 5], [6, 7, 8], [9, 10, 11],
    ]
    assert [p["repeats_previous"] for p in patterns] == [False, True, True, True]
    assert all(p["hit_object_interval"] == 50 for p in patterns)

    runs = data["pattern_runs"]
    assert len(runs) == 1
    assert runs[0]["pattern_indices"] == [0, 1, 2, 3]
    assert runs[0]["repetition_count"] == 3


def test_single_event_patterns(client):
    response = client.post("/api/rhythm", json={"start_times": [0, 100]})
    assert response.status_code == 200
    patterns = response.json()["patterns"]
    assert len(patterns) == 2
    assert patterns[0]["hit_object_interval"] is None
    assert patterns[1]["start_time_interval"] == 100
    assert patterns[1]["hit_object_interval_ratio"] == 1


def test_infinite_ratio_serialized_as_null(client):
    response = client.post("/api/rhythm", json={"start_times": [0, 0, 0, 100, 200, 300]})
    assert response.status_code == 200
    assert response.json()["patterns"][1]["hit_object_interval_ratio"] is None


def test_custom_margin(client):
    times = [0, 100, 205, 315, 430]
    response = client.post("/api/rhythm", json={"start_times": times, "margin_of_error": 10})
    assert response.status_code == 200
    assert len(response.json()["patterns"]) == 1


def test_empty_request_rejected(client):
    response = client.post("/api/rhythm", json={"start_times": []})
    assert response.status_code == 400


def test_unsorted_request_rejected(client):
    response = client.post("/api/rhythm", json={"start_times": [0, 200, 100]})
    assert response.status_code == 400
    assert "non-decreasing" in response.json()["detail"]


def test_missing_field_rejected(client):
    response = client.post("/api/rhythm", json={})
    assert response.status_code == 422


def test_too_many_events_rejected(client, monkeypatch):
    from rhythmchain.config import settings
    monkeypatch.setattr(settings, "max_events", 5)
    response = client.post("/api/rhythm", json={"start_times": burst_start_times()})
    assert response.status_code == 400


def test_repetition_tolerance_setting_applies_to_runs(client, monkeypatch):
    """repeats_previous and the run's repetition_count agree under a custom tolerance."""
    from rhythmchain.config import settings
    monkeypatch.setattr(settings, "repetition_tolerance", 10.0)
    times = [0, 50, 100, 400, 455, 510, 800, 860, 920]
    response = client.post("/api/rhythm", json={"start_times": times})
    assert response.status_code == 200

    data = response.json()
    assert [p["repeats_previous"] for p in data["patterns"]] == [False, True, True]
    assert len(data["pattern_runs"]) == 1
    assert data["pattern_runs"][0]["repetition_count"] == 2
