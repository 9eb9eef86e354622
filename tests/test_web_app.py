import pytest
from fastapi.testclient import TestClient

from core.simulator import SchedulingSimulator
from core.registry import REGISTRY_LOG_SIZE
from web.backend.app import create_app


@pytest.fixture
def client():
    return TestClient(create_app(SchedulingSimulator()))


def add_textbook(client):
    for name, burst, arrival in (("P1", 5, 0), ("P2", 3, 1), ("P3", 8, 2)):
        response = client.post("/processes", json={
            "name": name, "burst_time": burst, "arrival_time": arrival
        })
        assert response.status_code == 201


def test_algorithms(client):
    ids = [a["id"] for a in client.get("/algorithms").json()["algorithms"]]
    assert ids == ["FCFS", "SJF", "SJF-Arrival"]


def test_add_and_list(client):
    response = client.post("/processes", json={"name": "A", "burst_time": 2, "arrival_time": 0})
    assert response.json()["index"] == 0

    processes = client.get("/processes").json()["processes"]
    assert processes[0]["name"] == "A"
    assert processes[0]["index"] == 0


def test_negative_values_are_rejected(client):
    response = client.post("/processes", json={"name": "A", "burst_time": -1, "arrival_time": 0})
    assert response.status_code == 422
    assert client.get("/processes").json()["processes"] == []


def test_update_out_of_range(client):
    response = client.put("/processes/3", json={"name": "A", "burst_time": 1, "arrival_time": 0})
    assert response.status_code == 404


def test_schedule_fcfs_and_sjf(client):
    add_textbook(client)

    fcfs = client.post("/schedule", json={"algorithm": "FCFS"}).json()
    assert [r["waiting_time"] for r in fcfs["results"]] == [0, 4, 6]
    assert fcfs["statistics"]["total_turnaround_time"] == 26

    sjf = client.post("/schedule", json={"algorithm": "SJF"}).json()
    assert [r["name"] for r in sjf["results"]] == ["P2", "P1", "P3"]
    assert sjf["statistics"]["total_waiting_time"] == 11
    assert [p["name"] for p in sjf["processes"]] == ["P1", "P2", "P3"]


def test_schedule_fcfs_reorders_processes(client):
    for name, arrival in (("A", 5), ("B", 2), ("C", 2)):
        client.post("/processes", json={"name": name, "burst_time": 1, "arrival_time": arrival})

    body = client.post("/schedule", json={"algorithm": "FCFS"}).json()

    assert [p["name"] for p in body["processes"]] == ["B", "C", "A"]


def test_schedule_unknown_algorithm(client):
    response = client.post("/schedule", json={"algorithm": "RoundRobin"})
    assert response.status_code == 400


def test_delete_reruns_last_policy(client):
    add_textbook(client)
    client.post("/schedule", json={"algorithm": "SJF"})

    body = client.delete("/processes/1").json()

    assert body["removed"]["name"] == "P2"
    assert [r["name"] for r in body["result"]["results"]] == ["P1", "P3"]
    assert client.delete("/processes/5").status_code == 404


def test_clear(client):
    add_textbook(client)
    body = client.delete("/processes").json()
    assert body["total_waiting_time"] == 0
    assert client.get("/processes").json()["processes"] == []


def test_compare(client):
    add_textbook(client)
    body = client.post("/schedule/compare", json={"algorithms": ["FCFS", "SJF"]}).json()
    assert body["comparison"]["total_waiting_time"] == [10, 11]
    assert body["comparison"]["total_turnaround_time"] == [26, 27]


def test_schedule_statistics_keep_integer_totals(client):
    add_textbook(client)

    stats = client.post("/schedule", json={"algorithm": "FCFS"}).json()["statistics"]

    assert isinstance(stats["total_waiting_time"], int)
    assert isinstance(stats["total_turnaround_time"], int)
    assert isinstance(stats["makespan"], int)
    assert stats["total_waiting_time"] == 10
    assert stats["avg_waiting_time"] == pytest.approx(10 / 3)


def test_schedule_statistics_on_empty_registry(client):
    stats = client.post("/schedule", json={"algorithm": "SJF"}).json()["statistics"]
    assert stats["total_waiting_time"] == 0
    assert isinstance(stats["total_turnaround_time"], int)


def test_processes_expose_recent_registry_events(client):
    add_textbook(client)
    for _ in range(150):
        client.post("/schedule", json={"algorithm": "FCFS"})

    events = client.get("/processes").json()["event_log"]

    assert len(events) == REGISTRY_LOG_SIZE
    assert "Reordered" in events[-1]
