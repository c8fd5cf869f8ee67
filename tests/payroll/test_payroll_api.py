import pytest

from event_payroll.main import create_app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app()
    return app.test_client()


EXPO = {
    "id": 3,
    "title": "Expo",
    "start": "2024-03-04T09:00",
    "end": "2024-03-08T18:00",
    "break_start": "13:00",
    "break_end": "14:00",
    "work_shifts": [{"day_token": "weekday-range", "shift_start": "09:00", "shift_end": "18:00"}],
}


def test_health(client):
    assert client.get("/api/health").get_json() == {"ok": True}


def test_event_hours_preview(client):
    resp = client.post("/api/events/hours", json=EXPO)

    assert resp.status_code == 200
    assert resp.get_json()["hours"] == {
        "gross_hours": 45.0,
        "break_hours_per_day": 1.0,
        "day_count": 5,
        "net_hours": 40.0,
    }


def test_calculate_for_event_crew(client):
    resp = client.post(
        "/api/payroll/calculate",
        json={
            "event": EXPO,
            "now": "2024-04-01T00:00",
            "assignments": [
                {"operator_id": 1, "hourly_rate_cost": 15},
                {"operator_id": 2, "hourly_rate_cost": 15, "attendance": "absent"},
            ],
        },
    )
    body = resp.get_json()

    assert resp.status_code == 200
    assert [c["compensation"] for c in body["calculations"]] == [600.0, 600.0]
    assert body["calculations"][0]["attendance"] == "present"
    assert body["summary"]["total_compensation"] == 600.0
    assert body["summary"]["counted_entries"] == 1


def test_report_across_events(client):
    gala = {"id": 4, "title": "Gala", "start": "2024-03-09T18:00", "end": "2024-03-09T23:00"}
    resp = client.post(
        "/api/payroll/report",
        json={
            "now": "2024-04-01T00:00",
            "entries": [
                {"event": EXPO, "assignment": {"operator_id": 1, "hourly_rate_cost": 15}},
                {"event": gala, "assignment": {"operator_id": 1, "hourly_rate_cost": 15, "actual_hours": 4}},
            ],
        },
    )
    body = resp.get_json()

    assert resp.status_code == 200
    assert len(body["rows"]) == 2
    assert body["summary"]["total_net_hours"] == 44.0
    assert body["summary"]["total_compensation"] == 660.0


def test_invalid_payload_is_rejected(client):
    resp = client.post("/api/payroll/calculate", json={"event": {"start": "2024-03-04"}, "assignments": []})

    assert resp.status_code == 400
    assert resp.get_json()["ok"] is False


def test_non_json_body_is_rejected(client):
    resp = client.post("/api/events/hours", data="not json", content_type="text/plain")
    assert resp.status_code == 400


@pytest.mark.parametrize("field, value", [("gross_hours", "Infinity"), ("actual_hours", "nan")])
def test_non_finite_figures_are_rejected(client, field, value):
    resp = client.post(
        "/api/payroll/calculate",
        json={"event": EXPO, "assignments": [{"operator_id": 1, field: value}]},
    )

    assert resp.status_code == 400
    assert resp.get_json()["ok"] is False


def test_rows_carry_operator_name(client):
    resp = client.post(
        "/api/payroll/calculate",
        json={"event": EXPO, "assignments": [{"operatorId": 1, "operatorName": "Marco Bianchi"}]},
    )

    assert resp.status_code == 200
    assert resp.get_json()["calculations"][0]["operator_name"] == "Marco Bianchi"
