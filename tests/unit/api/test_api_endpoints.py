"""HTTP-level tests through FastAPI's TestClient."""

import datetime

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from grind.db.session import get_db
from grind.main import app

SUNDAY = "2026-03-01"


@pytest.fixture
def client(engine):
    def _get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _as(user) -> dict:
    return {"X-User-Id": str(user.id)}


@pytest.fixture
def assignment(client, admin, athlete, template):
    response = client.post("/api/v1/assignments", headers=_as(admin),
                           json={"athlete_id": athlete.id, "template_id": template.id, "week_start": SUNDAY})
    assert response.status_code == 201
    return response.json()


# ======================================================================
# Service and identity
# ======================================================================


class TestIdentity:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_missing_header(self, client):
        assert client.get("/api/v1/catalog/exercises").status_code == 401

    def test_unknown_user(self, client, admin):
        assert client.get("/api/v1/catalog/exercises", headers={"X-User-Id": "999"}).status_code == 401

    def test_inactive_user(self, client, db, athlete):
        athlete.is_active = False
        db.add(athlete)
        db.commit()
        assert client.get("/api/v1/catalog/exercises", headers=_as(athlete)).status_code == 401


# ======================================================================
# Catalog
# ======================================================================


class TestCatalogEndpoints:
    def test_admin_creates_exercise(self, client, admin, athlete):
        response = client.post("/api/v1/catalog/exercises", headers=_as(admin),
                               json={"name": "Long toss", "category": "Throwing"})
        assert response.status_code == 201
        listed = client.get("/api/v1/catalog/exercises", headers=_as(athlete)).json()
        assert [e["name"] for e in listed] == ["Long toss"]

    def test_athlete_write_forbidden(self, client, athlete):
        response = client.post("/api/v1/catalog/exercises", headers=_as(athlete),
                               json={"name": "Long toss", "category": "Throwing"})
        assert response.status_code == 403

    def test_template_roundtrip(self, client, admin, exercises):
        response = client.post("/api/v1/catalog/templates", headers=_as(admin), json={
            "title": "Lift A", "category": "Strength",
            "exercises": [{"exercise_id": exercises[1].id, "prescribed_sets": 5, "prescribed_reps": 3}],
        })
        assert response.status_code == 201
        body = response.json()
        assert body["exercises"][0]["exercise_name"] == "Trap bar deadlift"

        appended = client.post(f"/api/v1/catalog/templates/{body['id']}/exercises", headers=_as(admin),
                               json={"exercise_id": exercises[3].id})
        assert [e["sort_order"] for e in appended.json()["exercises"]] == [0, 1]

        assert client.delete(f"/api/v1/catalog/templates/{body['id']}", headers=_as(admin)).status_code == 204
        assert client.get(f"/api/v1/catalog/templates/{body['id']}", headers=_as(admin)).status_code == 404

    def test_delete_assigned_template_conflict(self, client, admin, template, assignment):
        response = client.delete(f"/api/v1/catalog/templates/{template.id}", headers=_as(admin))
        assert response.status_code == 409


# ======================================================================
# Assignments, sessions and logs
# ======================================================================


class TestWorkoutFlow:
    def test_assignment_week_end(self, assignment):
        assert assignment["week_start"] == SUNDAY
        assert assignment["week_end"] == "2026-03-07"

    def test_athlete_lists_own_week_by_default(self, client, athlete, assignment):
        response = client.get("/api/v1/assignments", headers=_as(athlete), params={"week_start": SUNDAY})
        assert [a["id"] for a in response.json()] == [assignment["id"]]

    def test_bad_week_range(self, client, athlete):
        response = client.get("/api/v1/assignments", headers=_as(athlete),
                              params={"week_start": SUNDAY, "week_end": "2026-02-28"})
        assert response.status_code == 422

    def test_open_log_complete(self, client, athlete, exercises, assignment):
        headers = _as(athlete)
        workout = client.get(f"/api/v1/assignments/{assignment['id']}/workout", headers=headers).json()
        session_id = workout["session"]["id"]
        assert workout["session"]["status"] == "in_progress"
        assert len(workout["exercises"]) == 4

        again = client.post(f"/api/v1/assignments/{assignment['id']}/session", headers=headers).json()
        assert again["id"] == session_id

        for value in (10, 12):
            response = client.put(f"/api/v1/sessions/{session_id}/logs", headers=headers,
                                  json={"exercise_id": exercises[0].id, "completed": True, "reps": value})
            assert response.status_code == 200
        logs = client.get(f"/api/v1/sessions/{session_id}/logs", headers=headers).json()
        assert len(logs) == 1
        assert logs[0]["reps"] == 12

        done = client.post(f"/api/v1/sessions/{session_id}/complete", headers=headers).json()
        assert done["status"] == "completed"

        summary = client.get(f"/api/v1/analytics/progress/{athlete.id}", headers=headers,
                             params={"week_start": SUNDAY}).json()
        assert summary == {"workouts_completed": 1, "workouts_total": 1, "exercises_completed": 1,
                           "exercises_total": 1}

    def test_other_athlete_cannot_open(self, client, other_athlete, assignment):
        response = client.get(f"/api/v1/assignments/{assignment['id']}/workout", headers=_as(other_athlete))
        assert response.status_code == 403

    def test_missing_session(self, client, athlete):
        assert client.post("/api/v1/sessions/999/complete", headers=_as(athlete)).status_code == 404


# ======================================================================
# Readiness and analytics
# ======================================================================


class TestReadinessEndpoints:
    def test_put_status_codes_and_colour(self, client, athlete):
        url = f"/api/v1/readiness/{athlete.id}/2026-03-03"
        first = client.put(url, headers=_as(athlete), json={"soreness": 3, "fatigue": 1})
        second = client.put(url, headers=_as(athlete), json={"soreness": 5, "fatigue": 1})
        assert first.status_code == 201
        assert second.status_code == 200

        colour = client.get(f"{url}/color", headers=_as(athlete)).json()
        assert colour["color"] == "high_risk"

    def test_out_of_scale_rejected(self, client, athlete):
        response = client.put(f"/api/v1/readiness/{athlete.id}/2026-03-03", headers=_as(athlete),
                              json={"soreness": 6, "fatigue": 1})
        assert response.status_code == 422

    def test_recent_feed(self, client, admin, athlete):
        client.put(f"/api/v1/readiness/{athlete.id}/2026-03-03", headers=_as(athlete),
                   json={"soreness": 2, "fatigue": 2, "notes": "Slept badly"})
        feed = client.get("/api/v1/readiness/recent", headers=_as(admin)).json()
        assert feed[0]["notes"] == "Slept badly"
        assert client.get("/api/v1/readiness/recent", headers=_as(athlete)).status_code == 403

    def test_range(self, client, athlete):
        client.put(f"/api/v1/readiness/{athlete.id}/2026-03-03", headers=_as(athlete),
                   json={"soreness": 2, "fatigue": 2})
        response = client.get(f"/api/v1/readiness/{athlete.id}", headers=_as(athlete),
                              params={"start": "2026-03-01", "end": "2026-03-07"})
        assert [e["log_date"] for e in response.json()] == ["2026-03-03"]


class TestAnalyticsEndpoints:
    def test_athlete_acwr(self, client, athlete, assignment):
        client.post(f"/api/v1/assignments/{assignment['id']}/session", headers=_as(athlete))
        as_of = (datetime.datetime.utcnow() + datetime.timedelta(minutes=1)).isoformat()
        body = client.get(f"/api/v1/analytics/acwr/{athlete.id}", headers=_as(athlete),
                          params={"as_of": as_of}).json()
        assert body["acwr"] == {"acute": 1, "chronic": 0.25, "ratio": 4.0, "flag": "overload_risk"}

    @pytest.mark.parametrize("suffix", ["Z", "+00:00"])
    def test_athlete_acwr_with_utc_designator(self, client, athlete, assignment, suffix):
        client.post(f"/api/v1/assignments/{assignment['id']}/session", headers=_as(athlete))
        as_of = (datetime.datetime.utcnow() + datetime.timedelta(minutes=1)).isoformat() + suffix
        response = client.get(f"/api/v1/analytics/acwr/{athlete.id}", headers=_as(athlete), params={"as_of": as_of})
        assert response.status_code == 200
        assert response.json()["acwr"]["acute"] == 1

    def test_roster_acwr_with_offset_as_of(self, client, admin, athlete):
        response = client.get("/api/v1/analytics/acwr", headers=_as(admin),
                              params={"as_of": "2026-10-19T10:00:00+02:00"})
        assert response.status_code == 200
        assert response.json()[0]["reference"].startswith("2026-10-19T08:00:00")

    def test_roster_acwr_admin_only(self, client, admin, athlete, other_athlete):
        roster = client.get("/api/v1/analytics/acwr", headers=_as(admin)).json()
        assert [r["athlete_id"] for r in roster] == [athlete.id, other_athlete.id]
        assert all(r["acwr"]["flag"] == "sweet_spot" for r in roster)
        assert client.get("/api/v1/analytics/acwr", headers=_as(athlete)).status_code == 403

    def test_calendar(self, client, admin, athlete, assignment):
        body = client.get("/api/v1/analytics/calendar", headers=_as(admin), params={"week_start": SUNDAY}).json()
        assert body["week_end"] == "2026-03-07"
        row = body["athletes"][0]
        assert row["days"][0]["assignments"][0]["id"] == assignment["id"]
        assert client.get("/api/v1/analytics/calendar", headers=_as(athlete)).status_code == 403
