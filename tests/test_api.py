"""Tests for the HTTP API."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.models.status import ApplicationStatus, TaskStatus
from app.services.dependencies import get_lifecycle_store, get_notifier


@pytest.fixture
def store(make_store, make_application, make_task):
    """In-memory store with one hired and one shortlisted application."""
    hired = make_application(ApplicationStatus.HIRED, id="app_hired")
    shortlisted = make_application(ApplicationStatus.SHORTLISTED, id="app_short")
    tasks = [
        make_task(TaskStatus.ACCEPTED, id="t1", application_id="app_hired"),
        make_task(
            TaskStatus.SUBMITTED,
            id="t2",
            application_id="app_hired",
            start_date=date(2024, 3, 10),
            end_date=date(2024, 3, 12),
        ),
    ]
    return make_store(applications=[hired, shortlisted], tasks=tasks)


@pytest.fixture
def client(store, mock_notifier):
    """Test client with the store and notifier overridden."""
    app.dependency_overrides[get_lifecycle_store] = lambda: store
    app.dependency_overrides[get_notifier] = lambda: mock_notifier
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestInfoEndpoints:
    """Tests for service information endpoints."""

    def test_health(self, client):
        """Test health check."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["service"] == "internship-lifecycle"

    def test_api_info(self, client):
        """Test API info."""
        assert client.get("/api").json()["version"] == "1.0.0"


class TestApplicationEndpoints:
    """Tests for application routes."""

    def test_list_requires_filter(self, client):
        """Test listing without candidate or unit is rejected."""
        assert client.get("/applications").status_code == 400

    def test_list_by_unit(self, client):
        """Test listing serializes camelCase fields."""
        response = client.get("/applications", params={"unit_id": "unit_1"})

        assert response.status_code == 200
        body = response.json()
        assert {a["id"] for a in body} == {"app_hired", "app_short"}
        assert "candidateId" in body[0]
        assert "profileMatchScore" in body[0]

    def test_get_missing(self, client):
        """Test unknown application returns 404."""
        assert client.get("/applications/nope").status_code == 404

    def test_transition(self, client, store, mock_notifier):
        """Test a legal transition updates and notifies."""
        response = client.post(
            "/applications/app_short/transition",
            json={"targetStatus": "rejected", "candidateEmail": "alt@example.com"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["application"]["status"] == "rejected"
        assert body["previousStatus"] == "shortlisted"
        assert body["notified"] is True
        assert store.applications["app_short"].status == ApplicationStatus.REJECTED
        payload = mock_notifier.notify.await_args.args[0]
        assert payload.candidate_email == "alt@example.com"

    def test_illegal_transition(self, client, store):
        """Test an illegal transition returns 409 and changes nothing."""
        response = client.post(
            "/applications/app_hired/transition", json={"targetStatus": "applied"}
        )

        assert response.status_code == 409
        assert store.applications["app_hired"].status == ApplicationStatus.HIRED

    def test_shortlisted_to_hired(self, client, store):
        """Test hiring straight from the shortlist is allowed."""
        response = client.post(
            "/applications/app_short/transition", json={"targetStatus": "hired"}
        )

        assert response.status_code == 200
        assert store.applications["app_short"].status == ApplicationStatus.HIRED

    def test_unknown_target_status(self, client):
        """Test an unknown status fails request validation."""
        response = client.post(
            "/applications/app_short/transition", json={"targetStatus": "promoted"}
        )
        assert response.status_code == 422

    def test_interviewed_requires_slot(self, client):
        """Test moving to interviewed without a slot returns 422."""
        response = client.post(
            "/applications/app_short/transition", json={"targetStatus": "interviewed"}
        )
        assert response.status_code == 422

    def test_schedule_interview(self, client, store):
        """Test scheduling an interview."""
        response = client.post(
            "/applications/app_short/interview",
            json={"dateTime": "2024-04-02T10:00:00", "title": "HR round"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["application"]["status"] == "interviewed"
        assert body["application"]["interviewDate"] == "2024-04-02T10:00:00"
        assert store.interviews[0].title == "HR round"

    def test_list_interviews_after_reschedule(self, client):
        """Test the interview list shows a single moved booking."""
        client.post(
            "/applications/app_short/interview",
            json={"dateTime": "2024-04-02T10:00:00", "title": "HR round"},
        )
        client.post(
            "/applications/app_short/interview",
            json={"dateTime": "2024-04-05T14:00:00", "title": "HR round"},
        )

        response = client.get("/applications/app_short/interviews")

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 1
        assert body[0]["scheduledAt"] == "2024-04-05T14:00:00"
        assert body[0]["status"] == "scheduled"
        assert body[0]["durationMinutes"] == 60

    def test_list_interviews_missing_application(self, client):
        """Test listing interviews of an unknown application returns 404."""
        assert client.get("/applications/nope/interviews").status_code == 404


class TestTaskEndpoints:
    """Tests for task routes."""

    def test_create_task(self, client):
        """Test creating a task for a hired application."""
        response = client.post(
            "/applications/app_hired/tasks",
            json={
                "title": "Write docs",
                "startDate": "2024-03-18",
                "endDate": "2024-03-20",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "pending"
        assert body["color"] == "#3B82F6"

    def test_create_task_bad_dates(self, client, store):
        """Test end before start returns 422 without writing."""
        response = client.post(
            "/applications/app_hired/tasks",
            json={"title": "Backwards", "startDate": "2024-03-20", "endDate": "2024-03-18"},
        )

        assert response.status_code == 422
        assert store.writes == 0

    def test_submit_accepted_task(self, client):
        """Test resubmitting an accepted task returns 409."""
        response = client.post(
            "/tasks/t1/submit", json={"submissionLink": "https://github.com/a/b"}
        )
        assert response.status_code == 409

    def test_review(self, client):
        """Test reviewing a submitted task."""
        response = client.post(
            "/tasks/t2/review", json={"decision": "redo", "remarks": "Add tests"}
        )

        assert response.status_code == 200
        assert response.json()["status"] == "redo"
        assert response.json()["reviewRemarks"] == "Add tests"

    def test_get_missing_task(self, client):
        """Test unknown task returns 404."""
        assert client.get("/tasks/nope").status_code == 404

    def test_progress(self, client):
        """Test the progress view."""
        response = client.get("/applications/app_hired/progress")

        assert response.status_code == 200
        body = response.json()
        assert body["progress"]["percentage"] == 50
        assert body["progress"]["startDate"] == "2024-03-04"
        assert body["progress"]["endDate"] == "2024-03-12"
        assert body["breakdown"]["inReview"] == 1
        assert body["counts"]["accepted"] == 1

    def test_week_calendar(self, client):
        """Test the week calendar places tasks on their days."""
        response = client.get(
            "/applications/app_hired/calendar",
            params={"reference_date": "2024-03-11", "view_mode": "week"},
        )

        assert response.status_code == 200
        body = response.json()
        assert [d["date"] for d in body["days"]][0] == "2024-03-10"
        assert len(body["days"]) == 7
        assert all(d["isCurrentPeriod"] for d in body["days"])
        assert [t["id"] for t in body["days"][0]["tasks"]] == ["t2"]
        assert body["previousReferenceDate"] == "2024-03-04"
        assert body["nextReferenceDate"] == "2024-03-18"
