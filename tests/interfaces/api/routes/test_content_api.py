"""Integration tests for the static content endpoints."""

from __future__ import annotations

import pytest

from rentdesk.application.use_cases.content import default_title
from rentdesk.infrastructure.repositories import ActivityLogRepository, NotificationRepository
from rentdesk.domain.entities import Role


@pytest.mark.parametrize(
    ("content_type", "expected"),
    [("mission", "Mission"), ("bookingTerms", "Booking Terms"), ("about", "About")],
)
def test_default_title(content_type, expected):
    assert default_title(content_type) == expected


def test_first_read_creates_default_block(client):
    response = client.get("/content/bookingTerms")

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "bookingTerms"
    assert body["title"] == "Booking Terms"
    assert body["content"] == ""
    assert client.get("/content/").json() == ["bookingTerms"]

    again = client.get("/content/bookingTerms").json()
    assert again["id"] == body["id"]


def test_unknown_content_type_returns_404(client):
    assert client.get("/content/faq").status_code == 404


def test_employee_update_notifies_admins(client, session, broadcaster, employee, auth_headers):
    response = client.put(
        "/content/mission",
        json={"title": "Our mission", "content": "Keep you moving"},
        headers=auth_headers(employee),
    )

    assert response.status_code == 200
    assert response.json()["title"] == "Our mission"
    assert ActivityLogRepository(session).count() == 1
    admin_notifications = NotificationRepository(session).list_for_role(Role.ADMIN)
    assert [n.module for n in admin_notifications] == ["content"]
    assert {call.event for call in broadcaster.calls} == {"activity-log-update", "notification"}
    assert all(call.rooms == ["admin"] for call in broadcaster.calls)


def test_admin_update_is_not_audited(client, session, broadcaster, admin, auth_headers):
    client.put("/content/vision", json={"title": "Vision"}, headers=auth_headers(admin))

    assert ActivityLogRepository(session).count() == 0
    assert NotificationRepository(session).count() == 0
    assert broadcaster.calls == []


def test_customers_cannot_edit_content(client, customer, auth_headers):
    response = client.put(
        "/content/mission", json={"title": "Hacked"}, headers=auth_headers(customer)
    )

    assert response.status_code == 403
