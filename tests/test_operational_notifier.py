"""Tests for activity recording, notification dispatch and their orchestration."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from rentdesk.application.use_cases.cars import archive_car, create_car, unarchive_car, update_car
from rentdesk.application.use_cases.content import update_content
from rentdesk.application.use_cases.notifications import (
    CARS_ADMIN_LINK,
    CARS_EMPLOYEE_LINK,
    PROMOTIONS_LINK,
    ActivityRecorder,
    NotificationDispatcher,
    OperationalNotifier,
)
from rentdesk.application.use_cases.promotions import create_promotion
from rentdesk.domain.entities import ActivityAction, Audience, Role
from rentdesk.infrastructure.repositories import (
    ActivityLogRepository,
    CarRepository,
    NotificationRepository,
)


class _FailingDispatcher:
    def dispatch(self, audience, message, links_by_role):
        raise RuntimeError("notification store unavailable")


class _FailingRecorder:
    def record(self, actor_id, action_type, description, link):
        raise RuntimeError("activity store unavailable")


def _create_car(session, notifier, actor, **overrides):
    values = {"brand": "Toyota", "model": "Corolla", "price_per_day": 1000.0, "location": "Lima"}
    values.update(overrides)
    return create_car(session, notifier, actor=actor, **values)


def test_dispatch_creates_one_record_per_role(session):
    dispatcher = NotificationDispatcher(session)

    notifications = dispatcher.dispatch(
        Audience(roles=(Role.ADMIN, Role.EMPLOYEE), module="cars"),
        "Car updated",
        {Role.ADMIN: CARS_ADMIN_LINK, Role.EMPLOYEE: CARS_EMPLOYEE_LINK},
    )

    assert [n.recipient_role for n in notifications] == [Role.ADMIN, Role.EMPLOYEE]
    assert [n.link for n in notifications] == [CARS_ADMIN_LINK, CARS_EMPLOYEE_LINK]
    assert all(n.module == "cars" for n in notifications)
    assert all(n.audience_roles == [Role.ADMIN, Role.EMPLOYEE] for n in notifications)
    assert all(not n.is_read for n in notifications)


def test_dispatch_without_link_for_a_role_writes_nothing(session):
    dispatcher = NotificationDispatcher(session)

    with pytest.raises(ValueError):
        dispatcher.dispatch(
            Audience(roles=(Role.ADMIN, Role.EMPLOYEE)),
            "Missing link",
            {Role.ADMIN: CARS_ADMIN_LINK},
        )

    assert NotificationRepository(session).count() == 0


def test_dispatch_is_not_idempotent(session):
    dispatcher = NotificationDispatcher(session)
    audience = Audience(roles=(Role.ADMIN,))

    dispatcher.dispatch(audience, "Same message", {Role.ADMIN: "/owner"})
    dispatcher.dispatch(audience, "Same message", {Role.ADMIN: "/owner"})

    assert NotificationRepository(session).count() == 2


def test_recorder_appends_entries(session, employee):
    recorder = ActivityRecorder(session)

    entry = recorder.record(employee.id, ActivityAction.UPDATE_CAR, "Car: Kia Rio", CARS_ADMIN_LINK)

    assert entry.id is not None
    assert entry.actor_id == employee.id
    assert entry.action_type is ActivityAction.UPDATE_CAR
    assert entry.created_at is not None
    assert ActivityLogRepository(session).count() == 1


def test_employee_car_update_fans_out(session, broadcaster, employee):
    notifier = OperationalNotifier(session, broadcaster)
    car = _create_car(session, notifier, employee)
    broadcaster.calls.clear()
    logs_before = ActivityLogRepository(session).count()
    notifications_before = NotificationRepository(session).count()

    update_car(session, notifier, car.id, actor=employee, changes={"price_per_day": 1200.0})

    assert ActivityLogRepository(session).count() == logs_before + 1
    assert NotificationRepository(session).count() == notifications_before + 2

    activity_events = broadcaster.events("activity-log-update")
    assert len(activity_events) == 1
    assert activity_events[0].rooms == ["admin"]
    assert activity_events[0].payload["action_type"] == "UPDATE_CAR"

    notification_events = broadcaster.events("notification")
    assert sorted(call.rooms[0] for call in notification_events) == ["admin", "employee"]
    links = {call.rooms[0]: call.payload["link"] for call in notification_events}
    assert links == {"admin": CARS_ADMIN_LINK, "employee": CARS_EMPLOYEE_LINK}
    assert notification_events[0].payload["message"] == "Employee Ana updated the car: Toyota Corolla"


def test_admin_car_changes_are_not_audited(session, broadcaster, admin):
    notifier = OperationalNotifier(session, broadcaster)

    car = _create_car(session, notifier, admin)
    update_car(session, notifier, car.id, actor=admin, changes={"location": "Cusco"})
    archive_car(session, notifier, car.id, actor=admin)

    assert ActivityLogRepository(session).count() == 0
    assert NotificationRepository(session).count() == 0
    assert [call.event for call in broadcaster.calls] == ["new-car"]


def test_new_car_is_announced_to_customers_for_any_actor(session, broadcaster, employee):
    notifier = OperationalNotifier(session, broadcaster)

    car = _create_car(session, notifier, employee, brand="Kia", model="Rio")

    announcements = broadcaster.events("new-car")
    assert len(announcements) == 1
    assert announcements[0].rooms == ["customer"]
    assert announcements[0].payload == {
        "message": "New car available: Kia Rio",
        "link": f"/cars/{car.id}",
    }


def test_archive_and_unarchive_toggle_availability(session, broadcaster, employee):
    notifier = OperationalNotifier(session, broadcaster)
    car = _create_car(session, notifier, employee)

    archived = archive_car(session, notifier, car.id, actor=employee)
    assert archived.archived is True
    assert archived.is_available is False

    restored = unarchive_car(session, notifier, car.id, actor=employee)
    assert restored.archived is False
    assert restored.is_available is True

    actions = [entry.action_type for entry in ActivityLogRepository(session).list(limit=10)]
    assert set(actions) == {
        ActivityAction.CREATE_CAR,
        ActivityAction.ARCHIVE_CAR,
        ActivityAction.UNARCHIVE_CAR,
    }


def test_employee_content_update_notifies_admins_only(session, broadcaster, employee):
    notifier = OperationalNotifier(session, broadcaster)

    update_content(session, notifier, "mission", actor=employee, title="Mission", content="Drive")

    notifications = NotificationRepository(session).list_for_role(Role.ADMIN)
    assert len(notifications) == 1
    assert notifications[0].module == "content"
    assert NotificationRepository(session).list_for_role(Role.EMPLOYEE) == []
    assert {tuple(call.rooms) for call in broadcaster.calls} == {("admin",)}


def test_promotion_creation_broadcasts_one_combined_event(session, broadcaster):
    notifier = OperationalNotifier(session, broadcaster)
    now = datetime.now(timezone.utc)

    create_promotion(
        session,
        notifier,
        title="Summer",
        discount_type="percentage",
        discount_value=10,
        start_date=now - timedelta(days=1),
        end_date=now + timedelta(days=1),
    )

    assert NotificationRepository(session).count() == 2
    assert len(broadcaster.calls) == 1
    call = broadcaster.calls[0]
    assert call.event == "notification"
    assert call.rooms == ["admin", "employee"]
    assert call.payload == {
        "message": "A new promotion has been created: Summer",
        "link": PROMOTIONS_LINK,
    }


def test_side_effect_failures_do_not_fail_the_mutation(session, broadcaster, employee):
    notifier = OperationalNotifier(
        session,
        broadcaster,
        recorder=_FailingRecorder(),
        dispatcher=_FailingDispatcher(),
    )

    car = _create_car(session, notifier, employee)

    assert CarRepository(session).get(car.id) is not None
    assert [call.event for call in broadcaster.calls] == ["new-car"]
