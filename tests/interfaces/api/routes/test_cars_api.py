"""Integration tests for the car endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from rentdesk.application.use_cases.notifications import OperationalNotifier
from rentdesk.application.use_cases.promotions import create_promotion
from rentdesk.infrastructure.repositories import ActivityLogRepository, NotificationRepository


def _car_payload(**overrides):
    payload = {
        "brand": "Toyota",
        "model": "Corolla",
        "year": 2022,
        "location": "Lima",
        "price_per_day": 1000.0,
    }
    payload.update(overrides)
    return payload


def _promote(session, broadcaster, **overrides):
    now = datetime.now(timezone.utc)
    values = {
        "title": "Promo",
        "discount_type": "percentage",
        "discount_value": 10,
        "start_date": now - timedelta(days=1),
        "end_date": now + timedelta(days=1),
    }
    values.update(overrides)
    return create_promotion(session, OperationalNotifier(session, broadcaster), **values)


def test_listing_prices_cars_with_best_promotion(client, session, broadcaster, admin, auth_headers):
    headers = auth_headers(admin)
    first = client.post("/cars/", json=_car_payload(), headers=headers).json()
    second = client.post(
        "/cars/", json=_car_payload(brand="Kia", model="Rio", price_per_day=200.0), headers=headers
    ).json()
    percentage = _promote(session, broadcaster, title="Ten percent")
    _promote(
        session,
        broadcaster,
        title="Fifty off",
        discount_type="fixed",
        discount_value=50,
        applicable_to="car",
        item_ids=[first["id"]],
    )
    fixed_for_second = _promote(
        session,
        broadcaster,
        title="Thirty off",
        discount_type="fixed",
        discount_value=30,
        applicable_to="car",
        item_ids=[second["id"]],
    )

    response = client.get("/cars/")

    assert response.status_code == 200
    body = response.json()
    cars = {car["id"]: car for car in body["data"]}
    assert cars[first["id"]]["original_price"] == 1000.0
    assert cars[first["id"]]["price_per_day"] == pytest.approx(900.0)
    assert cars[first["id"]]["applied_promotion_id"] == percentage.id
    assert cars[second["id"]]["price_per_day"] == pytest.approx(170.0)
    assert cars[second["id"]]["applied_promotion_id"] == fixed_for_second.id
    assert body["pagination"] == {"total": 2, "page": 1, "limit": 12, "total_pages": 1}


def test_expired_promotion_is_not_applied(client, session, broadcaster, admin, auth_headers):
    car = client.post("/cars/", json=_car_payload(), headers=auth_headers(admin)).json()
    now = datetime.now(timezone.utc)
    _promote(session, broadcaster, start_date=now - timedelta(days=5), end_date=now - timedelta(days=1))

    detail = client.get(f"/cars/{car['id']}").json()

    assert detail["price_per_day"] == 1000.0
    assert detail["applied_promotion_id"] is None


def test_listing_paginates_and_filters(client, admin, auth_headers):
    headers = auth_headers(admin)
    for index in range(5):
        client.post(
            "/cars/",
            json=_car_payload(model=f"Model {index}", price_per_day=100.0 + index),
            headers=headers,
        )
    client.post("/cars/", json=_car_payload(brand="Nissan", location="Cusco"), headers=headers)

    page = client.get("/cars/", params={"page": 2, "limit": 2}).json()
    assert page["pagination"] == {"total": 6, "page": 2, "limit": 2, "total_pages": 3}
    assert len(page["data"]) == 2

    by_brand = client.get("/cars/", params={"brand": "niss"}).json()
    assert [car["brand"] for car in by_brand["data"]] == ["Nissan"]

    by_price = client.get("/cars/", params={"min_price": 101, "max_price": 103}).json()
    assert by_price["pagination"]["total"] == 3


def test_employee_changes_produce_activity_and_notifications(
    client, session, broadcaster, employee, auth_headers
):
    headers = auth_headers(employee)
    car = client.post("/cars/", json=_car_payload(), headers=headers).json()
    broadcaster.calls.clear()

    response = client.put(f"/cars/{car['id']}", json={"price_per_day": 1100.0}, headers=headers)

    assert response.status_code == 200
    assert response.json()["price_per_day"] == 1100.0
    assert ActivityLogRepository(session).count() == 2
    assert NotificationRepository(session).count() == 4
    assert sorted(call.event for call in broadcaster.calls) == [
        "activity-log-update",
        "notification",
        "notification",
    ]


def test_admin_changes_are_silent_apart_from_new_car(client, session, broadcaster, admin, auth_headers):
    headers = auth_headers(admin)
    car = client.post("/cars/", json=_car_payload(), headers=headers).json()

    client.patch(f"/cars/{car['id']}/archive", headers=headers)

    assert ActivityLogRepository(session).count() == 0
    assert NotificationRepository(session).count() == 0
    assert [call.event for call in broadcaster.calls] == ["new-car"]
    assert broadcaster.calls[0].rooms == ["customer"]


def test_archive_and_unarchive(client, employee, auth_headers):
    headers = auth_headers(employee)
    car = client.post("/cars/", json=_car_payload(), headers=headers).json()

    archived = client.patch(f"/cars/{car['id']}/archive", headers=headers).json()
    assert archived["archived"] is True
    assert archived["is_available"] is False
    assert client.get("/cars/").json()["pagination"]["total"] == 0
    assert client.get("/cars/", params={"archived": True}).json()["pagination"]["total"] == 1

    restored = client.patch(f"/cars/{car['id']}/unarchive", headers=headers).json()
    assert restored["archived"] is False
    assert restored["is_available"] is True


def test_customers_cannot_manage_cars(client, customer, auth_headers):
    response = client.post("/cars/", json=_car_payload(), headers=auth_headers(customer))

    assert response.status_code == 403


def test_unknown_car_returns_404(client, admin, auth_headers):
    assert client.get("/cars/999").status_code == 404
    assert client.put("/cars/999", json={"brand": "Kia"}, headers=auth_headers(admin)).status_code == 404
    assert client.patch("/cars/999/archive", headers=auth_headers(admin)).status_code == 404


def test_invalid_car_payload_is_rejected(client, admin, auth_headers):
    response = client.post(
        "/cars/", json=_car_payload(price_per_day=-5), headers=auth_headers(admin)
    )

    assert response.status_code == 422


@pytest.mark.parametrize(
    "changes",
    [{"location": None}, {"is_available": None}, {"brand": None}, {"price_per_day": None}],
)
def test_null_for_required_field_is_rejected(client, admin, auth_headers, changes):
    headers = auth_headers(admin)
    car = client.post("/cars/", json=_car_payload(), headers=headers).json()

    response = client.put(f"/cars/{car['id']}", json=changes, headers=headers)

    assert response.status_code == 422
    assert client.get(f"/cars/{car['id']}").json()["location"] == "Lima"


def test_clearing_optional_fields_is_allowed(client, admin, auth_headers):
    headers = auth_headers(admin)
    car = client.post(
        "/cars/", json=_car_payload(description="Automatic"), headers=headers
    ).json()

    response = client.put(
        f"/cars/{car['id']}", json={"year": None, "description": None}, headers=headers
    )

    assert response.status_code == 200
    assert response.json()["year"] is None
    assert response.json()["description"] is None


def test_update_use_case_rejects_null_location(session, broadcaster, admin):
    from rentdesk.application.use_cases.cars import create_car, update_car

    notifier = OperationalNotifier(session, broadcaster)
    car = create_car(
        session, notifier, actor=admin, brand="Kia", model="Rio", price_per_day=80.0
    )

    with pytest.raises(ValueError):
        update_car(session, notifier, car.id, actor=admin, changes={"location": None})
