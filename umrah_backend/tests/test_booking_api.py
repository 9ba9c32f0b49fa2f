"""
Integration tests for the booking endpoints.

Booking creation, payment application and the error envelope.
"""

import pytest
from decimal import Decimal


@pytest.fixture
async def booking(client, owner_headers, package, pilgrim):
    response = await client.post("/v1/bookings", headers=owner_headers, json={
        "package_id": package.id,
        "pilgrim_id": pilgrim.id,
        "total_amount": "2000.00",
    })
    assert response.status_code == 201
    return response.json()


async def test_create_booking(client, booking, package, pilgrim):
    assert booking["package_id"] == package.id
    assert booking["pilgrim_id"] == pilgrim.id
    assert Decimal(booking["paid_amount"]) == Decimal("0")
    assert Decimal(booking["remaining_amount"]) == Decimal("2000")
    assert booking["payment_status"] == "pending"
    assert booking["booking_status"] == "registered"
    assert booking["marketing_partner_id"] is None


async def test_create_booking_with_deposit(client, owner_headers, package, pilgrim):
    response = await client.post("/v1/bookings", headers=owner_headers, json={
        "package_id": package.id,
        "pilgrim_id": pilgrim.id,
        "marketing_partner_id": 12,
        "total_amount": "2000.00",
        "paid_amount": "2000.00",
        "special_requests": "Room near Haram",
    })

    assert response.status_code == 201
    data = response.json()
    assert data["payment_status"] == "completed"
    assert Decimal(data["remaining_amount"]) == Decimal("0")
    assert data["marketing_partner_id"] == 12


async def test_create_booking_missing_references(client, owner_headers, package, pilgrim):
    missing_package = await client.post("/v1/bookings", headers=owner_headers, json={
        "package_id": 999, "pilgrim_id": pilgrim.id, "total_amount": "2000",
    })
    assert missing_package.status_code == 404
    assert missing_package.json()["error_code"] == "ERR_NOT_FOUND_001"
    assert missing_package.json()["details"]["resource"] == "Package"

    missing_pilgrim = await client.post("/v1/bookings", headers=owner_headers, json={
        "package_id": package.id, "pilgrim_id": 999, "total_amount": "2000",
    })
    assert missing_pilgrim.status_code == 404
    assert missing_pilgrim.json()["details"]["resource"] == "Pilgrim"

    listing = await client.get("/v1/bookings", headers=owner_headers)
    assert listing.json()["total"] == 0


async def test_payment_sequence(client, owner_headers, booking):
    url = f"/v1/bookings/{booking['id']}/payments"
    expected = [
        ("500", "partial", "1500"),
        ("800", "partial", "700"),
        ("700", "completed", "0"),
    ]

    for amount, status_value, remaining in expected:
        response = await client.post(url, headers=owner_headers, json={"amount": amount})
        assert response.status_code == 200
        data = response.json()
        assert data["payment_status"] == status_value
        assert Decimal(data["remaining_amount"]) == Decimal(remaining)

    fetched = await client.get(f"/v1/bookings/{booking['id']}", headers=owner_headers)
    assert Decimal(fetched.json()["paid_amount"]) == Decimal("2000")


async def test_resubmitted_payment_counts_twice(client, owner_headers, booking):
    url = f"/v1/bookings/{booking['id']}/payments"

    await client.post(url, headers=owner_headers, json={"amount": "500"})
    response = await client.post(url, headers=owner_headers, json={"amount": "500"})

    assert Decimal(response.json()["paid_amount"]) == Decimal("1000")


async def test_payment_errors(client, owner_headers, booking):
    missing = await client.post("/v1/bookings/999/payments", headers=owner_headers, json={"amount": "10"})
    assert missing.status_code == 404
    assert missing.json()["error_code"] == "ERR_NOT_FOUND_001"

    not_a_number = await client.post(
        f"/v1/bookings/{booking['id']}/payments", headers=owner_headers, json={"amount": "ten"}
    )
    assert not_a_number.status_code == 422
    assert not_a_number.json()["error_code"] == "ERR_VALIDATION"

    no_auth = await client.post(f"/v1/bookings/{booking['id']}/payments", json={"amount": "10"})
    assert no_auth.status_code in (401, 403)


async def test_list_bookings(client, owner_headers, booking):
    response = await client.get("/v1/bookings", headers=owner_headers)

    assert response.status_code == 200
    assert response.json()["total"] == 1
    assert response.json()["bookings"][0]["id"] == booking["id"]


async def test_payments_are_audited(client, db_session, owner_headers, owner_user, booking):
    from umrah_backend.app.services.audit import get_audit_trail, AuditAction

    await client.post(f"/v1/bookings/{booking['id']}/payments", headers=owner_headers, json={"amount": "125.50"})

    trail = await get_audit_trail(db_session, actor_id=owner_user.id, action=AuditAction.BOOKING_PAYMENT_APPLIED)

    assert len(trail) == 1
    assert trail[0].actor_username == "owner"
    assert trail[0].meta_data["amount"] == "125.50"
    assert trail[0].meta_data["payment_status"] == "partial"
