"""Tests for payment endpoints."""

PAYMENTS = "/api/v1/payment"


def create_payment(client, account, **overrides):
    payload = {"amount": 49.5, "description": "Styling session"}
    payload.update(overrides)
    response = client.post(PAYMENTS, json=payload, headers=account["headers"])
    assert response.status_code == 201, response.text
    return response.json()["payment"]


def test_create_payment_defaults(client, member):
    payment = create_payment(client, member, currency="eur")
    assert payment["userId"] == member["id"]
    assert payment["currency"] == "EUR"
    assert payment["method"] == "card"
    assert payment["status"] == "pending"


def test_amount_is_required(client, member):
    response = client.post(PAYMENTS, json={"currency": "USD"}, headers=member["headers"])
    assert response.status_code == 400
    assert response.json() == {"error": "amount is required"}
    assert client.post(PAYMENTS, json={"amount": 5}).status_code == 401


def test_list_pagination_and_scope(client, member, styler, admin):
    for amount in range(12):
        create_payment(client, member, amount=amount)
    create_payment(client, styler)

    response = client.get(PAYMENTS, params={"page": "2", "limit": "5"}, headers=member["headers"])
    body = response.json()
    assert body["total"] == 12
    assert body["page"] == 2
    assert body["limit"] == 5
    assert body["totalPages"] == 3
    assert len(body["data"]) == 5

    clamped = client.get(PAYMENTS, params={"limit": "500"}, headers=admin["headers"]).json()
    assert clamped["limit"] == 50
    assert clamped["total"] == 13

    tiny = client.get(PAYMENTS, params={"limit": "0", "page": "abc"}, headers=member["headers"]).json()
    assert tiny["limit"] == 1
    assert tiny["page"] == 1
    assert tiny["totalPages"] == 12


def test_page_beyond_any_offset_is_empty(client, member):
    create_payment(client, member)
    response = client.get(PAYMENTS, params={"page": "99999999999999999999"}, headers=member["headers"])
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["data"] == []


def test_status_filter(client, member):
    create_payment(client, member, status="completed")
    create_payment(client, member)
    response = client.get(PAYMENTS, params={"status": "completed"}, headers=member["headers"])
    assert response.json()["total"] == 1


def test_update_ignores_identity_fields(client, member, styler):
    payment = create_payment(client, member)
    url = f"{PAYMENTS}/{payment['id']}"

    response = client.put(url, json={
        "status": "completed",
        "role": "admin",
        "id": "00000000-0000-0000-0000-000000000000",
        "userId": styler["id"],
    }, headers=member["headers"])
    assert response.status_code == 200
    updated = response.json()["payment"]
    assert updated["status"] == "completed"
    assert updated["id"] == payment["id"]
    assert updated["userId"] == member["id"]

    assert client.put(url, json={"status": "failed"}, headers=styler["headers"]).status_code == 403


def test_delete_then_not_found(client, member, admin):
    payment = create_payment(client, member)
    url = f"{PAYMENTS}/{payment['id']}"

    assert client.get(url, headers=admin["headers"]).status_code == 200
    response = client.delete(url, headers=member["headers"])
    assert response.json() == {"message": "Payment deleted successfully"}
    assert client.get(url, headers=member["headers"]).status_code == 404
    assert client.delete(url, headers=member["headers"]).status_code == 404


def test_store_failure_is_internal_error(client, member, mocker):
    from app.database.repositories.base import BaseRepository

    mocker.patch.object(BaseRepository, "count", side_effect=RuntimeError("connection reset"))
    response = client.get(PAYMENTS, headers=member["headers"])
    assert response.status_code == 500
    assert response.json() == {"error": "connection reset"}
