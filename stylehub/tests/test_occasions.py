"""Tests for occasion endpoints."""

import uuid

OCCASIONS = "/api/v1/occasions"


def create_occasion(client, account, **overrides):
    payload = {
        "title": "Summer Wedding",
        "type": "wedding",
        "date": "2025-06-15T18:00:00",
        "location": "Lake Como",
        "dressCode": "Black Tie",
        "notes": "Outdoor ceremony",
    }
    payload.update(overrides)
    response = client.post(OCCASIONS, json=payload, headers=account["headers"])
    assert response.status_code == 201, response.text
    return response.json()["occasion"]


def test_create_occasion(client, styler):
    cloth_id = str(uuid.uuid4())
    response = client.post(OCCASIONS, json={
        "title": "Gala",
        "date": "2025-09-01T19:30:00Z",
        "clothesList": [{"id": cloth_id, "source": "partner"}, {"id": cloth_id}],
        "userId": str(uuid.uuid4()),
    }, headers=styler["headers"])

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Occasion created"
    occasion = body["occasion"]
    assert occasion["userId"] == styler["id"]
    assert occasion["type"] == "other"
    assert occasion["clothesList"] == [
        {"id": cloth_id, "source": "partner"},
        {"id": cloth_id, "source": "styler"},
    ]


def test_create_requires_styler(client, member, admin):
    assert client.post(OCCASIONS, json={"title": "x", "date": "2025-01-01"}).status_code == 401
    assert client.post(
        OCCASIONS, json={"title": "x", "date": "2025-01-01"}, headers=member["headers"]
    ).status_code == 403
    assert client.post(
        OCCASIONS, json={"title": "x", "date": "2025-01-01"}, headers=admin["headers"]
    ).status_code == 403


def test_create_validation_lists_missing_fields(client, styler):
    response = client.post(OCCASIONS, json={"notes": "?"}, headers=styler["headers"])
    assert response.status_code == 400
    assert response.json()["error"] == "title is required, date is required"


def test_list_is_scoped_to_caller(client, styler, other_styler):
    create_occasion(client, styler)
    create_occasion(client, other_styler, title="Birthday")

    response = client.get(OCCASIONS, params={"user": other_styler["id"]}, headers=styler["headers"])
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert [o["title"] for o in body["data"]] == ["Summer Wedding"]


def test_admin_filters_weddings_in_june(client, styler, other_styler, admin):
    create_occasion(client, styler)
    create_occasion(client, styler, title="Winter Wedding", date="2025-12-20T12:00:00")
    create_occasion(client, styler, title="June Dinner", type="dinner", date="2025-06-20T20:00:00")
    create_occasion(client, other_styler, title="Late June Wedding", date="2025-06-30T21:00:00")

    response = client.get(OCCASIONS, params={
        "type": "wedding",
        "startDate": "2025-06-01",
        "endDate": "2025-06-30",
    }, headers=admin["headers"])

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert body["totalPages"] == 1
    assert [o["title"] for o in body["data"]] == ["Late June Wedding", "Summer Wedding"]

    scoped = client.get(OCCASIONS, params={"type": "wedding", "user": styler["id"]}, headers=admin["headers"])
    assert scoped.json()["total"] == 2

    bad = client.get(OCCASIONS, params={"user": "12345"}, headers=admin["headers"])
    assert bad.status_code == 400
    assert bad.json() == {"error": "user must be a valid id"}


def test_search_and_sort(client, styler):
    create_occasion(client, styler, title="Brunch", notes="rooftop terrace", location="Paris")
    create_occasion(client, styler, title="Award Night", notes="", location="Rooftop Bar")
    create_occasion(client, styler, title="Picnic", notes="park", location="Hyde Park")

    response = client.get(OCCASIONS, params={"search": "ROOFTOP", "sort": "title", "order": "asc"},
                          headers=styler["headers"])
    assert [o["title"] for o in response.json()["data"]] == ["Award Night", "Brunch"]

    location = client.get(OCCASIONS, params={"location": "park"}, headers=styler["headers"])
    assert [o["title"] for o in location.json()["data"]] == ["Picnic"]


def test_read_permissions(client, styler, other_styler, admin):
    occasion = create_occasion(client, styler)
    url = f"{OCCASIONS}/{occasion['id']}"

    assert client.get(url, headers=styler["headers"]).json()["title"] == "Summer Wedding"
    assert client.get(url, headers=admin["headers"]).status_code == 200
    assert client.get(url, headers=other_styler["headers"]).status_code == 403
    assert client.get(url).status_code == 401
    assert client.get(f"{OCCASIONS}/not-an-id", headers=styler["headers"]).status_code == 400
    assert client.get(f"{OCCASIONS}/{uuid.uuid4()}", headers=styler["headers"]).status_code == 404


def test_update_occasion(client, styler, other_styler):
    occasion = create_occasion(client, styler)
    url = f"{OCCASIONS}/{occasion['id']}"

    response = client.put(url, json={
        "notes": "Bring an umbrella",
        "userId": other_styler["id"],
        "createdAt": "2000-01-01T00:00:00",
        "color": "ignored",
    }, headers=styler["headers"])
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Occasion updated"
    assert body["occasion"]["notes"] == "Bring an umbrella"
    assert body["occasion"]["userId"] == styler["id"]
    assert body["occasion"]["createdAt"] == occasion["createdAt"]

    assert client.put(url, json={"notes": "mine now"}, headers=other_styler["headers"]).status_code == 403


def test_update_rejects_empty_and_nulled_fields(client, styler):
    occasion = create_occasion(client, styler)
    url = f"{OCCASIONS}/{occasion['id']}"

    empty = client.put(url, json={"userId": styler["id"], "unknown": 1}, headers=styler["headers"])
    assert empty.status_code == 400
    assert empty.json() == {"error": "No valid fields provided for update."}

    nulled = client.put(url, json={"title": None}, headers=styler["headers"])
    assert nulled.status_code == 400
    assert nulled.json() == {"error": "title is required"}


def test_delete_occasion(client, styler, admin):
    occasion = create_occasion(client, styler)
    url = f"{OCCASIONS}/{occasion['id']}"

    response = client.delete(url, headers=admin["headers"])
    assert response.status_code == 200
    assert response.json() == {"message": "Occasion deleted successfully"}
    assert client.get(url, headers=styler["headers"]).status_code == 404
