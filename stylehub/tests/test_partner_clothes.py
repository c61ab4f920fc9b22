"""Tests for partner catalogue endpoints."""

from app.models.database.item import DEFAULT_CLOTH_IMAGE

CLOTHES = "/api/v1/partnerclothes"


def create_cloth(client, account, **overrides):
    payload = {
        "name": "Blue Summer Dress",
        "color": "Blue",
        "category": "Dress",
        "brand": "Nova",
        "size": "M",
        "price": 1200,
    }
    payload.update(overrides)
    response = client.post(CLOTHES, json=payload, headers=account["headers"])
    assert response.status_code == 201, response.text
    return response.json()["cloth"]


def test_create_defaults(client, partner):
    cloth = create_cloth(client, partner)
    assert cloth["visibility"] == "public"
    assert cloth["image"] == DEFAULT_CLOTH_IMAGE
    assert cloth["imageUrl"] == DEFAULT_CLOTH_IMAGE
    assert cloth["displayDescription"] == "Nova Blue Summer Dress"
    assert cloth["owner"] == partner["id"]
    assert cloth["season"] == []
    assert cloth["wearable"] is True


def test_create_requires_partner_and_size(client, partner, styler):
    body = {"name": "Coat", "color": "Black", "category": "Coat", "brand": "Nova", "price": 10}
    assert client.post(CLOTHES, json=body, headers=styler["headers"]).status_code == 403

    missing = client.post(CLOTHES, json=body, headers=partner["headers"])
    assert missing.status_code == 400
    assert missing.json() == {"error": "size is required"}

    negative = client.post(CLOTHES, json={**body, "size": "L", "price": -1}, headers=partner["headers"])
    assert negative.status_code == 400
    assert negative.json()["error"].startswith("price:")


def test_public_listing(client, partner, other_partner):
    create_cloth(client, partner)
    create_cloth(client, partner, name="Red Party Gown", color="Red", category="Gown", price=4500)
    create_cloth(client, partner, name="Hidden Sample", visibility="private")
    create_cloth(client, other_partner, name="Black Jacket", color="Black", category="Jacket", price=2500)

    response = client.get(CLOTHES, params={"minPrice": "2000", "sort": "price", "order": "asc"})
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert [c["name"] for c in body["clothes"]] == ["Black Jacket", "Red Party Gown"]

    everything = client.get(CLOTHES).json()
    assert everything["total"] == 3
    assert "Hidden Sample" not in [c["name"] for c in everything["clothes"]]

    by_partner = client.get(CLOTHES, params={"partner": other_partner["id"]}).json()
    assert [c["name"] for c in by_partner["clothes"]] == ["Black Jacket"]

    bad_owner = client.get(CLOTHES, params={"partner": "nope"})
    assert bad_owner.status_code == 400

    bad_price = client.get(CLOTHES, params={"maxPrice": "lots"})
    assert bad_price.status_code == 400
    assert bad_price.json() == {"error": "maxPrice must be a number"}


def test_mine_lists_private_items(client, partner, other_partner, styler):
    create_cloth(client, partner)
    create_cloth(client, partner, name="Hidden Sample", visibility="private")
    create_cloth(client, other_partner, name="Elsewhere")

    response = client.get(f"{CLOTHES}/mine", headers=partner["headers"])
    assert response.status_code == 200
    assert response.json()["total"] == 2

    private = client.get(f"{CLOTHES}/mine", params={"visibility": "private"}, headers=partner["headers"])
    assert [c["name"] for c in private.json()["clothes"]] == ["Hidden Sample"]

    assert client.get(f"{CLOTHES}/mine").status_code == 401
    assert client.get(f"{CLOTHES}/mine", headers=styler["headers"]).status_code == 403


def test_get_respects_visibility(client, partner, other_partner, admin):
    public = create_cloth(client, partner)
    private = create_cloth(client, partner, name="Hidden Sample", visibility="private")

    assert client.get(f"{CLOTHES}/{public['id']}").status_code == 200
    assert client.get(f"{CLOTHES}/{private['id']}").status_code == 401
    assert client.get(f"{CLOTHES}/{private['id']}", headers=other_partner["headers"]).status_code == 403
    assert client.get(f"{CLOTHES}/{private['id']}", headers=partner["headers"]).status_code == 200
    assert client.get(f"{CLOTHES}/{private['id']}", headers=admin["headers"]).status_code == 200
    assert client.get(f"{CLOTHES}/not-an-id").status_code == 400


def test_update_and_delete_by_owner_only(client, partner, other_partner, admin):
    cloth = create_cloth(client, partner)
    url = f"{CLOTHES}/{cloth['id']}"

    assert client.put(url, json={"price": 99}, headers=other_partner["headers"]).status_code == 403
    assert client.put(url, json={"price": 99}, headers=admin["headers"]).status_code == 403

    response = client.put(url, json={"price": 99, "material": "linen", "visibility": "private"},
                          headers=partner["headers"])
    assert response.status_code == 200
    assert response.json()["cloth"]["price"] == 99
    assert response.json()["cloth"]["material"] == "linen"
    assert client.get(url).status_code == 401

    assert client.delete(url, headers=other_partner["headers"]).status_code == 403
    assert client.delete(url, headers=partner["headers"]).status_code == 200
    assert client.get(url, headers=partner["headers"]).status_code == 404
