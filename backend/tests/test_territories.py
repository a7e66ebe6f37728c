"""
Tests CRUD sur les territoires : slugs, validation, pagination.
"""


def test_create_territory(client):
    """Création JSON : 201, slug conservé, noms des images à None."""
    response = client.post("/api/territories", json={"title": "Ladakh", "slug": "ladakh", "capital": "Leh"})
    assert response.status_code == 201
    data = response.json()
    assert data["id"] > 0
    assert data["slug"] == "ladakh"
    assert data["capital"] == "Leh"
    assert data["preview_image_url"] is None
    assert data["images"] == []


def test_duplicate_slug_rejected(client):
    """Scénario Ladakh : un second territoire avec le même slug est refusé."""
    first = client.post("/api/territories", json={"title": "Ladakh", "slug": "ladakh", "capital": "Leh"})
    assert first.status_code == 201

    second = client.post("/api/territories", json={"title": "Ladakh 2", "slug": "ladakh", "capital": "Kargil"})
    assert second.status_code == 400
    assert "already exists" in second.json()["message"]

    listing = client.get("/api/territories").json()
    assert listing["total"] == 1


def test_slug_derived_from_title(client):
    response = client.post("/api/territories", json={"title": "Jammu & Kashmir", "capital": "Srinagar"})
    assert response.status_code == 201
    assert response.json()["slug"] == "jammu-kashmir"


def test_invalid_slug_rejected(client):
    response = client.post("/api/territories", json={"title": "Ladakh", "slug": "Bad Slug!", "capital": "Leh"})
    assert response.status_code == 400
    assert response.json()["message"].startswith("slug:")


def test_missing_required_field(client):
    response = client.post("/api/territories", json={"title": "Ladakh"})
    assert response.status_code == 400
    assert response.json()["message"].startswith("capital:")


def test_update_slug_uniqueness_excludes_self(client):
    """La vérification d'unicité ignore la ligne mise à jour elle-même."""
    ladakh = client.post("/api/territories", json={"title": "Ladakh", "capital": "Leh"}).json()
    goa = client.post("/api/territories", json={"title": "Goa", "capital": "Panaji"}).json()

    same = client.put(f"/api/territories/{ladakh['id']}", json={"slug": "ladakh", "famous_for": "Monasteries"})
    assert same.status_code == 200
    assert same.json()["famous_for"] == "Monasteries"

    clash = client.put(f"/api/territories/{goa['id']}", json={"slug": "ladakh"})
    assert clash.status_code == 400
    assert clash.json()["message"] == "Slug already exists."


def test_partial_update_keeps_other_fields(client):
    ladakh = client.post("/api/territories", json={"title": "Ladakh", "capital": "Leh"}).json()
    response = client.put(f"/api/territories/{ladakh['id']}", data={"capital": "Leh town"})
    assert response.status_code == 200
    data = response.json()
    assert data["capital"] == "Leh town"
    assert data["title"] == "Ladakh"
    assert data["slug"] == "ladakh"


def test_get_by_slug(client):
    client.post("/api/territories", json={"title": "Ladakh", "capital": "Leh"})
    response = client.get("/api/territories/slug/ladakh")
    assert response.status_code == 200
    assert response.json()["title"] == "Ladakh"
    assert client.get("/api/territories/slug/nowhere").status_code == 404


def test_list_search_and_pagination(client):
    for title, capital in [("Ladakh", "Leh"), ("Goa", "Panaji"), ("Lakshadweep", "Kavaratti")]:
        client.post("/api/territories", json={"title": title, "capital": capital})

    found = client.get("/api/territories", params={"search": "LA"}).json()
    assert {t["title"] for t in found["items"]} == {"Ladakh", "Lakshadweep"}
    assert found["total"] == 2

    page = client.get("/api/territories", params={"limit": 2, "page": 2}).json()
    assert page["total"] == 3
    assert page["page"] == 2
    assert page["limit"] == 2
    assert len(page["items"]) == 1


def test_limit_out_of_range_is_422(client):
    assert client.get("/api/territories", params={"limit": 500}).status_code == 422


def test_child_rows_carry_parent_names(client, territory_tree):
    district_id = territory_tree["district"]["id"]
    listing = client.get("/api/territory-subdistricts", params={"territory_district_id": district_id}).json()
    assert listing["total"] == 1
    assert listing["items"][0]["territory_district_name"] == "Leh"

    district = client.get(f"/api/territory-districts/{district_id}").json()
    assert district["territory_name"] == "Ladakh"


def test_bad_filter_value_is_400(client):
    response = client.get("/api/territory-districts", params={"territory_id": "abc"})
    assert response.status_code == 400


def test_missing_parent_is_400(client):
    response = client.post("/api/territory-districts", json={"territory_id": 999, "name": "Nowhere"})
    assert response.status_code == 400
    assert response.json()["message"] == "Territory 999 does not exist."
