from decimal import Decimal

from app.models.gift import Gift


def test_public_list(client, sample_gift, sample_list):
    response = client.get("/public/lists/wedding-2025")
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Wedding"
    assert data["owner_name"] == "Owner"
    assert "owner_id" not in data
    assert "email" not in data
    assert [g["name"] for g in data["gifts"]] == ["Blender"]


def test_public_list_includes_every_status(client, db, sample_list):
    for name, status in [
        ("Plates", "AVAILABLE"),
        ("Glasses", "RESERVED"),
        ("Towels", "PURCHASED"),
    ]:
        sample_list.gifts.append(Gift(name=name, price=Decimal("10"), status=status))
    db.flush()

    response = client.get("/public/lists/wedding-2025")
    assert response.status_code == 200
    statuses = sorted(g["status"] for g in response.json()["gifts"])
    assert statuses == ["AVAILABLE", "PURCHASED", "RESERVED"]


def test_public_list_not_found(client):
    response = client.get("/public/lists/xyz")
    assert response.status_code == 404


def test_purchase_gift(client, sample_gift):
    response = client.patch(f"/public/gifts/{sample_gift.id}/purchase")
    assert response.status_code == 200
    assert response.json() == {"message": "Gift marked as purchased."}
    assert sample_gift.status == "PURCHASED"


def test_purchase_gift_twice(client, sample_gift):
    first = client.patch(f"/public/gifts/{sample_gift.id}/purchase")
    second = client.patch(f"/public/gifts/{sample_gift.id}/purchase")
    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json()["detail"] == "Gift is not available."


def test_purchase_reserved_gift(client, db, sample_gift):
    sample_gift.status = "RESERVED"
    db.flush()

    response = client.patch(f"/public/gifts/{sample_gift.id}/purchase")
    assert response.status_code == 400
    assert sample_gift.status == "RESERVED"


def test_purchase_gift_not_found(client):
    response = client.patch(
        "/public/gifts/00000000-0000-0000-0000-000000000000/purchase"
    )
    assert response.status_code == 404


def test_wedding_walkthrough(client, owner_headers):
    response = client.post(
        "/lists",
        headers=owner_headers,
        json={"title": "Wedding", "slug": "wedding-walkthrough"},
    )
    assert response.status_code == 201
    list_id = response.json()["id"]

    response = client.post(
        f"/lists/{list_id}/gifts",
        headers=owner_headers,
        json={"name": "Blender", "price": 50},
    )
    assert response.status_code == 201
    gift_id = response.json()["id"]
    assert response.json()["status"] == "AVAILABLE"

    assert client.patch(f"/public/gifts/{gift_id}/purchase").status_code == 200

    view = client.get("/public/lists/wedding-walkthrough").json()
    assert view["gifts"][0]["status"] == "PURCHASED"

    assert client.patch(f"/public/gifts/{gift_id}/purchase").status_code == 400
