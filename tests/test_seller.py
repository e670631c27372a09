"""Tests for seller lead submission and app wiring."""

import logging


def test_seller_lead_json(client, caplog) -> None:
    lead = {"name": "Asha", "phone": "9800000000", "email": "asha@example.test",
            "type": "Flat", "location": "Pune", "description": "2BHK"}

    with caplog.at_level(logging.INFO, logger="estates.routers.seller"):
        resp = client.post("/api/seller", json=lead)

    assert resp.status_code == 201
    assert resp.json() == {"success": True, "message": "Seller data received"}
    assert "Asha" in caplog.text


def test_seller_lead_form(client) -> None:
    resp = client.post("/api/seller", data={"name": "Ravi", "location": "Goa"})

    assert resp.status_code == 201
    assert resp.json()["success"] is True


def test_seller_lead_malformed_json(client) -> None:
    resp = client.post("/api/seller", content=b"{not json", headers={"content-type": "application/json"})

    assert resp.status_code == 500
    assert resp.json() == {"success": False}


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_uploaded_images_are_served(client, settings) -> None:
    (settings.upload_dir / "1-x.jpg").write_bytes(b"img")

    resp = client.get("/uploads/images/1-x.jpg")

    assert resp.status_code == 200
    assert resp.content == b"img"
