"""Tests for turning raw form fields into Property records."""

from sqlmodel import select

from estates.models import Property
from estates.services.ingestion import build_property, ingest_property
from estates.services.storage import UploadedFile

BASE = "https://api.example.test"


def test_build_property_full_form(upload_form) -> None:
    uploads = [UploadedFile("a.jpg", "10-a.jpg"), UploadedFile("b.jpg", "11-b.jpg")]
    fields = dict(upload_form, videos=" https://youtube.com/shorts/xyz ")

    prop = build_property(fields, uploads, BASE)

    assert prop.title == "3BHK Sea View Apartment"
    assert prop.location == "Bandra West"
    assert prop.category == "Apartment"
    assert prop.price == 8500000
    assert prop.bedrooms == 3
    assert prop.bathrooms == 2
    assert prop.carpet_area == 1100
    assert prop.builtup_area == 1350
    assert prop.negotiable is True
    assert prop.images == [f"{BASE}/uploads/images/10-a.jpg", f"{BASE}/uploads/images/11-b.jpg"]
    assert prop.videos == ["https://youtube.com/shorts/xyz"]


def test_build_property_coerces_bad_numbers_to_zero() -> None:
    fields = {
        "title": "Plot",
        "price": "call for price",
        "bedrooms": "",
        "bathrooms": "two",
        "carpetArea": None,
        "builtupArea": "NaN",
    }

    prop = build_property(fields, [], BASE)

    assert prop.price == 0
    assert prop.bedrooms == 0
    assert prop.bathrooms == 0
    assert prop.carpet_area == 0
    assert prop.builtup_area == 0


def test_build_property_empty_submission() -> None:
    prop = build_property({}, [], BASE)

    assert prop.negotiable is False
    assert prop.images == []
    assert prop.videos == []
    assert prop.title is None


def test_ingest_property_persists(session, upload_form) -> None:
    prop = ingest_property(session, dict(upload_form, videos=["a", " ", "b"]), [], BASE)

    stored = session.exec(select(Property)).all()
    assert [p.id for p in stored] == [prop.id]
    assert stored[0].videos == ["a", "b"]
    assert stored[0].created_at is not None


def test_ingest_assigns_unique_ids(session) -> None:
    ids = {ingest_property(session, {"title": str(i)}, [], BASE).id for i in range(5)}
    assert len(ids) == 5
