"""Pytest configuration and fixtures."""

import os
import tempfile

# Keep the module-level app in estates.main away from the working directory
_scratch = tempfile.mkdtemp(prefix="estates-test-")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("PUBLIC_DIR", os.path.join(_scratch, "public"))
os.environ.setdefault("APP_DATA_DIR", os.path.join(_scratch, "data"))

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from estates.config import Settings
from estates.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway database and public directory."""
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'estates.db'}",
        base_url="https://api.example.test",
        site_url="https://www.example.test",
        public_dir=tmp_path / "public",
        data_dir=tmp_path / "data",
        cors_origins=["*"],
        log_level="DEBUG",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def session(app, client):
    """A session on the same engine the app uses (tables already created)."""
    with Session(app.state.engine) as s:
        yield s


@pytest.fixture
def upload_form():
    return {
        "title": "3BHK Sea View Apartment",
        "price": "8500000",
        "negotiable": "on",
        "location": "Bandra West",
        "bedrooms": "3",
        "bathrooms": "2",
        "description": "Corner flat, ready to move",
        "category": "Apartment",
        "carpetArea": "1100",
        "builtupArea": "1350",
    }
