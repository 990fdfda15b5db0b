from __future__ import annotations

import pytest

from app import create_app
from config import TestingConfig
from db_core_entries import seed_items
from models import db


@pytest.fixture
def app():
    """Application configured for testing, with an in-memory database."""
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def items(app):
    """Seed the five demo items (ids 1 to 5)."""
    with app.app_context():
        seed_items()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()
