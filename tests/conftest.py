"""Pytest fixtures for Flask application testing."""

import os

import pytest


# Disable OpenTelemetry for tests
os.environ["OTEL_SDK_DISABLED"] = "true"


@pytest.fixture
def app():
    """Create test application."""
    from tasktracker import create_app
    from tasktracker.config import TestConfig

    app = create_app(TestConfig)
    app.config["TESTING"] = True

    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def db(app):
    """Create test database."""
    from tasktracker.extensions import db as _db

    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def store(db):
    """Store bound to the test session."""
    from tasktracker.store import Store

    return Store(db.session)


@pytest.fixture
def user(db):
    """Create test user."""
    from tasktracker.models import User

    user = User(username="alice", password="s3cret")
    db.session.add(user)
    db.session.commit()

    return user
