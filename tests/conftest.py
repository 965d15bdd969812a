"""Root conftest: app, client and SQL statement capture fixtures."""

import pytest
from sqlalchemy import event

from employee_app import create_app
from employee_app.config import TestingConfig
from employee_app.extensions import db
from employee_app.services.seed_service import seed_demo_data


@pytest.fixture
def app():
    """App on an in-memory database with empty tables."""
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.drop_all()


@pytest.fixture
def seeded_app(app):
    """Dev: A, B / HR: C"""
    with app.app_context():
        seed_demo_data()
    return app


@pytest.fixture
def client(seeded_app):
    return seeded_app.test_client()


@pytest.fixture
def statements(seeded_app):
    """Pushes an app context and records every SQL statement run inside it."""
    captured = []

    def _capture(conn, cursor, statement, parameters, context, executemany):
        captured.append(statement)

    with seeded_app.app_context():
        engine = db.engine
        event.listen(engine, "before_cursor_execute", _capture)
        yield captured
        event.remove(engine, "before_cursor_execute", _capture)
