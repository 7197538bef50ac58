"""
Pytest fixtures for accessmatrix tests.

Provides the application with an in-memory database, a test client,
per-test table cleanup and helpers for signing principals in.
"""

import pytest
from accessmatrix import create_app
from accessmatrix.extensions import db
from accessmatrix.permissions import PermissionSet
from accessmatrix.services.permission_store import PermissionStore
from accessmatrix.services.principal_service import PrincipalResolver, Resolution, Principal, SessionData
from accessmatrix.services.roster_service import InMemoryEmployeeRoster
from accessmatrix.services.session_service import (
    KeyValueSessionProvider,
    EMPLOYEE_SESSION_KEY,
    CURRENT_USER_KEY,
)


ADMIN_EMAIL = "boss@example.com"

TEST_CONFIG = {
    'TESTING': True,
    'SECRET_KEY': 'test',
    'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    'SQLALCHEMY_TRACK_MODIFICATIONS': False,
    'ADMIN_ROLES': ['ADMIN', 'OWNER'],
    'ADMIN_EMAILS': [ADMIN_EMAIL],
    'TRUST_ADMIN_SCOPE': True,
    'ADMIN_SCOPE_PREFIX': '/admin',
}


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app(TEST_CONFIG)

    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Empty every table before the test."""
    with app.app_context():
        meta = db.metadata
        for table in reversed(meta.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()

        yield db.session

        db.session.rollback()


def sign_in(client, current_user=None, employee_session=None):
    """Put identity records into the signed session cookie."""
    with client.session_transaction() as sess:
        sess.clear()
        if current_user is not None:
            sess[CURRENT_USER_KEY] = current_user
        if employee_session is not None:
            sess[EMPLOYEE_SESSION_KEY] = employee_session


@pytest.fixture(scope='function')
def admin_client(client, db_session):
    sign_in(client, current_user={"email": "owner@example.com", "role": "OWNER"})
    return client


@pytest.fixture(scope='function')
def employee_client(client, db_session):
    sign_in(client, employee_session={"id": 7, "email": "jane@example.com", "name": "Jane"})
    return client


def make_store(storage=None, roster=None, **resolver_options):
    """Build a store reading identity from a plain dict (browser-storage layout)."""
    if roster is None:
        roster = InMemoryEmployeeRoster()
    resolver = PrincipalResolver(roster, **resolver_options)
    return PermissionStore(resolver, KeyValueSessionProvider(storage if storage is not None else {}))


class FixedResolver:
    """Resolver stub returning a fixed resolution regardless of session data."""

    def __init__(self, is_administrator: bool, permission_set: PermissionSet):
        self.resolution = Resolution(
            principal=Principal("ADMINISTRATOR" if is_administrator else "EMPLOYEE", "stub@example.com"),
            is_administrator=is_administrator,
            permission_set=permission_set,
            source="stub",
        )

    def resolve(self, session: SessionData):
        return self.resolution
