"""Shared pytest fixtures for the seeding tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, inspect, select
from sqlalchemy.orm import sessionmaker

from api.auth import get_password_context, make_password_context
from api.gateway import app
from api.seed import get_fixtures
from database.db_session import get_db, make_engine
from database.models import Customer, Invoice, Revenue, User
from seed_records import FailingRevenueFixtures, single_row_records
from seeding.fixtures import StaticFixtures

TABLES = {
    "users": User,
    "customers": Customer,
    "invoices": Invoice,
    "revenue": Revenue,
}


@pytest.fixture
def engine(tmp_path):
    """Create a temporary SQLite database for testing."""
    engine = make_engine(f"sqlite:///{tmp_path / 'dashboard_test.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def pwd_context():
    """bcrypt context at the minimum cost factor to keep tests fast."""
    return make_password_context(rounds=4)


@pytest.fixture
def single_row_fixtures():
    return StaticFixtures(**single_row_records())


@pytest.fixture
def failing_fixtures():
    return FailingRevenueFixtures(**single_row_records())


@pytest.fixture
def row_counts(engine):
    """Return a callable giving row counts per table; missing tables count as 0."""

    def _counts():
        inspector = inspect(engine)
        counts = {}
        with engine.connect() as conn:
            for name, model in TABLES.items():
                if not inspector.has_table(name):
                    counts[name] = 0
                    continue
                counts[name] = conn.execute(select(func.count()).select_from(model.__table__)).scalar_one()
        return counts

    return _counts


@pytest.fixture
def client(session_factory, pwd_context, single_row_fixtures):
    """TestClient wired to the temporary database and single-row fixtures."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_fixtures] = lambda: single_row_fixtures
    app.dependency_overrides[get_password_context] = lambda: pwd_context

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
