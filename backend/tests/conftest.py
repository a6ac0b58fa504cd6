import os
import sys
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Add the backend directory to the Python path
backend_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, backend_dir)

# Keep the application's own engine off the filesystem during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from database import get_db
from models.base import Base
from models.card import Card, CardStore
from services.editor_session import SessionManager, get_session_manager
from main import app

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

@pytest.fixture
def test_db():
    # Create engine with special configuration for in-memory SQLite
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    # Create a new session for each test
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        # Drop all tables after tests
        Base.metadata.drop_all(bind=engine)

@pytest.fixture
def sessions():
    """A fresh session registry, independent of the application's global one."""
    return SessionManager()

@pytest.fixture
def client(test_db, sessions):
    # Override the get_db dependency
    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_manager] = lambda: sessions

    # Create test client
    with TestClient(app) as test_client:
        yield test_client

    # Clear dependency override after test
    app.dependency_overrides.clear()

@pytest.fixture
def abcd_store():
    """Store holding cards A, B, C, D with ids 1-4."""
    return CardStore(
        cards=[
            Card(id=1, title="A", rows="a1\na2"),
            Card(id=2, title="B", rows="b1"),
            Card(id=3, title="C", rows="c1"),
            Card(id=4, title="D", rows=""),
        ],
        card_id_counter=4
    )
