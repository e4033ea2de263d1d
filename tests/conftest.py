from decimal import Decimal

import pytest
from sqlalchemy import event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from app.config import settings
from app.database import Base, build_engine
from app.dependencies import get_db
from app.identity import issue_token
from app.main import app
from app.models.gift import Gift
from app.models.gift_list import GiftList
from app.models.user import User

test_engine = build_engine(settings.test_database_url)
TestSession = sessionmaker(bind=test_engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db():
    connection = test_engine.connect()
    transaction = connection.begin()
    session = TestSession(bind=connection)
    yield session
    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def owner_user(db):
    user = User(email="owner@test.com", name="Owner", password_hash="x")
    user.set_password("owner123")
    db.add(user)
    db.flush()
    return user


@pytest.fixture
def other_user(db):
    user = User(email="other@test.com", name="Other", password_hash="x")
    user.set_password("other123")
    db.add(user)
    db.flush()
    return user


@pytest.fixture
def owner_headers(owner_user):
    return {"Authorization": f"Bearer {issue_token(owner_user.id, owner_user.name)}"}


@pytest.fixture
def other_headers(other_user):
    return {"Authorization": f"Bearer {issue_token(other_user.id, other_user.name)}"}


@pytest.fixture
def sample_list(db, owner_user):
    gift_list = GiftList(
        title="Wedding",
        slug="wedding-2025",
        event_type="WEDDING",
        owner_id=owner_user.id,
    )
    db.add(gift_list)
    db.flush()
    return gift_list


@pytest.fixture
def sample_gift(db, sample_list):
    gift = Gift(name="Blender", price=Decimal("50.00"), category="KITCHEN")
    sample_list.gifts.append(gift)
    db.flush()
    return gift


@pytest.fixture
def file_sessions(tmp_path):
    """Independent sessions on one file database, like concurrent requests."""
    engine = build_engine(f"sqlite:///{tmp_path / 'registry.db'}")

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine)
    engine.dispose()
