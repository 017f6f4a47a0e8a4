import os
import shutil
import tempfile

# Must be set before anything under app/ is imported
_TMP = tempfile.mkdtemp(prefix="zentrix-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP}/test.db"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP, "uploads")
os.environ["SESSION_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.db import Base, SessionLocal, engine
from app.models.item import Item
from scripts.make_admin import set_admin


@pytest.fixture(autouse=True)
def _fresh_state():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    app.state.session_store.clear()
    yield


def pytest_sessionfinish(session, exitstatus):
    engine.dispose()
    shutil.rmtree(_TMP, ignore_errors=True)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_client():
    """Factory: each client keeps its own cookie jar, i.e. its own session."""
    def _make(**kwargs):
        return TestClient(app, **kwargs)
    return _make


@pytest.fixture
def client(make_client):
    return make_client()


def signup(client, username="alice", password="pw123"):
    resp = client.post("/api/signup", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()


@pytest.fixture
def alice(client):
    """A client logged in as a fresh regular user."""
    signup(client, "alice", "pw123")
    return client


@pytest.fixture
def admin(make_client, db):
    c = make_client()
    signup(c, "root", "rootpw")
    assert set_admin(db, "root")
    return c


@pytest.fixture
def add_item(db):
    def _add(name="Neon Visor", price=300, image="/uploads/items/neon.png", type_="avatar"):
        item = Item(name=name, price=price, image=image, type=type_)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item
    return _add
