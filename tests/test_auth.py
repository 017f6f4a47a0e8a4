from app.main import app
from app.models.user import User
from app.core.settings import SESSION_COOKIE_NAME
from app.security import verify_password
from conftest import signup


def test_signup_creates_user_with_defaults(client, db):
    body = signup(client, "alice", "pw123")
    assert body["message"] == "Signup successful"
    assert body["username"] == "alice"
    assert "password" not in body

    user = db.get(User, body["userId"])
    assert user.currency == 1000
    assert user.badges == []
    assert user.inventory == []
    assert user.is_admin is False
    assert user.avatar == ""
    assert user.password != "pw123"
    assert verify_password("pw123", user.password)


def test_signup_sets_session_cookie(client):
    signup(client)
    assert SESSION_COOKIE_NAME in client.cookies
    assert client.get("/api/profile").status_code == 200


def test_signup_requires_username_and_password(client):
    for payload in ({}, {"username": "bob"}, {"password": "x"}, {"username": "", "password": "x"}):
        resp = client.post("/api/signup", json=payload)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Username and password required"}


def test_signup_twice_same_username_is_rejected(make_client):
    signup(make_client(), "alice", "pw123")
    resp = make_client().post("/api/signup", json={"username": "alice", "password": "other"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Username already taken"}


def test_login_success(make_client):
    signup(make_client(), "alice", "pw123")
    c = make_client()
    resp = c.post("/api/login", json={"username": "alice", "password": "pw123"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Login successful"
    assert body["username"] == "alice"
    assert c.get("/api/profile").json()["username"] == "alice"


def test_login_wrong_password_and_unknown_user_look_identical(make_client):
    signup(make_client(), "alice", "pw123")
    wrong_pw = make_client().post("/api/login", json={"username": "alice", "password": "nope"})
    no_user = make_client().post("/api/login", json={"username": "ghost", "password": "pw123"})
    assert wrong_pw.status_code == no_user.status_code == 400
    assert wrong_pw.json() == no_user.json() == {"error": "Invalid credentials"}


def test_login_with_missing_fields_is_invalid_credentials(client):
    resp = client.post("/api/login", json={})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid credentials"}


def test_login_replaces_previous_session(alice):
    store = app.state.session_store
    assert len(store) == 1
    alice.post("/api/login", json={"username": "alice", "password": "pw123"})
    assert len(store) == 1


def test_logout_destroys_session_and_is_idempotent(alice):
    assert alice.post("/api/logout").json() == {"message": "Logged out"}
    assert alice.get("/api/profile").status_code == 401
    resp = alice.post("/api/logout")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Logged out"}


def test_forged_cookie_is_not_a_session(client):
    client.cookies.set(SESSION_COOKIE_NAME, "not-a-signed-token")
    resp = client.get("/api/profile")
    assert resp.status_code == 401
    assert resp.json() == {"error": "Not authenticated"}


def test_malformed_json_is_bad_request(client):
    resp = client.post("/api/signup", content="{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid request"}


def test_signup_race_on_username_maps_to_taken(make_client, monkeypatch):
    signup(make_client(), "alice", "pw123")
    # the existence check misses, the unique index still rejects the insert
    monkeypatch.setattr("app.routers.auth.find_user", lambda db, username: None)
    c = make_client()
    resp = c.post("/api/signup", json={"username": "alice", "password": "other"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Username already taken"}
    assert SESSION_COOKIE_NAME not in c.cookies


def test_long_username_is_accepted(client):
    name = "u" * 300
    assert signup(client, name, "pw")["username"] == name
