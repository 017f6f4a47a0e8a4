from app.core.settings_static import UPLOAD_DIR
from app.models.game import Game

PNG = b"\x89PNG\r\n\x1a\nfake-thumbnail"
ZIP = b"PK\x03\x04fake-game-archive"


def _upload(client, title="Space Rocks", description="Shoot the rocks", thumbnail=True, gamefile=True):
    files = {}
    if thumbnail:
        files["thumbnail"] = ("cover.png", PNG, "image/png")
    if gamefile:
        files["gamefile"] = ("build.zip", ZIP, "application/zip")
    data = {}
    if title is not None:
        data["title"] = title
    if description is not None:
        data["description"] = description
    return client.post("/api/games", data=data, files=files or None)


def _stored_files():
    return sorted(p.name for p in UPLOAD_DIR.rglob("*") if p.is_file())


def test_upload_requires_session(client):
    assert _upload(client).status_code == 401


def test_upload_game(alice, db):
    resp = _upload(alice)
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Game uploaded"

    game = db.get(Game, body["gameId"])
    assert game.title == "Space Rocks"
    assert game.thumbnail.startswith("uploads/thumbnails/") and game.thumbnail.endswith(".png")
    assert game.file_path.startswith("uploads/games/") and game.file_path.endswith(".zip")
    assert game.created_at is not None

    # stored files are served back under /uploads
    assert alice.get("/" + game.thumbnail).content == PNG
    assert alice.get("/" + game.file_path).content == ZIP


def test_upload_rejects_missing_fields_or_files(alice):
    before = _stored_files()
    for kwargs in ({"title": None}, {"description": ""}, {"thumbnail": False}, {"gamefile": False}):
        resp = _upload(alice, **kwargs)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing fields or files"}
    # nothing written for rejected uploads
    assert _stored_files() == before


def test_list_games_resolves_creator_username(alice, client):
    _upload(alice, title="First")
    _upload(alice, title="Second")
    games = client.get("/api/games").json()
    assert [g["title"] for g in games] == ["First", "Second"]
    for g in games:
        assert g["creator"]["username"] == "alice"
        assert set(g["creator"]) == {"id", "username"}
        assert set(g) == {"id", "title", "description", "creator", "thumbnail", "filePath", "createdAt"}


def test_get_game(alice, client):
    game_id = _upload(alice).json()["gameId"]
    resp = client.get(f"/api/games/{game_id}")
    assert resp.status_code == 200
    game = resp.json()
    assert game["id"] == game_id
    assert game["description"] == "Shoot the rocks"
    assert game["creator"]["username"] == "alice"


def test_get_missing_game_is_404_with_error_body(client):
    resp = client.get("/api/games/424242")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Game not found"}


def test_games_survive_creator_deletion(alice, admin, client):
    game_id = _upload(alice).json()["gameId"]
    users = admin.get("/api/admin/users").json()
    alice_id = next(u["id"] for u in users if u["username"] == "alice")
    admin.delete(f"/api/admin/users/{alice_id}")

    game = client.get(f"/api/games/{game_id}").json()
    assert game["creator"] is None
    assert game["title"] == "Space Rocks"
