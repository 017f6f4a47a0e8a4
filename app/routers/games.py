import logging
from fastapi import APIRouter, Depends, UploadFile, File, Form
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.deps import get_db, require_authenticated
from app.models.user import User
from app.models.game import Game
from app.schemas.game import GameOut, GameCreatedOut
from app.services.uploads import has_file, store_upload
from app.core.errors import BadRequest, NotFound

log = logging.getLogger("games")

router = APIRouter(prefix="/api/games", tags=["games"])

def game_to_dict(game: Game, creator_name: str | None) -> dict:
    """Public shape: the creator is reduced to id + username."""
    creator = None
    if creator_name is not None:
        creator = {"id": game.creator_id, "username": creator_name}
    return {
        "id": game.id,
        "title": game.title,
        "description": game.description,
        "creator": creator,
        "thumbnail": game.thumbnail,
        "filePath": game.file_path,
        "createdAt": game.created_at,
    }

def _with_creator():
    return select(Game, User.username).join(User, User.id == Game.creator_id, isouter=True)

@router.post("", response_model=GameCreatedOut)
def upload_game(
    title: str | None = Form(None),
    description: str | None = Form(None),
    thumbnail: UploadFile | None = File(None),
    gamefile: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    me: User = Depends(require_authenticated),
):
    # validate before anything touches the disk
    if not title or not description or not has_file(thumbnail) or not has_file(gamefile):
        raise BadRequest("Missing fields or files")

    game = Game(
        title=title,
        description=description,
        creator_id=me.id,
        thumbnail=store_upload(thumbnail, "thumbnail"),
        file_path=store_upload(gamefile, "gamefile"),
    )
    db.add(game)
    db.commit()
    db.refresh(game)
    log.info("user %s uploaded game %s (%r)", me.id, game.id, game.title)
    return {"message": "Game uploaded", "gameId": game.id}

@router.get("", response_model=list[GameOut])
def list_games(db: Session = Depends(get_db)):
    rows = db.execute(_with_creator().order_by(Game.id)).all()
    return [game_to_dict(game, username) for game, username in rows]

@router.get("/{game_id}", response_model=GameOut)
def get_game(game_id: int, db: Session = Depends(get_db)):
    row = db.execute(_with_creator().where(Game.id == game_id)).first()
    if row is None:
        raise NotFound("Game not found")
    game, username = row
    return game_to_dict(game, username)
