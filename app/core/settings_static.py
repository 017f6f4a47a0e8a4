from pathlib import Path
import os

# Package root  ->  .../app
APP_DIR = Path(__file__).resolve().parents[1]
# Repo root (parent of app/)
REPO_ROOT = APP_DIR.parent

# === Uploaded files, served under /uploads ===
# Override with UPLOAD_DIR
UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", REPO_ROOT / "uploads")).resolve()
UPLOAD_DIR.mkdir(parents=True, exist_ok=True)

THUMBNAILS_DIR = UPLOAD_DIR / "thumbnails"; THUMBNAILS_DIR.mkdir(parents=True, exist_ok=True)
GAMES_DIR = UPLOAD_DIR / "games";           GAMES_DIR.mkdir(parents=True, exist_ok=True)

UPLOAD_URL_PREFIX = "/uploads"

def upload_path_for(abs_path: Path) -> str:
    """Returns uploads/... for a Path inside UPLOAD_DIR."""
    rel = abs_path.resolve().relative_to(UPLOAD_DIR)
    return f"uploads/{rel.as_posix()}"
