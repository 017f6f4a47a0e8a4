import logging
import os
import secrets
import shutil
import time
from pathlib import Path
from fastapi import UploadFile
from app.core.settings_static import UPLOAD_DIR, THUMBNAILS_DIR, GAMES_DIR, upload_path_for

log = logging.getLogger("uploads")

# multipart field name -> destination folder
DESTINATIONS = {
    "thumbnail": THUMBNAILS_DIR,
    "gamefile": GAMES_DIR,
}

def has_file(upload: UploadFile | None) -> bool:
    return upload is not None and bool(upload.filename)

def store_upload(upload: UploadFile, field: str) -> str:
    """Writes an uploaded file to disk and returns its stored path (uploads/...)."""
    dest_dir = DESTINATIONS.get(field, UPLOAD_DIR)
    ext = os.path.splitext(upload.filename or "")[1].lower()
    # millisecond timestamp + random suffix, keeps the original extension
    fname = f"{int(time.time() * 1000)}-{secrets.token_hex(4)}{ext}"
    dest: Path = dest_dir / fname

    with open(dest, "wb") as buffer:
        shutil.copyfileobj(upload.file, buffer)

    stored = upload_path_for(dest)
    log.info("stored %s upload %r as %s", field, upload.filename, stored)
    return stored
