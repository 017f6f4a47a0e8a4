import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core import settings
from app.core.errors import ApiError
from app.core.sessions import MemorySessionStore
from app.core.settings_static import UPLOAD_DIR, UPLOAD_URL_PREFIX
from app.db import Base, engine

from app.routers import auth as auth_router
from app.routers import profile as profile_router
from app.routers import items as items_router
from app.routers import games as games_router
from app.routers import admin as admin_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("zentrix")

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Zentrix API")

# ==== Sessions ====
app.state.session_store = MemorySessionStore(max_age=settings.SESSION_MAX_AGE)

# ==== Uploaded files ====
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=str(UPLOAD_DIR)), name="uploads")

# ==== CORS ====
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==== Errors: always {"error": ...} ====
@app.exception_handler(ApiError)
def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(RequestValidationError)
def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    log.debug("rejected %s %s: %s", request.method, request.url.path, errors)
    # an id that cannot parse cannot resolve either
    if errors and all(tuple(e.get("loc", ()))[:1] == ("path",) for e in errors):
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return JSONResponse(status_code=400, content={"error": "Invalid request"})

@app.exception_handler(StarletteHTTPException)
def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail},
                        headers=getattr(exc, "headers", None))

@app.exception_handler(Exception)
def unexpected_error_handler(request: Request, exc: Exception):
    log.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Server error"})

# ==== Routers ====
app.include_router(auth_router.router)
app.include_router(profile_router.router)
app.include_router(items_router.router)
app.include_router(games_router.router)
app.include_router(admin_router.router)

@app.get("/", response_class=PlainTextResponse)
def root():
    return "Zentrix backend is running."

@app.get("/health")
def health():
    return {"status": "ok"}

def run():
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)

if __name__ == "__main__":
    run()
