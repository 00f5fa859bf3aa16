# liftlog/main.py
import os
import time
import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from liftlog import __version__
from liftlog.errors import DomainError
from liftlog.routers.auth import router as auth_router
from liftlog.routers.exercises import router as exercises_router
from liftlog.routers.workouts import router as workouts_router
from liftlog.routers.progress import router as progress_router
from liftlog.db import Base, SessionLocal, engine  # for healthz DB check
from liftlog.settings import get_settings

log = logging.getLogger("uvicorn")
logging.getLogger("liftlog").setLevel(get_settings().LOG_LEVEL.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    if get_settings().AUTO_CREATE_SCHEMA:
        from liftlog import models  # noqa: F401  # registers tables on Base
        Base.metadata.create_all(bind=engine)
        log.info("database schema ensured")
    yield


app = FastAPI(
    title="LiftLog API",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "auth", "description": "Registration & login"},
        {"name": "exercises", "description": "Exercise catalogue"},
        {"name": "workouts", "description": "Logged workouts and their sets"},
        {"name": "progress", "description": "Dashboard and progress charts"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
ALLOW_ORIGINS = os.getenv("ALLOW_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    return JSONResponse(status_code=400, content={"detail": exc.message})

@app.get("/")
def root():
    return {"ok": True, "name": "LiftLog API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": os.getenv("API_VERSION", __version__)}

# Routers
app.include_router(auth_router)
app.include_router(exercises_router)
app.include_router(workouts_router)
app.include_router(progress_router)
