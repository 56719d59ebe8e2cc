import os
import time
import logging

from dotenv import load_dotenv
from fastapi import Depends, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from starlette.middleware.sessions import SessionMiddleware

from .auth import session_admin
from .db import get_db
from .repository import CatalogRepository

load_dotenv()

SESSION_SECRET = os.getenv("SESSION_SECRET", "electrolight-dev-session-secret")
SESSION_HTTPS_ONLY = os.getenv("SESSION_HTTPS_ONLY", "false").lower() in {"1", "true", "yes"}
SESSION_MAX_AGE = 24 * 60 * 60
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


def add_cors(app, origins=None):
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or CORS_ORIGINS or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def add_sessions(app, secret=None):
    app.add_middleware(
        SessionMiddleware,
        secret_key=secret or SESSION_SECRET,
        max_age=SESSION_MAX_AGE,
        same_site="lax",
        https_only=SESSION_HTTPS_ONLY,
    )


def add_request_logging(app):
    @app.middleware("http")
    async def log_api_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        if request.url.path.startswith("/api"):
            duration = (time.perf_counter() - start) * 1000
            logging.info(f"{request.method} {request.url.path} {response.status_code} in {duration:.0f}ms")
        return response


def get_repository(db: Session = Depends(get_db)) -> CatalogRepository:
    return CatalogRepository(db)


def require_admin(request: Request) -> dict:
    admin = session_admin(request)
    if admin is None:
        raise HTTPException(status_code=401, detail="Unauthorized - Admin access required")
    return admin
