import logging
from typing import Optional

import bcrypt
from starlette.requests import Request

from .models import AdminUser

BCRYPT_ROUNDS = 10


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(password: str, hashed: Optional[str]) -> bool:
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        logging.warning("⚠️ Admin password hash is malformed")
        return False


def authenticate(repository, username: str, password: str) -> Optional[AdminUser]:
    """Active admin matching the credentials, else None."""
    admin = repository.get_admin_by_username(username)
    if admin is None or not verify_password(password, admin.password):
        return None
    return admin


# ---------------------------------------------------------
# Session helpers
# ---------------------------------------------------------
def login_session(request: Request, admin: AdminUser) -> None:
    request.session["admin_id"] = admin.id
    request.session["admin_username"] = admin.username


def logout_session(request: Request) -> None:
    request.session.clear()


def session_admin(request: Request) -> Optional[dict]:
    admin_id = request.session.get("admin_id")
    if not admin_id:
        return None
    return {"id": admin_id, "username": request.session.get("admin_username")}
