import datetime as dt
from functools import wraps

from flask import request, current_app
import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from zakfit.extensions import db
from zakfit.models.user import User
from zakfit.utils.errors import Unauthorized
from zakfit.utils.http import parse_uuid

TOKEN_ALGORITHM = "HS256"


def hash_password(plain: str) -> str:
    return generate_password_hash(plain)


def create_token(user_id, now: dt.datetime = None) -> str:
    now = now or dt.datetime.now(dt.timezone.utc)
    ttl = int(current_app.config["TOKEN_TTL_SECONDS"])
    payload = {
        "userId": str(user_id),
        "exp": int((now + dt.timedelta(seconds=ttl)).timestamp()),
    }
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm=TOKEN_ALGORITHM)


def decode_token(token: str):
    return jwt.decode(
        token,
        current_app.config["SECRET_KEY"],
        algorithms=[TOKEN_ALGORITHM],
        options={"require": ["exp", "userId"]},
    )


def authenticate_user(token: str) -> User:
    """Resolve a bearer token to its user, or raise Unauthorized."""
    try:
        payload = decode_token(token)
    except jwt.PyJWTError as exc:
        current_app.logger.info("Rejected token: %s", exc)
        raise Unauthorized("Invalid token", code="INVALID_TOKEN") from exc

    user_id = parse_uuid(payload.get("userId"))
    if user_id is None:
        raise Unauthorized("Invalid token", code="INVALID_TOKEN")

    user = db.session.get(User, user_id)
    if not user:
        raise Unauthorized("User not found")
    return user


def require_auth(f):
    """Pass the authenticated user to the view as its first argument."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        auth_header = request.headers.get("Authorization", "")
        scheme, _, token = auth_header.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise Unauthorized("Missing Authorization header")
        current_user = authenticate_user(token.strip())
        return f(current_user, *args, **kwargs)
    return wrapper


def basic_credentials():
    """Email and password from a Basic challenge, or None when there is none."""
    auth = request.authorization
    if auth is None or auth.type != "basic":
        return None
    return (auth.username or "").strip().lower(), auth.password or ""


__all__ = [
    "hash_password",
    "check_password_hash",
    "create_token",
    "decode_token",
    "authenticate_user",
    "require_auth",
    "basic_credentials",
]
