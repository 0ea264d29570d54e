from flask import current_app

from zakfit.extensions import db
from zakfit.models.user import User
from zakfit.schemas.user_schema import LoginSchema, PasswordUpdateSchema, UserSchema
from zakfit.services.crud_service import load_payload
from zakfit.utils.auth import basic_credentials, check_password_hash, create_token, hash_password
from zakfit.utils.errors import BadRequest, Conflict, NotFound, Unauthorized
from zakfit.utils.http import json_body, no_content, ok, parse_uuid

user_schema = UserSchema()
password_schema = PasswordUpdateSchema()
login_schema = LoginSchema()


def _ensure_email_free(email: str, exclude_id=None):
    query = User.query.filter(User.email == email)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    if query.first():
        raise Conflict("email already registered", code="EMAIL_IN_USE")


def _own_user(current_user: User, user_id) -> User:
    target_id = parse_uuid(user_id)
    if target_id is None:
        raise BadRequest("Invalid user id")
    # Other users' profiles are reported as missing, same as owned resources.
    if target_id != current_user.id:
        raise NotFound("User not found")
    return current_user


def _commit():
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


def register_handler():
    data = load_payload(user_schema, json_body())
    _ensure_email_free(data["email"])

    data["password"] = hash_password(data["password"])
    user = User(**data)
    db.session.add(user)
    _commit()
    current_app.logger.info("Registered user %s", user.id)
    return ok(user_schema.dump(user))


def login_handler():
    credentials = basic_credentials()
    if credentials is None:
        # JSON fallback; non-string values are a malformed body
        data = load_payload(login_schema, json_body())
        credentials = data["email"], data["password"]
    email, password = credentials
    if not email or not password:
        exc = Unauthorized("email and password required", code="INVALID_CREDENTIALS")
        exc.headers["WWW-Authenticate"] = 'Basic realm="zakfit"'
        raise exc

    user = User.query.filter_by(email=email).first()
    if not user or not check_password_hash(user.password, password):
        exc = Unauthorized("Email or password incorrect", code="INVALID_CREDENTIALS")
        exc.headers["WWW-Authenticate"] = 'Basic realm="zakfit"'
        raise exc

    return ok({
        "token": create_token(user.id),
        "user": user_schema.dump(user),
    })


def get_user_handler(current_user: User, user_id):
    return ok(user_schema.dump(_own_user(current_user, user_id)))


def update_user_handler(current_user: User, user_id):
    user = _own_user(current_user, user_id)
    data = load_payload(user_schema, json_body(), partial=True)

    if "email" in data:
        _ensure_email_free(data["email"], exclude_id=user.id)
    if "password" in data:
        data["password"] = hash_password(data["password"])

    for field, value in data.items():
        setattr(user, field, value)
    _commit()
    return ok(user_schema.dump(user))


def update_password_handler(current_user: User, user_id):
    user = _own_user(current_user, user_id)
    data = load_payload(password_schema, json_body())

    if not check_password_hash(user.password, data["old_password"]):
        raise Unauthorized("Old password incorrect", code="INVALID_CREDENTIALS")

    user.password = hash_password(data["new_password"])
    _commit()
    return ok({"message": "Password updated"})


def delete_user_handler(current_user: User, user_id):
    user = _own_user(current_user, user_id)
    # Meals (with their compositions) and activities go with the user.
    db.session.delete(user)
    _commit()
    current_app.logger.info("Deleted user %s", user.id)
    return no_content()
