import base64
import datetime as dt
import json
import uuid

import jwt
import pytest

from zakfit import create_app
from zakfit.extensions import db
from zakfit.models.type_activity import TypeActivity
from zakfit.models.user import User
from zakfit.utils.auth import create_token

from conftest import TEST_SECRET, auth_headers, basic_header, login, register


def test_app_refuses_to_start_without_secret():
    with pytest.raises(RuntimeError):
        create_app({"SECRET_KEY": None, "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:"})


def test_register_hashes_password_and_hides_it(client, app):
    data = register(client, email="a@b.com", password="pw")

    assert uuid.UUID(data["id"])
    assert data["name"] == "A"
    assert data["surname"] == "B"
    assert data["email"] == "a@b.com"
    assert "password" not in data

    with app.app_context():
        user = User.query.filter_by(email="a@b.com").first()
        assert user is not None
        assert user.password != "pw"
        assert str(user.id) == data["id"]


def test_register_rejects_duplicate_email(client):
    register(client, email="dup@example.com")
    r = client.post("/users/register", json={
        "name": "C", "surname": "D", "email": "DUP@example.com", "password": "other"
    })
    assert r.status_code == 409
    assert r.get_json()["error"]["code"] == "EMAIL_IN_USE"


def test_register_validates_payload(client):
    r = client.post("/users/register", json={"name": "A", "email": "not-an-email"})
    assert r.status_code == 400
    err = r.get_json()["error"]
    assert err["code"] == "VALIDATION_ERROR"
    assert "email" in err["fields"]
    assert "password" in err["fields"]


def test_login_with_basic_credentials_issues_ten_minute_token(client):
    user = register(client)
    before = int(dt.datetime.now(dt.timezone.utc).timestamp())

    data = login(client)

    assert data["user"]["id"] == user["id"]
    assert "password" not in data["user"]
    payload = jwt.decode(data["token"], TEST_SECRET, algorithms=["HS256"])
    assert payload["userId"] == user["id"]
    assert before + 595 <= payload["exp"] <= before + 605


def test_login_accepts_json_body(client):
    register(client)
    r = client.post("/users/login", json={"email": "a@b.com", "password": "pw"})
    assert r.status_code == 200
    assert r.get_json()["token"]


def test_login_json_with_non_string_email_is_bad_request(client):
    register(client)
    r = client.post("/users/login", json={"email": 123, "password": "pw"})
    assert r.status_code == 400
    err = r.get_json()["error"]
    assert err["code"] == "VALIDATION_ERROR"
    assert "email" in err["fields"]


def test_login_json_with_non_string_password_is_bad_request(client):
    register(client)
    r = client.post("/users/login", json={"email": "a@b.com", "password": 123})
    assert r.status_code == 400
    assert "password" in r.get_json()["error"]["fields"]


def test_login_json_without_password_is_unauthorized(client):
    register(client)
    r = client.post("/users/login", json={"email": "a@b.com"})
    assert r.status_code == 401
    assert r.get_json()["error"]["code"] == "INVALID_CREDENTIALS"


def test_login_with_wrong_password_is_unauthorized(client):
    register(client)
    r = client.post("/users/login", headers=basic_header("a@b.com", "nope"))
    assert r.status_code == 401
    assert r.get_json()["error"]["code"] == "INVALID_CREDENTIALS"
    assert r.headers.get("WWW-Authenticate", "").startswith("Basic")


def test_login_unknown_email_is_unauthorized(client):
    r = client.post("/users/login", headers=basic_header("ghost@example.com", "pw"))
    assert r.status_code == 401


def test_protected_route_without_header(client):
    r = client.post("/meals", json={})
    assert r.status_code == 401
    assert r.get_json()["error"]["message"] == "Missing Authorization header"


def test_protected_route_with_other_scheme(client):
    r = client.get("/meals", headers=basic_header("a@b.com", "pw"))
    assert r.status_code == 401
    assert r.get_json()["error"]["message"] == "Missing Authorization header"


def test_garbage_token_is_invalid(client):
    r = client.get("/meals", headers={"Authorization": "Bearer not.a.token"})
    assert r.status_code == 401
    assert r.get_json()["error"]["code"] == "INVALID_TOKEN"


def test_expired_token_is_invalid(client, app):
    user = register(client)
    with app.app_context():
        issued = dt.datetime.now(dt.timezone.utc) - dt.timedelta(minutes=11)
        token = create_token(user["id"], now=issued)

    r = client.get("/meals", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.get_json()["error"]["code"] == "INVALID_TOKEN"


def test_token_still_valid_just_before_expiry(client, app):
    user = register(client)
    with app.app_context():
        issued = dt.datetime.now(dt.timezone.utc) - dt.timedelta(minutes=9)
        token = create_token(user["id"], now=issued)

    r = client.get("/meals", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200


def test_token_signed_with_another_secret_is_invalid(client):
    user = register(client)
    exp = int((dt.datetime.now(dt.timezone.utc) + dt.timedelta(minutes=10)).timestamp())
    token = jwt.encode({"userId": user["id"], "exp": exp}, "other-secret", algorithm="HS256")

    r = client.get("/meals", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_tampered_claims_break_signature(client):
    victim = register(client, email="victim@example.com")
    register(client, email="attacker@example.com")
    token = login(client, email="attacker@example.com")["token"]

    header, payload, signature = token.split(".")
    claims = json.loads(base64.urlsafe_b64decode(payload + "=" * (-len(payload) % 4)))
    claims["userId"] = victim["id"]
    forged = base64.urlsafe_b64encode(json.dumps(claims).encode()).decode().rstrip("=")

    r = client.get(
        f"/users/{victim['id']}",
        headers={"Authorization": f"Bearer {header}.{forged}.{signature}"},
    )
    assert r.status_code == 401


def test_token_for_missing_user(client, app):
    with app.app_context():
        token = create_token(uuid.uuid4())

    r = client.get("/meals", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.get_json()["error"]["message"] == "User not found"


def test_valid_token_reaches_handler(client):
    headers = auth_headers(client)
    r = client.get("/meals", headers=headers)
    assert r.status_code == 200
    assert r.get_json() == []


def test_type_activities_are_public(client):
    r = client.get("/type_activities")
    assert r.status_code == 200
    assert sorted(t["name"] for t in r.get_json()) == ["Cardio", "Yoga"]


def test_type_activities_keep_insertion_order(client, app):
    with app.app_context():
        db.session.add(TypeActivity(name="Zumba", created_at=dt.datetime(2000, 1, 1)))
        db.session.add(TypeActivity(name="Aerobics", created_at=dt.datetime(2100, 1, 1)))
        db.session.commit()

    names = [t["name"] for t in client.get("/type_activities").get_json()]
    assert names[0] == "Zumba"
    assert names[-1] == "Aerobics"
    assert sorted(names[1:3]) == ["Cardio", "Yoga"]


def test_unknown_route_uses_error_envelope(client):
    r = client.get("/nowhere")
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "NOT_FOUND"


def test_home_and_health_are_public(client):
    assert client.get("/").get_json() == {"message": "It works!"}
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json()["database"] == "healthy"
