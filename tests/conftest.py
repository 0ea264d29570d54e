import base64

import pytest

from zakfit import create_app
from zakfit.extensions import db
from zakfit.models.type_activity import TypeActivity

TEST_SECRET = "test-secret"


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SQLALCHEMY_ENGINE_OPTIONS": {},
        "SECRET_KEY": TEST_SECRET,
        "TOKEN_TTL_SECONDS": 600,
    })
    with app.app_context():
        db.create_all()
        for name in ["Cardio", "Yoga"]:
            db.session.add(TypeActivity(name=name))
        db.session.commit()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def basic_header(email, password):
    raw = f"{email}:{password}".encode("utf-8")
    return {"Authorization": "Basic " + base64.b64encode(raw).decode("ascii")}


def register(client, email="a@b.com", password="pw", **extra):
    body = {"name": "A", "surname": "B", "email": email, "password": password}
    body.update(extra)
    r = client.post("/users/register", json=body)
    assert r.status_code == 200, r.data
    return r.get_json()


def login(client, email="a@b.com", password="pw"):
    r = client.post("/users/login", headers=basic_header(email, password))
    assert r.status_code == 200, r.data
    return r.get_json()


def auth_headers(client, email="a@b.com", password="pw"):
    """Register (if needed) and log in, returning bearer headers."""
    r = client.post("/users/login", headers=basic_header(email, password))
    if r.status_code == 401:
        register(client, email=email, password=password)
        r = client.post("/users/login", headers=basic_header(email, password))
    token = r.get_json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def type_activity_id(app):
    with app.app_context():
        return str(TypeActivity.query.filter_by(name="Cardio").first().id)
