import uuid

from werkzeug.security import check_password_hash

from zakfit.extensions import db
from zakfit.models import Composition, Food, GoalActivity, Meal, PhysicalActivity, User

from conftest import auth_headers, basic_header, login, register


def test_get_own_profile(client):
    user = register(client, height=180.5, weight=75.0, health_goal=2, diet_preferences=[0, 5])
    headers = auth_headers(client)

    r = client.get(f"/users/{user['id']}", headers=headers)
    assert r.status_code == 200
    data = r.get_json()
    assert data == user
    assert data["diet_preferences"] == [0, 5]
    assert "password" not in data


def test_other_users_profile_is_not_found(client):
    other = register(client, email="other@example.com")
    headers = auth_headers(client, email="me@example.com")

    assert client.get(f"/users/{other['id']}", headers=headers).status_code == 404
    assert client.put(f"/users/{other['id']}", headers=headers, json={"name": "X"}).status_code == 404
    assert client.delete(f"/users/{other['id']}", headers=headers).status_code == 404


def test_malformed_user_id_is_bad_request(client):
    headers = auth_headers(client)
    r = client.get("/users/not-a-uuid", headers=headers)
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "BAD_REQUEST"


def test_partial_update_only_touches_supplied_fields(client):
    user = register(client, height=170.0, weight=60.0, health_goal=0, diet_preferences=[1])
    headers = auth_headers(client)

    r = client.put(f"/users/{user['id']}", headers=headers, json={"weight": 58.5})
    assert r.status_code == 200
    updated = r.get_json()

    expected = dict(user, weight=58.5)
    assert updated == expected


def test_update_rejects_invalid_health_goal(client):
    user = register(client)
    headers = auth_headers(client)
    r = client.put(f"/users/{user['id']}", headers=headers, json={"health_goal": 7})
    assert r.status_code == 400


def test_update_email_must_stay_unique(client):
    register(client, email="taken@example.com")
    user = register(client, email="me@example.com")
    headers = auth_headers(client, email="me@example.com")

    r = client.put(f"/users/{user['id']}", headers=headers, json={"email": "taken@example.com"})
    assert r.status_code == 409


def test_update_password_via_profile_is_rehashed(client, app):
    user = register(client)
    headers = auth_headers(client)

    r = client.put(f"/users/{user['id']}", headers=headers, json={"password": "new-pw"})
    assert r.status_code == 200
    assert "password" not in r.get_json()

    with app.app_context():
        stored = db.session.get(User, uuid.UUID(user["id"]))
        assert stored.password != "new-pw"
        assert check_password_hash(stored.password, "new-pw")
    login(client, password="new-pw")


def test_change_password_requires_old_password(client):
    user = register(client)
    headers = auth_headers(client)

    r = client.put(f"/users/{user['id']}/password", headers=headers,
                   json={"old_password": "wrong", "new_password": "next"})
    assert r.status_code == 401

    r = client.put(f"/users/{user['id']}/password", headers=headers,
                   json={"old_password": "pw", "new_password": "next"})
    assert r.status_code == 200

    assert client.post("/users/login", headers=basic_header("a@b.com", "pw")).status_code == 401
    login(client, password="next")


def test_delete_user_cascades_to_owned_rows(client, app, type_activity_id):
    user = register(client)
    headers = auth_headers(client)

    food = client.post("/foods", headers=headers, json={
        "name": "Rice", "quantity": 100, "proteins": 2.7, "carbs": 28, "fats": 0.3, "calories": 130
    }).get_json()
    meal = client.post("/meals", headers=headers, json={
        "name": "Lunch", "meal_type": "lunch", "quantity": 1,
        "date": "2025-01-05T12:00:00", "calories": 500
    }).get_json()
    client.post("/compositions", headers=headers, json={
        "food_id": food["id"], "meal_id": meal["id"], "quantity": 150
    })
    client.post("/physical_activities", headers=headers, json={
        "duration": 30, "date": "2025-01-05T18:00:00", "type_activity_id": type_activity_id
    })
    client.post("/goal_activities", headers=headers, json={
        "frequency": 3, "type_activity_id": type_activity_id
    })

    r = client.delete(f"/users/{user['id']}", headers=headers)
    assert r.status_code == 204

    with app.app_context():
        user_id = uuid.UUID(user["id"])
        assert db.session.get(User, user_id) is None
        assert Meal.query.filter_by(user_id=user_id).count() == 0
        assert PhysicalActivity.query.filter_by(user_id=user_id).count() == 0
        assert GoalActivity.query.filter_by(user_id=user_id).count() == 0
        assert Composition.query.count() == 0
        # foods are a shared catalogue and survive
        assert Food.query.count() == 1

    # the token now points at a user that no longer exists
    assert client.get("/meals", headers=headers).status_code == 401
