# tests/test_users.py
from educenter.models import User
from educenter.security_utils import verify_password_bcrypt


def test_user_password_is_hashed_and_never_returned(client, db_session, user):
    assert "password" not in user
    assert user["email"] == "bat@example.com"

    stored = db_session.get(User, user["id"])
    assert stored.password != "secret123"
    assert stored.password.startswith("$2")
    assert verify_password_bcrypt("secret123", stored.password)


def test_updating_password_rehashes_it(client, db_session, user):
    response = client.put(f"/users/{user['id']}", json={"password": "another-secret"})
    assert response.status_code == 200

    stored = db_session.get(User, user["id"])
    assert verify_password_bcrypt("another-secret", stored.password)
    assert not verify_password_bcrypt("secret123", stored.password)


def test_update_without_password_keeps_the_old_hash(client, db_session, user):
    before = db_session.get(User, user["id"]).password

    response = client.put(f"/users/{user['id']}", json={"name": "Bat-Erdene"})
    assert response.status_code == 200
    assert response.json()["name"] == "Bat-Erdene"

    db_session.expire_all()
    assert db_session.get(User, user["id"]).password == before


def test_invalid_email_is_rejected(client, role):
    response = client.post(
        "/users",
        json={"email": "not-an-email", "password": "secret123", "name": "X", "userRoleId": role["id"]},
    )
    assert response.status_code == 422


def test_user_requires_role(client):
    response = client.post(
        "/users", json={"email": "x@example.com", "password": "secret123", "name": "X"}
    )
    assert response.status_code == 422


def test_duplicate_email_surfaces_as_500(client, user, role):
    response = client.post(
        "/users",
        json={"email": "bat@example.com", "password": "secret123", "name": "Dup", "userRoleId": role["id"]},
    )
    assert response.status_code == 500
    assert "UNIQUE constraint failed" in response.json()["detail"]


def test_workers_are_users_employed_by_a_center(client, create, role, center, user):
    worker = create(
        "/workers",
        {
            "email": "tutor@example.com",
            "password": "secret123",
            "name": "Tutor",
            "userRoleId": role["id"],
            "workEducationCenterId": center["id"],
        },
    )

    workers = client.get("/workers").json()
    assert [w["id"] for w in workers] == [worker["id"]]

    # Plain users are not reachable through /workers
    response = client.get(f"/workers/{user['id']}")
    assert response.status_code == 404
    assert response.json()["detail"] == f"Not found Worker with id {user['id']}."

    # ...but workers are still users
    assert client.get(f"/users/{worker['id']}").status_code == 200
    assert [w["id"] for w in client.get(f"/educenters/{center['id']}/workers").json()] == [worker["id"]]


def test_worker_requires_education_center(client, role):
    response = client.post(
        "/workers",
        json={"email": "w@example.com", "password": "secret123", "name": "W", "userRoleId": role["id"]},
    )
    assert response.status_code == 422


def test_users_filter_by_role(client, create, role, user):
    admin = create("/userRoles", {"roleName": "admin"})
    create(
        "/users",
        {"email": "admin@example.com", "password": "secret123", "name": "Admin", "userRoleId": admin["id"]},
    )

    students = client.get("/users", params={"userRoleId": role["id"]}).json()
    assert [u["email"] for u in students] == ["bat@example.com"]


def test_deleting_user_nulls_their_reviews(client, create, user, branch):
    review = create(
        "/reviews",
        {"userId": user["id"], "branchId": branch["id"], "rating": 3, "description": "Ok"},
    )

    assert client.delete(f"/users/{user['id']}").status_code == 200

    remaining = client.get(f"/reviews/{review['id']}").json()
    assert remaining["userId"] is None
