from task_api.models import User
from task_api.security import PasswordHasher

SIGNUP = {"fullName": "Grace Hopper", "email": "grace@example.com", "password": "cobol-1959"}


def test_signup_stores_hashed_password(client, fetch_all):
    response = client.post("/api/auth/signup", json=SIGNUP)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User registered successfully"

    users = [user for user in fetch_all(User) if user.email == SIGNUP["email"]]
    assert len(users) == 1
    assert users[0].id == body["id"]
    assert users[0].password_hash != SIGNUP["password"]
    assert PasswordHasher().verify(SIGNUP["password"], users[0].password_hash)
    assert users[0].role == "User"


def test_signup_ignores_role(client, fetch_all):
    response = client.post("/api/auth/signup", json={**SIGNUP, "role": "Admin"})

    assert response.status_code == 201
    assert fetch_all(User)[0].role == "User"


def test_duplicate_signup_conflicts(client, fetch_all):
    assert client.post("/api/auth/signup", json=SIGNUP).status_code == 201

    response = client.post("/api/auth/signup", json={**SIGNUP, "fullName": "Someone Else"})

    assert response.status_code == 409
    assert response.json() == {"message": "User already exists"}
    assert len(fetch_all(User)) == 1


def test_signup_requires_all_fields(client, fetch_all):
    response = client.post("/api/auth/signup", json={"email": "grace@example.com", "password": ""})

    assert response.status_code == 400
    assert response.json()["fields"] == ["fullName", "password"]
    assert fetch_all(User) == []


def test_signup_rejects_non_json_body(client):
    response = client.post(
        "/api/auth/signup",
        content="fullName=Grace",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["fields"] == ["body"]


def test_whitespace_password_is_accepted(client, fetch_all):
    response = client.post("/api/auth/signup", json={**SIGNUP, "password": "   "})

    assert response.status_code == 201
    assert PasswordHasher().verify("   ", fetch_all(User)[0].password_hash)
