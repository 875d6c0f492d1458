from folio.database.models import Profile, User

from .conftest import login, signup


def test_signup_creates_user_and_profile(client, db_session):
    resp = signup(client)

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "User registered successfully"
    assert body["data"]["user"]["username"] == "jdoe"
    assert body["data"]["user"]["email"] == "j@d.com"
    assert "token" not in body["data"]

    user = db_session.query(User).filter(User.username == "jdoe").one()
    assert user.hashed_password != "secret1"
    profile = db_session.query(Profile).filter(Profile.user_id == user.id).one()
    assert profile.full_name == "jdoe"
    assert profile.username == "jdoe"
    assert profile.theme == "blue"
    assert profile.layout == "modern"


def test_signup_duplicate_email_conflicts(client):
    assert signup(client).status_code == 200

    resp = signup(client, username="other")
    assert resp.status_code == 400
    assert resp.json() == {
        "success": False,
        "error": "User with this email or username already exists",
    }


def test_signup_duplicate_username_gives_same_error(client):
    signup(client)
    by_email = signup(client, username="other").json()
    by_username = signup(client, email="other@d.com").json()

    assert by_email == by_username


def test_signup_email_is_stored_lowercase(client):
    resp = signup(client, email="J@D.Com")
    assert resp.json()["data"]["user"]["email"] == "j@d.com"
    assert signup(client, username="other", email="j@d.com").status_code == 400


def test_signup_validation(client):
    cases = [
        ({"username": "jdoe", "email": "j@d.com"}, "All fields are required"),
        ({"username": "JD", "email": "j@d.com", "password": "secret1"}, "Username must be"),
        ({"username": "jdoe", "email": "not-an-email", "password": "secret1"}, "Invalid email format"),
        ({"username": "jdoe", "email": "j@d.com", "password": "short"}, "at least 6 characters"),
    ]
    for payload, message in cases:
        resp = client.post("/auth/signup", json=payload)
        assert resp.status_code == 400
        assert resp.json()["success"] is False
        assert message in resp.json()["error"]


def test_signup_rejects_malformed_body(client):
    resp = client.post("/auth/signup", json={"username": 5, "email": [], "password": {}})
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Invalid request body"}


def test_login_returns_token(client):
    signup(client)
    resp = login(client, email="J@D.COM")

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["user"]["username"] == "jdoe"
    assert data["token"]
    assert resp.json()["message"] == "Login successful"


def test_login_failures_are_indistinguishable(client):
    signup(client)
    wrong_password = login(client, password="wrong-password")
    unknown_email = login(client, email="nobody@d.com")

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {
        "success": False,
        "error": "Invalid credentials",
    }


def test_login_requires_both_fields(client):
    resp = client.post("/auth/login", json={"email": "j@d.com"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Email and password are required"


def test_protected_route_requires_bearer_token(client):
    assert client.get("/profile/get").json() == {"success": False, "error": "Unauthorized"}
    resp = client.get("/profile/get", headers={"Authorization": "Token abc"})
    assert resp.status_code == 401
    assert resp.json()["error"] == "Unauthorized"


def test_protected_route_rejects_invalid_token(client):
    resp = client.get("/sections/list", headers={"Authorization": "Bearer not.a.token"})
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "error": "Invalid token"}
