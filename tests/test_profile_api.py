from folio.database.models import Profile


def test_get_own_profile(client, register_user):
    headers = register_user()
    resp = client.get("/profile/get", headers=headers)

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["username"] == "jdoe"
    assert data["fullName"] == "jdoe"
    assert data["socialLinks"] == {}
    assert resp.json()["message"] == "Profile fetched successfully"


def test_get_profile_missing_returns_404(client, register_user, db_session):
    headers = register_user()
    db_session.query(Profile).delete()
    db_session.commit()

    resp = client.get("/profile/get", headers=headers)
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Profile not found"}


def test_update_applies_allowed_fields_only(client, register_user, db_session):
    headers = register_user()
    resp = client.post(
        "/profile/update",
        headers=headers,
        json={"theme": "purple", "notAllowedField": "x", "username": "hijack"},
    )

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["theme"] == "purple"
    assert "notAllowedField" not in data
    assert data["username"] == "jdoe"

    profile = db_session.query(Profile).one()
    assert profile.theme == "purple"
    assert profile.username == "jdoe"
    assert not hasattr(profile, "notAllowedField")


def test_update_sanitizes_social_links(client, register_user):
    headers = register_user()
    resp = client.post(
        "/profile/update",
        headers=headers,
        json={
            "fullName": "Jane Doe",
            "bio": "Builds things",
            "socialLinks": {
                "github": "  https://github.com/jdoe ",
                "twitter": "javascript:alert(1)",
                "tiktok": "https://tiktok.com/@jdoe",
            },
        },
    )

    data = resp.json()["data"]
    assert data["fullName"] == "Jane Doe"
    assert data["bio"] == "Builds things"
    assert data["socialLinks"] == {"github": "https://github.com/jdoe", "twitter": ""}


def test_update_rejects_unknown_theme_and_layout(client, register_user):
    headers = register_user()

    resp = client.post("/profile/update", headers=headers, json={"theme": "neon"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid theme"

    resp = client.post("/profile/update", headers=headers, json={"layout": "grid"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid layout"


def test_update_skips_null_and_rejects_non_string_text(client, register_user):
    headers = register_user()

    resp = client.post("/profile/update", headers=headers, json={"title": None, "location": "Berlin"})
    assert resp.status_code == 200
    assert resp.json()["data"]["title"] == ""
    assert resp.json()["data"]["location"] == "Berlin"

    resp = client.post("/profile/update", headers=headers, json={"bio": 12})
    assert resp.status_code == 400
    assert resp.json()["error"] == "bio must be a string"


def test_update_only_touches_callers_profile(client, register_user, db_session):
    alice = register_user("alice", "alice@d.com")
    register_user("bob", "bob@d.com")

    client.post("/profile/update", headers=alice, json={"title": "Engineer"})

    titles = {p.username: p.title for p in db_session.query(Profile).all()}
    assert titles == {"alice": "Engineer", "bob": ""}
