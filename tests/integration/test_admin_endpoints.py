"""Test /api/admin login and session check."""


def test_login_returns_token_accepted_by_session_check(client, admin_password):
    response = client.post("/api/admin/login", json={"password": admin_password})

    assert response.status_code == 200
    token = response.json()["token"]
    session = client.get("/api/admin/session", headers={"Authorization": f"Bearer {token}"})
    assert session.status_code == 200
    assert session.json() == {"ok": True}


def test_login_with_wrong_password_is_401(client):
    response = client.post("/api/admin/login", json={"password": "wrong-password"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


def test_login_without_password_is_400(client):
    response = client.post("/api/admin/login", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "Password required"}


def test_login_with_malformed_json_is_400(client):
    response = client.post(
        "/api/admin/login", content=b"{password", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert "error" in response.json()


def test_session_check_rejects_missing_or_bad_token(client):
    assert client.get("/api/admin/session").status_code == 401
    assert client.get("/api/admin/session", headers={"Authorization": "Bearer nope"}).status_code == 401
    assert client.get("/api/admin/session", headers={"Authorization": "Token abc"}).status_code == 401


def test_expired_token_is_rejected(client, auth_headers, clock):
    clock.advance(hours=25)

    response = client.get("/api/admin/session", headers=auth_headers)

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_missing_or_non_bearer_header_keeps_error_shape(client):
    for headers in ({}, {"Authorization": "Token abc"}, {"Authorization": "Bearer"}):
        response = client.get("/api/admin/session", headers=headers)

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}


def test_bearer_scheme_is_case_insensitive(client, admin_password):
    token = client.post("/api/admin/login", json={"password": admin_password}).json()["token"]

    response = client.get("/api/admin/session", headers={"Authorization": f"bearer {token}"})

    assert response.status_code == 200
