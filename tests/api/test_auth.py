import pytest

PASSWORD = "secret123"


@pytest.mark.asyncio
async def test_signup_defaults_to_member_and_lowercases_email(api_client):
    response = await api_client.post(
        "/api/auth/signup",
        json={"name": "Ada Lovelace", "email": "Ada@Example.COM", "password": PASSWORD},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "User created successfully"
    assert body["user"]["role"] == "member"
    assert body["user"]["email"] == "ada@example.com"
    assert "passwordHash" not in body["user"]


@pytest.mark.asyncio
async def test_signup_rejects_duplicate_email(api_client, member):
    response = await api_client.post(
        "/api/auth/signup",
        json={"name": "Copy", "email": member["email"].upper(), "password": PASSWORD},
    )
    assert response.status_code == 409
    assert response.json() == {"success": False, "message": "User with this email already exists"}


@pytest.mark.asyncio
async def test_signup_validation_messages(api_client):
    missing = await api_client.post("/api/auth/signup", json={"email": "x@example.com"})
    assert missing.status_code == 400
    assert missing.json()["message"] == "Name, email, and password are required"

    short = await api_client.post(
        "/api/auth/signup",
        json={"name": "Short", "email": "short@example.com", "password": "123"},
    )
    assert short.status_code == 400
    assert short.json()["message"] == "Password must be at least 6 characters long"


@pytest.mark.asyncio
async def test_login_returns_user_identity(api_client, lead):
    response = await api_client.post(
        "/api/auth/login",
        json={"email": lead["email"].upper(), "password": PASSWORD},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful"
    assert body["user"] == {
        "id": lead["id"],
        "name": lead["name"],
        "email": lead["email"],
        "role": "lead",
    }


@pytest.mark.asyncio
async def test_login_with_bad_credentials(api_client, member):
    wrong = await api_client.post(
        "/api/auth/login", json={"email": member["email"], "password": "not-it"}
    )
    assert wrong.status_code == 401
    assert wrong.json()["message"] == "Invalid credentials"

    unknown = await api_client.post(
        "/api/auth/login", json={"email": "nobody@example.com", "password": PASSWORD}
    )
    assert unknown.status_code == 401

    empty = await api_client.post("/api/auth/login", json={"email": member["email"]})
    assert empty.status_code == 400
    assert empty.json()["message"] == "Email and password are required"


@pytest.mark.asyncio
async def test_logout(api_client):
    response = await api_client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Logged out successfully"}


@pytest.mark.asyncio
async def test_identity_header_resolution(api_client, member):
    no_header = await api_client.get("/api/test-auth")
    assert no_header.status_code == 401
    assert no_header.json() == {"success": False, "message": "Authentication required"}

    unknown = await api_client.get("/api/test-auth", headers={"user-id": "does-not-exist"})
    assert unknown.status_code == 401
    assert unknown.json()["message"] == "User not found"

    by_id = await api_client.get("/api/test-auth", headers=member["headers"])
    assert by_id.status_code == 200
    assert by_id.json()["user"]["id"] == member["id"]

    by_email = await api_client.get("/api/test-auth", headers={"user-id": member["email"]})
    assert by_email.status_code == 200
    assert by_email.json()["user"]["id"] == member["id"]


@pytest.mark.asyncio
async def test_role_gate_reports_required_roles(api_client, member):
    response = await api_client.post(
        "/api/tasks",
        json={"title": "Nope", "assignedTo": member["id"], "deadline": "2030-01-01T00:00:00Z"},
        headers=member["headers"],
    )
    assert response.status_code == 403
    assert response.json()["message"] == "Insufficient permissions. Required: lead or board, Current: member"
