from datetime import datetime, timedelta, timezone

from jose import jwt

from dealership.config import settings

ADMIN_EMAIL = "admin@autosamsa.com.mx"
ADMIN_PASSWORD = "admin123"

API = "/api/v1/auth"


def test_login_returns_token_and_sets_cookie(client, admin_user):
    response = client.post(f"{API}/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["tokenType"] == "Bearer"
    assert data["user"]["email"] == ADMIN_EMAIL
    assert settings.AUTH_COOKIE_NAME in response.cookies
    assert "httponly" in response.headers["set-cookie"].lower()


def test_cookie_session_reaches_admin_routes(client, admin_user):
    client.post(f"{API}/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

    me = client.get(f"{API}/me")
    assert me.status_code == 200
    assert me.json()["data"]["role"] == "admin"
    assert client.get("/api/v1/admin/vehicles").status_code == 200


def test_login_with_wrong_password(client, admin_user):
    response = client.post(f"{API}/login", json={"email": ADMIN_EMAIL, "password": "nope"})
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


def test_login_for_inactive_account(client, db, admin_user):
    admin_user.isActive = False
    db.commit()
    response = client.post(f"{API}/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "ACCOUNT_INACTIVE"


def test_logout_clears_cookie(client):
    response = client.post(f"{API}/logout")
    assert response.status_code == 200
    assert settings.AUTH_COOKIE_NAME in response.headers["set-cookie"]


def test_expired_token(client, admin_user):
    token = jwt.encode(
        {"sub": str(admin_user.id), "role": "admin", "type": "access",
         "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        settings.SECRET_KEY, algorithm=settings.ALGORITHM,
    )
    response = client.get(f"{API}/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "TOKEN_EXPIRED"
