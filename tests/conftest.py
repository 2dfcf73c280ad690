"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
import jwt  # PyJWT
from fastapi.testclient import TestClient

from api.app import create_app
from shared.config import Settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    extra_claims: Optional[dict] = None,
) -> str:
    """
    Create a test session token.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing secret
        extra_claims: Claims to add or override

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "id": user_id,
        "email": email,
        "iat": int((now - timedelta(hours=2)).timestamp()),
        "exp": int(exp.timestamp()),
    }
    payload.update(extra_claims or {})
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a per-test users file, with fast bcrypt."""
    return Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        users_file=tmp_path / "data" / "users.json",
        bcrypt_rounds=4,
    )


@pytest.fixture
def client(settings: Settings):
    """Test client for a fresh app; the lifespan creates the users file."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def test_user_email() -> str:
    return "a@x.com"


@pytest.fixture
def test_user_password() -> str:
    return "p1"


@pytest.fixture
def registered(client, test_user_email: str, test_user_password: str) -> dict:
    """Register the default test user and return the response body."""
    response = client.post(
        "/auth/register",
        json={"email": test_user_email, "password": test_user_password},
    )
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def auth_headers(registered: dict) -> dict[str, str]:
    """Authorization headers carrying the registered user's token."""
    return {"Authorization": f"Bearer {registered['token']}"}
