"""
Tests for app wiring: startup, CORS and error rendering.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer
from api.middleware.errors import status_for
from modules.auth.exceptions import InvalidTokenError
from modules.review.exceptions import MissingCodeError
from modules.users.exceptions import (
    UserAlreadyExistsError,
    UserNotFoundError,
    UserStoreCorruptedError,
)
from shared.exceptions import CodeReviewError


class TestStartup:
    def test_creates_users_file(self, settings):
        assert not settings.users_file.exists()
        with TestClient(create_app(settings)):
            assert settings.users_file.read_text() == "[]"

    def test_keeps_existing_users_file(self, settings):
        settings.users_file.parent.mkdir(parents=True)
        settings.users_file.write_text("[]\n")
        with TestClient(create_app(settings)):
            assert settings.users_file.read_text() == "[]\n"


class TestCors:
    def test_allowed_origin_with_credentials(self, client):
        response = client.get("/health", headers={"Origin": "http://localhost:5174"})
        assert response.headers["access-control-allow-origin"] == "http://localhost:5174"
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_other_origin_not_allowed(self, client):
        response = client.get("/health", headers={"Origin": "http://evil.example"})
        assert "access-control-allow-origin" not in response.headers

    def test_preflight(self, client):
        response = client.options(
            "/auth/login",
            headers={
                "Origin": "http://localhost:5174",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert response.status_code == 200


class TestErrorRendering:
    @pytest.mark.parametrize(
        "error,status_code",
        [
            (MissingCodeError(), 400),
            (InvalidTokenError(), 401),
            (UserNotFoundError("u1"), 404),
            (UserAlreadyExistsError("a@x.com"), 409),
            (UserStoreCorruptedError("users.json", "bad"), 500),
            (CodeReviewError("boom"), 500),
        ],
    )
    def test_status_for(self, error, status_code):
        assert status_for(error) == status_code

    def test_unknown_route(self, client):
        response = client.get("/nope")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_corrupt_storage_is_a_server_error(self, client, settings):
        settings.users_file.write_text("{broken")
        response = client.post("/auth/register", json={"email": "a@x.com", "password": "p1"})
        assert response.status_code == 500
        assert response.json()["code"] == "USER_STORE_CORRUPTED"


class TestServiceContainer:
    def test_services_are_built_once(self, settings):
        container = ServiceContainer(settings)
        assert container.users is container.users
        assert container.auth is container.auth
        assert container.users.path == settings.users_file

    def test_each_app_gets_its_own_container(self, settings, tmp_path):
        other = settings.model_copy(update={"users_file": tmp_path / "other.json"})
        first = create_app(settings).state.container
        second = create_app(other).state.container
        assert first is not second
        assert first.users.path != second.users.path
