"""Shared pytest fixtures and configurations for the StyleHub application.

This module provides test fixtures and configurations used across all test files,
including:
- Per-test SQLite database and settings
- Test client setup (the lifespan creates and migrates the schema)
- Account fixtures created through the signup endpoint
- Authentication header helpers
"""

import os
import uuid
from typing import Callable, Dict, Generator

import pytest

os.environ.setdefault("SECRET_KEY", "stylehub-test-secret")

from fastapi.testclient import TestClient

from app.core.config import FeatureFlags, Settings
from app.core.security import create_principal_token
from app.main import create_application
from app.models.domain.common import Role


def auth_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


# Settings fixtures
@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        SECRET_KEY=os.environ["SECRET_KEY"],
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'stylehub.db'}",
        FEATURES=FeatureFlags(ENABLE_REQUEST_LOGGING=False),
    )


# FastAPI test client
@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Get test client."""
    app = create_application(settings)
    with TestClient(app) as test_client:
        yield test_client


# Account fixtures
@pytest.fixture
def make_account(client: TestClient) -> Callable[..., Dict]:
    """Sign up an account and return its id, token and auth headers."""
    def _make(role: str = "user", name: str = None, email: str = None) -> Dict:
        suffix = uuid.uuid4().hex[:8]
        response = client.post("/api/v1/auth/signup", json={
            "email": email or f"{role}-{suffix}@example.com",
            "password": "correct-horse-1",
            "name": name or f"{role.title()} {suffix}",
            "role": role,
        })
        assert response.status_code == 201, response.text
        body = response.json()
        return {
            "id": body["user"]["id"],
            "email": body["user"]["email"],
            "token": body["accessToken"],
            "headers": auth_headers(body["accessToken"]),
        }
    return _make


@pytest.fixture
def styler(make_account) -> Dict:
    return make_account("styler")


@pytest.fixture
def other_styler(make_account) -> Dict:
    return make_account("styler")


@pytest.fixture
def partner(make_account) -> Dict:
    return make_account("partner")


@pytest.fixture
def other_partner(make_account) -> Dict:
    return make_account("partner")


@pytest.fixture
def member(make_account) -> Dict:
    """Plain user account."""
    return make_account("user")


@pytest.fixture
def admin() -> Dict:
    """Admin principal; admins are provisioned outside the API."""
    admin_id = str(uuid.uuid4())
    token = create_principal_token(admin_id, Role.ADMIN)
    return {"id": admin_id, "token": token, "headers": auth_headers(token)}
