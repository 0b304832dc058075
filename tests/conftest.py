"""Shared fixtures: a TestClient wired to fresh in-memory repositories per test."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["ENV"] = "production"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["ALLOW_ADMIN_SIGNUP"] = "false"

import asyncio

import pytest
from fastapi.testclient import TestClient

from bizcards.api.deps import get_card_repo, get_user_repo
from bizcards.core.security import hash_password
from bizcards.main import app
from bizcards.repositories.memory import InMemoryCardRepository, InMemoryUserRepository, MemoryStore

DEFAULT_PASSWORD = "Abcdef1!"


def user_payload(email="a@b.com", password=DEFAULT_PASSWORD, **overrides) -> dict:
    payload = {
        "name": {"first": "Dana", "middle": "", "last": "Levi"},
        "phone": "0521234567",
        "email": email,
        "password": password,
        "image": {"url": "https://example.com/dana.png", "alt": "Dana"},
        "address": {
            "state": "Merkaz",
            "country": "Israel",
            "city": "Tel Aviv",
            "street": "Dizengoff",
            "houseNumber": 12,
            "zip": 6433222,
        },
        "isBusiness": False,
    }
    payload.update(overrides)
    return payload


def card_payload(biz_number=5000001, **overrides) -> dict:
    payload = {
        "title": "Falafel King",
        "subtitle": "Best falafel in town",
        "description": "Fresh every morning",
        "phone": "0541112222",
        "email": "king@falafel.com",
        "web": "https://falafelking.com",
        "image": {"url": "https://example.com/falafel.png", "alt": "Falafel"},
        "address": {
            "state": "",
            "country": "Israel",
            "city": "Haifa",
            "street": "Herzl",
            "houseNumber": 3,
            "zip": 3303,
        },
        "bizNumber": biz_number,
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def store():
    return MemoryStore()


@pytest.fixture()
def client(store):
    app.dependency_overrides[get_user_repo] = lambda: InMemoryUserRepository(store)
    app.dependency_overrides[get_card_repo] = lambda: InMemoryCardRepository(store)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def register(client):
    """Register a user and return ``(user_id, headers)``."""
    def _register(email="a@b.com", **overrides):
        r = client.post("/api/users/register", json=user_payload(email=email, **overrides))
        assert r.status_code == 201, r.text
        headers = auth_headers(r.json()["access_token"])
        me = client.get("/api/users", headers=headers)
        assert me.status_code == 200, me.text
        return me.json()["id"], headers
    return _register


@pytest.fixture()
def admin(client, store):
    """An admin account created directly in the store, logged in through the API."""
    user_in = user_payload(email="admin@admin.com")
    user_in.pop("password")
    user_in["address"]["house_number"] = user_in["address"].pop("houseNumber")
    user_in.update(hashed_password=hash_password("Admin123!"), is_admin=True, is_business=True)
    user = asyncio.run(InMemoryUserRepository(store).create(user_in))

    r = client.post("/api/users/login", json={"email": "admin@admin.com", "password": "Admin123!"})
    assert r.status_code == 200, r.text
    return user["id"], auth_headers(r.json()["access_token"])
