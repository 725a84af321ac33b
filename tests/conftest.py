"""Shared fixtures: a seeded catalog database and bearer-token helpers."""

import os
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from jose import jwt

# Settings are loaded at import time and the secret has no default
os.environ.setdefault("MOVIEFLIX_JWT_SECRET_KEY", "movieflix-test-secret")

import setup_db  # noqa: E402
from movieflix.config import settings  # noqa: E402
from movieflix.main import app  # noqa: E402
from movieflix.services.catalog import CatalogService  # noqa: E402
from movieflix.services.database import DatabaseService  # noqa: E402

VISITOR_USERNAME = "bob@gmail.com"
MEMBER_USERNAME = "ana@gmail.com"


@pytest.fixture(scope="session")
def db_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("catalog") / "movies.db"
    setup_db.build_database(path)
    return path


@pytest.fixture()
def db(db_path):
    return DatabaseService(db_path)


@pytest.fixture()
def catalog(db):
    return CatalogService(db)


@pytest.fixture()
def client(db_path, monkeypatch):
    monkeypatch.setattr(settings, "db_path", db_path)
    with TestClient(app) as c:
        yield c


def obtain_access_token(
    username: str,
    authorities: list[str],
    expires_in: timedelta = timedelta(minutes=5),
    secret: str | None = None,
) -> str:
    claims = {
        "sub": username,
        "authorities": authorities,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(
        claims, secret or settings.jwt_secret_key.get_secret_value(), algorithm=settings.jwt_algorithm
    )


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def visitor_headers():
    return bearer(obtain_access_token(VISITOR_USERNAME, ["ROLE_VISITOR"]))


@pytest.fixture()
def member_headers():
    return bearer(obtain_access_token(MEMBER_USERNAME, ["ROLE_MEMBER"]))
