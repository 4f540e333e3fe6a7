"""Shared test fixtures for HobbyHub backend tests."""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId

from common.auth import BcryptPasswordHasher, JWTTokenIssuer

JWT_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture
def sample_user_id():
    return str(ObjectId())


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. Async methods like find_one, insert_one,
    # update_one etc. stay as AsyncMock.
    collection.find = MagicMock()
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture(scope="session")
def password_hasher():
    # Minimum cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def jwt_secret():
    return JWT_SECRET


@pytest.fixture
def token_issuer(jwt_secret):
    return JWTTokenIssuer(
        secret=jwt_secret,
        issuer="hobbyhub",
        audience="hobbyhub-clients",
        expire_days=30,
    )


@pytest.fixture
def sample_user_doc(sample_user_id, password_hasher):
    now = datetime.now(timezone.utc)
    return {
        "_id": ObjectId(sample_user_id),
        "username": "alice",
        "usernameLower": "alice",
        "email": "alice@example.com",
        "emailLower": "alice@example.com",
        "passwordHash": password_hasher.hash("Password1!"),
        "firstName": "Alice",
        "lastName": "Smith",
        "phoneNumber": None,
        "dateOfBirth": datetime(1995, 6, 15, tzinfo=timezone.utc),
        "profileImageUrl": None,
        "coverImageUrl": None,
        "bio": None,
        "isActive": True,
        "isVerified": False,
        "hobbies": [],
        "joinDate": now,
        "lastLoginAt": now,
        "createdAt": now,
        "updatedAt": now,
    }
