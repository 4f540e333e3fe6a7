"""Unit tests for application settings."""

import logging

import pytest
from pydantic import ValidationError

from app.config import Settings

LONG_SECRET = "s" * 40


def _settings(**overrides):
    values = {"JWT_SECRET": LONG_SECRET, "_env_file": None}
    values.update(overrides)
    return Settings(**values)


class TestDefaults:
    def test_session_defaults(self):
        settings = _settings()
        assert settings.JWT_EXPIRE_DAYS == 30
        assert settings.JWT_ALGORITHM == "HS256"
        assert settings.JWT_ISSUER == "hobbyhub"
        assert settings.BCRYPT_ROUNDS == 12

    def test_nearby_defaults(self):
        settings = _settings()
        assert settings.DEFAULT_NEARBY_RADIUS_KM == 10.0
        assert settings.MAX_NEARBY_RADIUS_KM == 500.0

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_EXPIRE_DAYS", "7")
        assert _settings().JWT_EXPIRE_DAYS == 7

    def test_frozen(self):
        settings = _settings()
        with pytest.raises(ValidationError):
            settings.JWT_SECRET = "changed"

    def test_cors_origins(self):
        assert _settings(CORS_ORIGINS="https://a.example, https://b.example").get_cors_origins() == [
            "https://a.example",
            "https://b.example",
        ]


class TestValidateRequired:
    def test_valid(self):
        _settings().validate_required()

    def test_missing_secret(self):
        with pytest.raises(ValueError, match="JWT_SECRET is required"):
            _settings(JWT_SECRET=None).validate_required()

    def test_short_secret_in_production(self):
        with pytest.raises(ValueError, match="at least 32 characters"):
            _settings(JWT_SECRET="short", ENVIRONMENT="production").validate_required()

    def test_short_secret_allowed_in_development(self):
        _settings(JWT_SECRET="short").validate_required()

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_bcrypt_rounds_range(self, rounds):
        with pytest.raises(ValueError, match="BCRYPT_ROUNDS"):
            _settings(BCRYPT_ROUNDS=rounds).validate_required()

    def test_expiry_must_be_positive(self):
        with pytest.raises(ValueError, match="JWT_EXPIRE_DAYS"):
            _settings(JWT_EXPIRE_DAYS=0).validate_required()

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            _settings(LOG_LEVEL="LOUD").validate_required()


class TestSecretHandling:
    def test_secret_hidden_from_repr(self):
        settings = _settings()
        assert LONG_SECRET not in repr(settings)
        assert settings.JWT_SECRET.get_secret_value() == LONG_SECRET

    def test_log_level_constant(self):
        assert _settings(LOG_LEVEL="debug").get_log_level() == logging.DEBUG
