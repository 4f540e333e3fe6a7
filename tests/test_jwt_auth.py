"""Unit tests for JWTTokenIssuer."""

import base64
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from common.auth import InvalidTokenError, JWTTokenIssuer, TokenClaims, TokenIssuer


@pytest.fixture
def claims():
    return TokenClaims(
        sub="6650f0c2a1b2c3d4e5f60718",
        username="alice",
        email="alice@example.com",
        firstName="Alice",
        lastName="Smith",
    )


# ─────────────────────────────────────────────────────────────────
# issue / verify
# ─────────────────────────────────────────────────────────────────


class TestIssueAndVerify:
    def test_round_trip(self, token_issuer, claims):
        issued = token_issuer.issue(claims)
        assert token_issuer.verify(issued.token) == claims

    def test_default_expiry_is_thirty_days(self, token_issuer, claims):
        before = datetime.now(timezone.utc)
        issued = token_issuer.issue(claims)
        assert before + timedelta(days=30) <= issued.expires_at
        assert issued.expires_at <= datetime.now(timezone.utc) + timedelta(days=30)

    def test_custom_expiry(self, token_issuer, claims):
        issued = token_issuer.issue(claims, expires_in=timedelta(minutes=5))
        assert issued.expires_at - datetime.now(timezone.utc) < timedelta(minutes=6)

    def test_payload_carries_registered_claims(self, token_issuer, claims):
        issued = token_issuer.issue(claims)
        payload = jwt.get_unverified_claims(issued.token)
        assert payload["iss"] == "hobbyhub"
        assert payload["aud"] == "hobbyhub-clients"
        assert payload["sub"] == claims.sub
        assert payload["username"] == "alice"

    def test_optional_names_may_be_missing(self, token_issuer):
        bare = TokenClaims(sub="u1", username="bob", email="bob@example.com")
        assert token_issuer.verify(token_issuer.issue(bare).token).firstName is None


class TestRejection:
    def test_expired_token(self, jwt_secret, claims):
        past = datetime.now(timezone.utc) - timedelta(days=31)
        stale_issuer = JWTTokenIssuer(
            secret=jwt_secret,
            issuer="hobbyhub",
            audience="hobbyhub-clients",
            expire_days=30,
            clock=lambda: past,
        )
        token = stale_issuer.issue(claims).token
        live_issuer = JWTTokenIssuer(
            secret=jwt_secret, issuer="hobbyhub", audience="hobbyhub-clients"
        )
        with pytest.raises(InvalidTokenError):
            live_issuer.verify(token)

    def test_expiry_follows_injected_clock(self, jwt_secret, claims):
        now = {"value": datetime(2030, 1, 1, tzinfo=timezone.utc)}
        issuer = JWTTokenIssuer(
            secret=jwt_secret,
            issuer="hobbyhub",
            audience="hobbyhub-clients",
            expire_days=1,
            clock=lambda: now["value"],
        )
        token = issuer.issue(claims).token

        now["value"] += timedelta(hours=23)
        assert issuer.verify(token) == claims

        now["value"] += timedelta(hours=2)
        with pytest.raises(InvalidTokenError):
            issuer.verify(token)

    def test_token_without_exp(self, jwt_secret, token_issuer, claims):
        token = jwt.encode(
            {**claims.model_dump(), "aud": "hobbyhub-clients", "iss": "hobbyhub"},
            jwt_secret,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            token_issuer.verify(token)

    def test_tampered_token(self, token_issuer, claims):
        header, _, signature = token_issuer.issue(claims).token.split(".")
        mallory = TokenClaims(sub="u2", username="mallory", email="m@example.com")
        _, forged_payload, _ = token_issuer.issue(mallory).token.split(".")
        with pytest.raises(InvalidTokenError):
            token_issuer.verify(f"{header}.{forged_payload}.{signature}")

    def test_wrong_secret(self, token_issuer, claims):
        token = token_issuer.issue(claims).token
        other = JWTTokenIssuer(
            secret="another-secret-key-that-is-long-enough",
            issuer="hobbyhub",
            audience="hobbyhub-clients",
        )
        with pytest.raises(InvalidTokenError):
            other.verify(token)

    def test_wrong_audience(self, jwt_secret, token_issuer, claims):
        token = token_issuer.issue(claims).token
        other = JWTTokenIssuer(
            secret=jwt_secret, issuer="hobbyhub", audience="someone-else"
        )
        with pytest.raises(InvalidTokenError):
            other.verify(token)

    def test_wrong_issuer(self, jwt_secret, token_issuer, claims):
        token = token_issuer.issue(claims).token
        other = JWTTokenIssuer(
            secret=jwt_secret, issuer="not-hobbyhub", audience="hobbyhub-clients"
        )
        with pytest.raises(InvalidTokenError):
            other.verify(token)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token(self, token_issuer, token):
        with pytest.raises(InvalidTokenError):
            token_issuer.verify(token)

    def test_token_without_identity_claims(self, jwt_secret, token_issuer):
        token = jwt.encode(
            {"aud": "hobbyhub-clients", "iss": "hobbyhub", "foo": "bar"},
            jwt_secret,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            token_issuer.verify(token)

    def test_all_rejections_share_one_message(self, token_issuer, claims):
        expired = token_issuer.issue(claims, expires_in=timedelta(seconds=-10)).token
        messages = set()
        for token in (expired, "garbage", expired[:-4] + "AAAA"):
            with pytest.raises(InvalidTokenError) as exc_info:
                token_issuer.verify(token)
            messages.add(str(exc_info.value))
        assert messages == {"Invalid or expired token"}


# ─────────────────────────────────────────────────────────────────
# Construction and refresh tokens
# ─────────────────────────────────────────────────────────────────


class TestIssuerConstruction:
    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            JWTTokenIssuer(secret="")

    def test_repr_hides_secret(self, jwt_secret, token_issuer):
        assert jwt_secret not in repr(token_issuer)


class TestRefreshToken:
    def test_is_base64_of_64_bytes(self):
        token = TokenIssuer.generate_refresh_token()
        assert len(base64.b64decode(token)) == 64

    def test_is_random(self, token_issuer):
        assert token_issuer.generate_refresh_token() != token_issuer.generate_refresh_token()
