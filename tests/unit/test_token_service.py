"""
Unit tests for TokenService and TokenConfig.

Run: pytest tests/unit/test_token_service.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from config.settings import ConfigurationError, Settings, TokenConfig
from utils.token_service import InvalidToken, TokenService


class FakeClock:
    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def service(clock):
    return TokenService(TokenConfig(secret_key="unit-secret"), now=clock)


class TestIssueAndVerify:

    def test_round_trip_resolves_account_id(self, service):
        token = service.issue(42)
        assert service.verify(token) == 42

    def test_token_carries_account_id_claim(self, service):
        claims = jwt.get_unverified_claims(service.issue(7))
        assert claims["accountId"] == 7
        assert claims["exp"] - claims["iat"] == 12 * 60 * 60

    def test_valid_just_before_expiry(self, service, clock):
        token = service.issue(1)
        clock.advance(timedelta(hours=12) - timedelta(seconds=1))
        assert service.verify(token) == 1

    def test_expired_after_validity_window(self, service, clock):
        token = service.issue(1)
        clock.advance(timedelta(hours=12))
        with pytest.raises(InvalidToken):
            service.verify(token)

    def test_wrong_signature_rejected(self, service, clock):
        other = TokenService(TokenConfig(secret_key="other-secret"), now=clock)
        with pytest.raises(InvalidToken):
            service.verify(other.issue(1))

    def test_malformed_token_rejected(self, service):
        with pytest.raises(InvalidToken):
            service.verify("not.a.token")

    def test_missing_account_claim_rejected(self, service, clock):
        exp = int((clock() + timedelta(hours=1)).timestamp())
        token = jwt.encode({"exp": exp}, "unit-secret", algorithm="HS256")
        with pytest.raises(InvalidToken):
            service.verify(token)


class TestConfiguration:

    def test_empty_secret_rejected_at_construction(self):
        with pytest.raises(ConfigurationError):
            TokenService(TokenConfig(secret_key=""))

    def test_from_settings_requires_secret(self):
        with pytest.raises(ConfigurationError):
            TokenConfig.from_settings(Settings(ACCESS_TOKEN_SECRET_KEY=None))

    def test_from_settings_uses_configured_window(self):
        config = TokenConfig.from_settings(
            Settings(ACCESS_TOKEN_SECRET_KEY="s", ACCESS_TOKEN_EXPIRES_HOURS=3)
        )
        assert config.secret_key == "s"
        assert config.expires_in == timedelta(hours=3)
