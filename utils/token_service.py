"""
Access token issuing and verification.

Tokens are HS256 JWTs carrying the account id, valid for a fixed window
(12 hours by default) from issuance.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from jose import jwt, JWTError

from config.settings import ConfigurationError, TokenConfig

ACCOUNT_ID_CLAIM = "accountId"


class InvalidToken(Exception):
    """Token is malformed, has a bad signature, or has expired."""


class TokenService:
    """Signs and verifies identity tokens with a process-wide secret."""

    def __init__(self, config: TokenConfig, now: Optional[Callable[[], datetime]] = None):
        if not config.secret_key:
            raise ConfigurationError("Token signing secret is empty")
        self.config = config
        self._now = now or (lambda: datetime.now(timezone.utc))

    def issue(self, account_id: int) -> str:
        """Issue a token for the given account."""
        issued_at = self._now()
        claims = {
            ACCOUNT_ID_CLAIM: account_id,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.config.expires_in).timestamp()),
        }
        return jwt.encode(claims, self.config.secret_key, algorithm=self.config.algorithm)

    def verify(self, token: str) -> int:
        """
        Resolve a token to its account id.

        Raises:
            InvalidToken: For any failure; callers must not distinguish causes.
        """
        try:
            # Expiry is checked below against the injected clock
            claims = jwt.decode(
                token,
                self.config.secret_key,
                algorithms=[self.config.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise InvalidToken(str(e)) from e

        exp = claims.get("exp")
        if not isinstance(exp, (int, float)) or self._now().timestamp() >= exp:
            raise InvalidToken("Token has expired")

        account_id = claims.get(ACCOUNT_ID_CLAIM)
        if isinstance(account_id, bool) or not isinstance(account_id, int):
            raise InvalidToken("Token has no account id")
        return account_id
