"""
JWT token management.
"""
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from iconhub.config import Settings
from iconhub.core.errors import InvalidTokenError


class TokenService:
    """
    Issues and verifies signed, time-limited identity tokens.

    Tokens are not stored server-side: validity is the signature plus the
    expiry claim, so there is no revocation.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(days=1),
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            expires_delta=timedelta(minutes=settings.jwt_access_token_expire_minutes),
        )

    def issue(self, username: str) -> str:
        """
        Create a signed token for a username.

        Args:
            username: Identity to embed in the token

        Returns:
            Encoded JWT token string
        """
        issued_at = datetime.now(timezone.utc)
        payload = {
            "username": username,
            "iat": issued_at,
            "exp": issued_at + self.expires_delta,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """
        Decode and validate a token.

        Args:
            token: The JWT token string to decode

        Returns:
            Decoded payload dictionary with keys: username, iat, exp

        Raises:
            InvalidTokenError: If the signature is wrong, the token is malformed or expired
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        if "username" not in payload:
            raise InvalidTokenError("Token has no username claim")
        return payload
