"""JWT implementation of TokenIssuer backed by python-jose."""

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
JWT_EXPIRATION_DAYS = 5


class JoseTokenIssuer:
    def __init__(
        self,
        secret_key: str,
        algorithm: str = JWT_ALGORITHM,
        expires_days: int = JWT_EXPIRATION_DAYS,
    ):
        if not secret_key:
            raise ValueError("JWT secret key must not be empty")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_days = expires_days

    def issue(self, claims: dict) -> str:
        """Create a signed access token carrying the given claims."""
        now = datetime.now(timezone.utc)
        payload = {
            **claims,
            "sub": claims["id"],
            "iat": now,
            "exp": now + timedelta(days=self.expires_days),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> dict | None:
        """Verify signature and expiry. Return the claims or None."""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug(f"JWT verification failed: {e}")
            return None
