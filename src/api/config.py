"""Application settings read from the environment.

Call ``load_dotenv()`` before the first ``get_settings()`` so values from
``.env`` are visible. A missing ``JWT_SECRET_KEY`` only matters for token
signing; the app checks it once at startup via ``Settings.validate()``.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from adapter.security.jose_token_issuer import JWT_ALGORITHM, JWT_EXPIRATION_DAYS
from services.auth_service import BCRYPT_ROUNDS


@dataclass(frozen=True)
class Settings:
    jwt_secret_key: Optional[str] = None
    jwt_algorithm: str = JWT_ALGORITHM
    jwt_expiration_days: int = JWT_EXPIRATION_DAYS
    bcrypt_rounds: int = BCRYPT_ROUNDS

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            jwt_secret_key=os.getenv("JWT_SECRET_KEY") or None,
            jwt_algorithm=os.getenv("JWT_ALGORITHM", JWT_ALGORITHM),
            jwt_expiration_days=int(os.getenv("JWT_EXPIRATION_DAYS", JWT_EXPIRATION_DAYS)),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", BCRYPT_ROUNDS)),
        )

    def validate(self) -> None:
        """Raise ValueError if the service cannot sign tokens with these settings."""
        if not self.jwt_secret_key:
            raise ValueError(
                "JWT_SECRET_KEY environment variable is required. "
                "Generate a secure key with: openssl rand -hex 32"
            )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
