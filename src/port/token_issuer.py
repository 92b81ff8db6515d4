from typing import Protocol


class TokenIssuer(Protocol):
    """Protocol for signing and verifying bearer tokens."""

    def issue(self, claims: dict) -> str:
        """Sign a time-limited token carrying the given identity claims."""
        ...

    def decode(self, token: str) -> dict | None:
        """Verify a token and return its claims, or None if invalid or expired."""
        ...
