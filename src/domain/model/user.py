from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Domain model representing a registered user."""
    id: str
    firstname: str
    lastname: str
    email: str
    created_at: datetime
    password_hash: str | None = None
    role: str | None = None

    def claims(self) -> dict:
        """Identity claims embedded in an access token. Never includes credentials."""
        return {
            'id': self.id,
            'firstname': self.firstname,
            'lastname': self.lastname,
            'email': self.email,
            'role': self.role,
        }
