from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Implementations must enforce email uniqueness atomically at write time
    and raise DuplicateEmailError when an insert conflicts.
    """
    def create(self, firstname: str, lastname: str, email: str, password_hash: str) -> User:
        """Create a new user and return it.

        Raises:
            DuplicateEmailError: a user with this email already exists
            InternalError: the store failed
        """
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by exact email. Return User or None if not found."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def find_all(self) -> list[User]:
        """Return every user, unfiltered."""
        ...
