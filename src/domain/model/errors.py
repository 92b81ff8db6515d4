"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class DuplicateEmailError(DuplicateError):
    """A user with the same email is already registered."""

    def __init__(self, email: str | None = None):
        self.email = email
        super().__init__("Email already exists!")


class InvalidCredentialsError(DomainError):
    """Email/password pair does not match a registered user.

    The message is identical for unknown emails and wrong passwords.
    """

    def __init__(self):
        super().__init__("Invalid email or password")


class InternalError(DomainError):
    """Unexpected failure in the store, hasher or token signer."""
