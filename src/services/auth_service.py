"""Auth service — registration and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging

import bcrypt
from email_validator import EmailNotValidError, validate_email

from domain.model.errors import InvalidCredentialsError, ValidationError, DuplicateEmailError
from domain.model.user import User
from port.token_issuer import TokenIssuer
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 12
# bcrypt only looks at the first 72 bytes and recent releases reject longer input
BCRYPT_MAX_BYTES = 72


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain: str, hashed: str | None) -> bool:
    """Constant-time comparison against a bcrypt hash. Malformed hashes never match.

    Candidates longer than bcrypt's input limit never match either, otherwise a
    stored 72-byte password would also accept itself plus any suffix.
    """
    if not hashed or len(plain.encode("utf-8")) > BCRYPT_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False


def _require_text(field: str, value) -> str:
    if value is None:
        raise ValidationError(f'"{field}" is required')
    if not isinstance(value, str):
        raise ValidationError(f'"{field}" must be a string')
    if not value.strip():
        raise ValidationError(f'"{field}" is not allowed to be empty')
    return value


def _validate_registration(firstname, lastname, email, password) -> str:
    """Check fields in order and fail on the first bad one. Returns the trimmed password."""
    _require_text("firstname", firstname)
    _require_text("lastname", lastname)
    _require_text("email", email)
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        raise ValidationError('"email" must be a valid email')
    password = _require_text("password", password).strip()
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValidationError(f'"password" length must be less than or equal to {BCRYPT_MAX_BYTES} bytes')
    return password


def register(
    repo: UserRepository,
    firstname: str,
    lastname: str,
    email: str,
    password: str,
    rounds: int = BCRYPT_ROUNDS,
) -> User:
    """Register a new user.

    Returns the created User domain object.

    Raises:
        ValidationError: a field is missing or malformed (first failing field)
        DuplicateEmailError: email already registered, either found by the
            lookup or rejected by the store's unique index on insert
        InternalError: the store failed
    """
    password = _validate_registration(firstname, lastname, email, password)

    if repo.get_by_email(email):
        raise DuplicateEmailError(email)

    password_hash = hash_password(password, rounds=rounds)
    user = repo.create(
        firstname=firstname,
        lastname=lastname,
        email=email,
        password_hash=password_hash,
    )
    logger.info("User registered", extra={"userId": user.id})
    return user


def login(repo: UserRepository, issuer: TokenIssuer, email: str, password: str) -> str:
    """Authenticate a user by email and password and issue an access token.

    Doesn't reveal whether the email exists.

    Raises:
        InvalidCredentialsError: unknown email or wrong password
    """
    user = repo.get_by_email(email)
    if not user or not verify_password(password.strip(), user.password_hash):
        raise InvalidCredentialsError()

    token = issuer.issue(user.claims())
    logger.info("User logged in", extra={"userId": user.id})
    return token


def list_users(repo: UserRepository) -> list[User]:
    return repo.find_all()
