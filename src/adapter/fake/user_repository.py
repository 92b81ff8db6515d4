"""In-memory implementation of UserRepository for testing."""

import threading
import uuid
from datetime import datetime, timezone
from domain.model.errors import DuplicateEmailError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}
        # Stands in for the unique email index: check-and-insert is atomic
        self._lock = threading.Lock()

    # ── write operations ─────────────────────────────────────

    def create(self, firstname: str, lastname: str, email: str, password_hash: str) -> User:
        with self._lock:
            if any(u.email == email for u in self.store.values()):
                raise DuplicateEmailError(email)

            user = User(
                id=uuid.uuid4().hex,
                firstname=firstname,
                lastname=lastname,
                email=email,
                created_at=datetime.now(timezone.utc),
                password_hash=password_hash,
            )
            self.store[user.id] = user
            return user

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str) -> User | None:
        for user in list(self.store.values()):
            if user.email == email:
                return user
        return None

    def get_by_id(self, user_id: str) -> User | None:
        return self.store.get(user_id)

    def find_all(self) -> list[User]:
        return sorted(self.store.values(), key=lambda u: u.created_at)
