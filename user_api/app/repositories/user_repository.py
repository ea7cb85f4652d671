"""
Entity store for users.

``UserRepository`` is the contract the service layer depends on.  Two
backends implement it:

* ``SqliteUserRepository`` keeps users in the ``users`` table of a
  SQLite file, opening a short-lived connection per operation.
* ``InMemoryUserRepository`` keeps users in a dictionary guarded by a
  lock.  It is used for ephemeral deployments and in tests.

Absence is never signalled with an exception here: ``find_by_id``
returns ``None`` and ``exists_by_id`` returns ``False``.  Turning that
into a domain error is the job of ``UserService``.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..core.config import Settings
from ..core.db import get_cursor, init_db
from ..schemas.user import User

logger = logging.getLogger(__name__)


class UserRepository(ABC):
    """Key-indexed persistence for ``User`` records."""

    @abstractmethod
    def find_all(self) -> List[User]:
        """Return every stored user ordered by ascending id."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return the user with ``user_id`` or ``None``."""

    @abstractmethod
    def save(self, user: User) -> User:
        """Insert ``user`` if it is new, otherwise overwrite the stored record.

        A user without an ``id`` always gets a freshly assigned one.
        Returns the record as persisted.
        """

    @abstractmethod
    def exists_by_id(self, user_id: int) -> bool:
        """Return ``True`` if a user with ``user_id`` is stored."""

    @abstractmethod
    def delete_by_id(self, user_id: int) -> None:
        """Remove the user with ``user_id``.  Absent ids are ignored."""


class InMemoryUserRepository(UserRepository):
    """Process-local store.

    Identifiers increase monotonically and are never reused, even after
    deletes.  Records are copied on the way in and out so callers
    cannot change stored state behind the lock.
    """

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def find_all(self) -> List[User]:
        with self._lock:
            return [self._users[key].model_copy() for key in sorted(self._users)]

    def find_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user is not None else None

    def save(self, user: User) -> User:
        with self._lock:
            if user.id is None:
                user_id = self._next_id
            else:
                user_id = user.id
            self._next_id = max(self._next_id, user_id + 1)
            stored = user.model_copy(update={"id": user_id})
            self._users[user_id] = stored
            return stored.model_copy()

    def exists_by_id(self, user_id: int) -> bool:
        with self._lock:
            return user_id in self._users

    def delete_by_id(self, user_id: int) -> None:
        with self._lock:
            self._users.pop(user_id, None)


class SqliteUserRepository(UserRepository):
    """Store backed by the ``users`` table of a SQLite database.

    Each call runs in its own connection and transaction, so individual
    operations are atomic; concurrent writers to the same id resolve as
    last-write-wins.
    """

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.database_url = database_url

    @staticmethod
    def _row_to_user(row) -> User:
        return User(id=row["id"], name=row["name"], email=row["email"])

    def find_all(self) -> List[User]:
        with get_cursor(self.database_url) as cursor:
            rows = cursor.execute(
                "SELECT id, name, email FROM users ORDER BY id ASC"
            ).fetchall()
            return [self._row_to_user(row) for row in rows]

    def find_by_id(self, user_id: int) -> Optional[User]:
        with get_cursor(self.database_url) as cursor:
            row = cursor.execute(
                "SELECT id, name, email FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
            return self._row_to_user(row) if row else None

    def save(self, user: User) -> User:
        with get_cursor(self.database_url) as cursor:
            if user.id is None:
                cursor.execute(
                    "INSERT INTO users (name, email) VALUES (?, ?)",
                    (user.name, user.email),
                )
                user_id = cursor.lastrowid
            else:
                # Upsert keeps the caller's id whether or not it already exists
                cursor.execute(
                    """
                    INSERT INTO users (id, name, email) VALUES (?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET name = excluded.name, email = excluded.email
                    """,
                    (user.id, user.name, user.email),
                )
                user_id = user.id
        return User(id=user_id, name=user.name, email=user.email)

    def exists_by_id(self, user_id: int) -> bool:
        with get_cursor(self.database_url) as cursor:
            row = cursor.execute(
                "SELECT 1 FROM users WHERE id = ?", (user_id,)
            ).fetchone()
            return row is not None

    def delete_by_id(self, user_id: int) -> None:
        with get_cursor(self.database_url) as cursor:
            cursor.execute("DELETE FROM users WHERE id = ?", (user_id,))


def build_user_repository(config: Settings) -> UserRepository:
    """Create the store selected by ``config.storage_backend``.

    The SQLite backend has its migrations applied before it is
    returned.  Raises ``ValueError`` for an unknown backend name.
    """
    backend = config.storage_backend
    if backend == "memory":
        logger.info("Using in-memory user store")
        return InMemoryUserRepository()
    if backend == "sqlite":
        logger.info("Using SQLite user store at %s", config.database_url)
        init_db(config.database_url)
        return SqliteUserRepository(config.database_url)
    raise ValueError(f"Unknown storage backend: {backend!r}")
