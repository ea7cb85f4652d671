"""
Business logic for users.

``UserService`` wraps a ``UserRepository`` and adds the two rules the
store itself does not know about: a missing user is an error
(``UserNotFoundError``), and an update overwrites ``name`` and
``email`` while keeping the stored identifier.
"""

import logging
from typing import List

from ..core.exceptions import UserNotFoundError
from ..repositories.user_repository import UserRepository
from ..schemas.user import User, UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Сервис для работы с пользователями.

    Хранилище передаётся явно через конструктор, поэтому в тестах его
    можно заменить на mock или на ``InMemoryUserRepository``.
    """

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def get_all_users(self) -> List[User]:
        """Return every stored user."""
        return self.repository.find_all()

    async def get_user_by_id(self, user_id: int) -> User:
        """Retrieve a user by ID.

        Raises ``UserNotFoundError`` if the user does not exist.
        """
        user = self.repository.find_by_id(user_id)
        if user is None:
            logger.warning("User %s not found", user_id)
            raise UserNotFoundError(user_id)
        return user

    async def create_user(self, data: UserCreate) -> User:
        """Persist a new user and return it with its assigned id."""
        created = self.repository.save(User(name=data.name, email=data.email))
        logger.info("Created user %s", created.id)
        return created

    async def update_user(self, user_id: int, patch: UserUpdate) -> User:
        """Overwrite ``name`` and ``email`` of an existing user.

        Both fields are taken from ``patch`` as-is; the identifier is
        kept from the stored record.  Raises ``UserNotFoundError`` if
        the user does not exist.
        """
        existing = await self.get_user_by_id(user_id)
        merged = existing.model_copy(update={"name": patch.name, "email": patch.email})
        updated = self.repository.save(merged)
        logger.info("Updated user %s", user_id)
        return updated

    async def delete_user(self, user_id: int) -> None:
        """Удалить пользователя по ID.

        The existence check runs first because the store ignores
        deletes of absent ids.  Raises ``UserNotFoundError`` if the
        user does not exist.
        """
        if not self.repository.exists_by_id(user_id):
            logger.warning("User %s not found", user_id)
            raise UserNotFoundError(user_id)
        self.repository.delete_by_id(user_id)
        logger.info("Deleted user %s", user_id)
