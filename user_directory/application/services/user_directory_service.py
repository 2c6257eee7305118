from __future__ import annotations

import logging
import re
from typing import Optional

from ...domain.errors import (
    InternalError,
    InvalidArgumentError,
    InvalidPageTokenError,
    StorageError,
    UserNotFoundError,
)
from ...domain.models import MAX_USER_ID, User, UserInput, UserPage, UserUpdate
from ...domain.ports.persistence import UserRepository
from ...services.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)

_PAGE_TOKEN_PATTERN = re.compile(r"[0-9]+")


class UserDirectoryService:
    """Create, read, update, delete, block and list users."""

    DEFAULT_PAGE_SIZE = 10
    MAX_PAGE_SIZE = 1000

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        *,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        if default_page_size <= 0 or max_page_size <= 0:
            raise ValueError("Page sizes must be positive.")
        self._users = user_repository
        self._hasher = password_hasher
        self._default_page_size = min(default_page_size, max_page_size)
        self._max_page_size = max_page_size

    # Queries --------------------------------------------------------------
    def list_users(self, page_size: Optional[int] = None, page_token: str = "") -> UserPage:
        """
        Return one page of users ordered by ascending id.

        Args:
            page_size: Maximum number of users; missing or non-positive means the default
            page_token: Id of the last user seen, empty to start from the beginning

        Returns:
            The page and the token for the next one. An empty token comes back only
            with an empty page, so callers page until they get no users.

        Raises:
            InvalidPageTokenError: If the token is not a positive integer
            InternalError: If the storage fails
        """
        size = self._resolve_page_size(page_size)
        after_id = self._parse_page_token(page_token)
        try:
            users = self._users.list_users(after_id, size)
        except StorageError as exc:
            logger.error("Error querying users (after_id=%s): %s", after_id, exc)
            raise InternalError("Failed to fetch users") from exc

        next_page_token = str(users[-1].id) if users else ""
        logger.debug("Retrieved %d users after id %s", len(users), after_id)
        return UserPage(users=users, next_page_token=next_page_token)

    def get_user(self, user_id: int) -> User:
        self._require_storable_id(user_id)
        try:
            user = self._users.get_user(user_id)
        except StorageError as exc:
            logger.error("Error querying user by ID %s: %s", user_id, exc)
            raise InternalError("Failed to fetch user") from exc
        if user is None:
            logger.info("User not found (UserID: %s)", user_id)
            raise UserNotFoundError(user_id)
        return user

    # Mutations ------------------------------------------------------------
    def create_user(self, user_input: UserInput) -> User:
        first_name, last_name = self._clean_names(user_input.first_name, user_input.last_name)
        password_hash = self._hasher.hash(user_input.password)
        try:
            user = self._users.create_user(
                first_name=first_name,
                last_name=last_name,
                phone_number=user_input.phone_number.strip(),
                password_hash=password_hash,
            )
        except StorageError as exc:
            logger.error("Error creating user: %s", exc)
            raise InternalError("Failed to create user") from exc
        logger.info("User %s created", user.id)
        return user

    def update_user(self, user_update: UserUpdate) -> User:
        self._require_storable_id(user_update.id)
        first_name, last_name = self._clean_names(user_update.first_name, user_update.last_name)
        password_hash = self._hasher.hash(user_update.password)
        try:
            user = self._users.update_user(
                user_update.id,
                first_name=first_name,
                last_name=last_name,
                phone_number=user_update.phone_number.strip(),
                password_hash=password_hash,
                blocked=user_update.blocked,
            )
        except StorageError as exc:
            logger.error("Error updating user %s: %s", user_update.id, exc)
            raise InternalError("Failed to update user") from exc
        if user is None:
            logger.info("User not found (UserID: %s)", user_update.id)
            raise UserNotFoundError(user_update.id)
        logger.info("User %s updated", user.id)
        return user

    def delete_user(self, user_id: int) -> None:
        self._require_storable_id(user_id)
        try:
            deleted = self._users.delete_user(user_id)
        except StorageError as exc:
            logger.error("Error deleting user %s: %s", user_id, exc)
            raise InternalError("Failed to delete user") from exc
        if not deleted:
            logger.info("User not found (UserID: %s)", user_id)
            raise UserNotFoundError(user_id)
        logger.info("User %s deleted", user_id)

    def block_user(self, user_id: int) -> None:
        self._set_blocked(user_id, True)
        logger.info("User %s blocked", user_id)

    def unblock_user(self, user_id: int) -> None:
        self._set_blocked(user_id, False)
        logger.info("User %s unblocked", user_id)

    # Helpers --------------------------------------------------------------
    def _set_blocked(self, user_id: int, blocked: bool) -> None:
        self._require_storable_id(user_id)
        try:
            updated = self._users.set_blocked(user_id, blocked)
        except StorageError as exc:
            logger.error("Failed to update user status (UserID: %s): %s", user_id, exc)
            raise InternalError("Failed to update user status") from exc
        if not updated:
            logger.info("User not found (UserID: %s)", user_id)
            raise UserNotFoundError(user_id)

    @staticmethod
    def _require_storable_id(user_id: int) -> None:
        # No row can carry an id outside the signed 64-bit range.
        if not -MAX_USER_ID - 1 <= user_id <= MAX_USER_ID:
            logger.info("User not found (UserID: %s)", user_id)
            raise UserNotFoundError(user_id)

    def _resolve_page_size(self, page_size: Optional[int]) -> int:
        if page_size is None or page_size <= 0:
            return self._default_page_size
        return min(page_size, self._max_page_size)

    @staticmethod
    def _parse_page_token(page_token: Optional[str]) -> Optional[int]:
        if not page_token:
            return None
        if not _PAGE_TOKEN_PATTERN.fullmatch(page_token):
            raise InvalidPageTokenError(page_token)
        after_id = int(page_token)
        if after_id <= 0 or after_id > MAX_USER_ID:
            raise InvalidPageTokenError(page_token)
        return after_id

    @staticmethod
    def _clean_names(first_name: str, last_name: str) -> tuple[str, str]:
        clean_first = first_name.strip()
        clean_last = last_name.strip()
        if not clean_first:
            raise InvalidArgumentError("First name must not be empty")
        if not clean_last:
            raise InvalidArgumentError("Last name must not be empty")
        return clean_first, clean_last
