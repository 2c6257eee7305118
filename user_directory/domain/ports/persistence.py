from __future__ import annotations

from typing import List, Optional, Protocol

from ..models import User


class UserRepository(Protocol):
    """Persistence functions for the users table.

    Implementations raise ``StorageError`` when the database fails. Lookups and
    mutations of a missing row are not failures: they return ``None``/``False``.
    """

    def list_users(self, after_id: Optional[int], limit: int) -> List[User]:
        ...

    def get_user(self, user_id: int) -> Optional[User]:
        ...

    def create_user(
        self,
        first_name: str,
        last_name: str,
        phone_number: str,
        password_hash: str,
    ) -> User:
        ...

    def update_user(
        self,
        user_id: int,
        *,
        first_name: str,
        last_name: str,
        phone_number: str,
        password_hash: str,
        blocked: bool,
    ) -> Optional[User]:
        ...

    def delete_user(self, user_id: int) -> bool:
        ...

    def set_blocked(self, user_id: int, blocked: bool) -> bool:
        ...


class PersistenceGateway(UserRepository, Protocol):
    """Composite gateway combining every persistence concern used by the app."""

    def close(self) -> None:
        ...
