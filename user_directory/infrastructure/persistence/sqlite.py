import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, List, Optional

from ...domain.errors import StorageError
from ...domain.models import User
from ...domain.ports.persistence import PersistenceGateway

_USER_COLUMNS = "id, first_name, last_name, phone_number, password_hash, blocked, registration_date"


class SQLitePersistence(PersistenceGateway):
    """SQLite-backed implementation of the persistence gateway."""

    def __init__(self, path: Path, timeout: float = 5.0) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(path, timeout=timeout, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.Lock()
        self._initialize()

    def _initialize(self) -> None:
        with self._conn:
            self._conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS users (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    first_name TEXT NOT NULL,
                    last_name TEXT NOT NULL,
                    phone_number TEXT NOT NULL,
                    password_hash TEXT NOT NULL,
                    blocked INTEGER NOT NULL DEFAULT 0,
                    registration_date TEXT NOT NULL
                );

                CREATE INDEX IF NOT EXISTS idx_users_phone_number
                    ON users(phone_number);
                """
            )

    def close(self) -> None:
        self._conn.close()

    # UserRepository API ----------------------------------------------------
    def list_users(self, after_id: Optional[int], limit: int) -> List[User]:
        query = f"SELECT {_USER_COLUMNS} FROM users"
        params: List[int] = []
        if after_id is not None:
            query += " WHERE id > ?"
            params.append(after_id)
        query += " ORDER BY id ASC LIMIT ?"
        params.append(limit)
        with self._storage_errors("list_users"):
            with self._lock:
                cur = self._conn.execute(query, params)
                rows = cur.fetchall()
            return [self._row_to_user(row) for row in rows]

    def get_user(self, user_id: int) -> Optional[User]:
        with self._storage_errors("get_user"):
            with self._lock:
                cur = self._conn.execute(
                    f"SELECT {_USER_COLUMNS} FROM users WHERE id = ?", (user_id,)
                )
                row = cur.fetchone()
            return self._row_to_user(row) if row else None

    def create_user(
        self,
        first_name: str,
        last_name: str,
        phone_number: str,
        password_hash: str,
    ) -> User:
        with self._storage_errors("create_user"), self._lock, self._conn:
            cur = self._conn.execute(
                f"""
                INSERT INTO users (
                    first_name, last_name, phone_number, password_hash, blocked, registration_date
                )
                VALUES (?, ?, ?, ?, 0, ?)
                RETURNING {_USER_COLUMNS}
                """,
                (first_name, last_name, phone_number, password_hash, self._now()),
            )
            rows = cur.fetchall()
            return self._row_to_user(rows[0])

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
        with self._storage_errors("update_user"), self._lock, self._conn:
            cur = self._conn.execute(
                f"""
                UPDATE users
                SET first_name = ?, last_name = ?, phone_number = ?,
                    password_hash = ?, blocked = ?
                WHERE id = ?
                RETURNING {_USER_COLUMNS}
                """,
                (first_name, last_name, phone_number, password_hash, int(blocked), user_id),
            )
            rows = cur.fetchall()
            return self._row_to_user(rows[0]) if rows else None

    def delete_user(self, user_id: int) -> bool:
        with self._storage_errors("delete_user"), self._lock, self._conn:
            cur = self._conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
            return cur.rowcount > 0

    def set_blocked(self, user_id: int, blocked: bool) -> bool:
        with self._storage_errors("set_blocked"), self._lock, self._conn:
            cur = self._conn.execute(
                "UPDATE users SET blocked = ? WHERE id = ?", (int(blocked), user_id)
            )
            return cur.rowcount > 0

    # Helpers ----------------------------------------------------------------
    @staticmethod
    @contextmanager
    def _storage_errors(operation: str) -> Iterator[None]:
        try:
            yield
        except (sqlite3.Error, OverflowError, ValueError) as exc:
            raise StorageError(operation, exc) from exc

    @staticmethod
    def _now() -> str:
        return datetime.now(timezone.utc).isoformat()

    @staticmethod
    def _parse_datetime(value: str) -> datetime:
        result = datetime.fromisoformat(value)
        if result.tzinfo is None:
            return result.replace(tzinfo=timezone.utc)
        return result.astimezone(timezone.utc)

    def _row_to_user(self, row: sqlite3.Row) -> User:
        return User(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            phone_number=row["phone_number"],
            password_hash=row["password_hash"],
            blocked=bool(row["blocked"]),
            registration_date=self._parse_datetime(row["registration_date"]),
        )
