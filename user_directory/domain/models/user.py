"""User domain model for the directory service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List

# Largest id the users table can hold (signed 64-bit integer).
MAX_USER_ID = 2**63 - 1


@dataclass(slots=True)
class User:
    """
    A person registered in the directory.

    Attributes:
        id: Storage-assigned identifier, strictly increasing in creation order
        first_name: Display first name
        last_name: Display last name
        phone_number: Contact phone number (not guaranteed unique)
        password_hash: bcrypt hash of the user's password, never serialized
        blocked: Whether the account is blocked
        registration_date: UTC timestamp assigned at creation
    """

    id: int
    first_name: str
    last_name: str
    phone_number: str
    password_hash: str
    blocked: bool
    registration_date: datetime

    def __repr__(self) -> str:
        return f"<User id={self.id} phone={self.phone_number} blocked={self.blocked}>"


@dataclass(slots=True)
class UserInput:
    first_name: str
    last_name: str
    phone_number: str
    password: str


@dataclass(slots=True)
class UserUpdate:
    """Full replacement of every mutable field of an existing user."""

    id: int
    first_name: str
    last_name: str
    phone_number: str
    password: str
    blocked: bool


@dataclass(slots=True)
class UserPage:
    users: List[User]
    next_page_token: str
