"""Domain models for the user directory."""

from .user import MAX_USER_ID, User, UserInput, UserPage, UserUpdate

__all__ = [
    "MAX_USER_ID",
    "User",
    "UserInput",
    "UserPage",
    "UserUpdate",
]
