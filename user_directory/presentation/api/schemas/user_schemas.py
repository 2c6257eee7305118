"""Pydantic schemas for user API endpoints."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from ....domain.models import User


class UserInputRequest(BaseModel):
    """Request schema for user creation."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone_number: str = Field(..., min_length=1, max_length=32)
    password: str = Field(default="", max_length=72)


class UserUpdateRequest(UserInputRequest):
    """Request schema replacing every mutable field of a user."""

    blocked: bool = False


class UserResponse(BaseModel):
    """Response schema for user data. The password is never returned."""

    id: int
    first_name: str
    last_name: str
    phone_number: str
    blocked: bool
    registration_date: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            phone_number=user.phone_number,
            blocked=user.blocked,
            registration_date=user.registration_date,
        )


class UserListResponse(BaseModel):
    users: List[UserResponse]
    next_page_token: str = ""


class ErrorResponse(BaseModel):
    detail: str
    code: str
