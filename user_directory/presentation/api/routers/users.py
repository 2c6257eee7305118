"""API router for user directory operations."""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from ....application.services.user_directory_service import UserDirectoryService
from ....core.dependencies import get_user_directory_service
from ....domain.models import MAX_USER_ID, UserInput, UserUpdate
from ...api.schemas.user_schemas import (
    ErrorResponse,
    UserInputRequest,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)

router = APIRouter(
    prefix="/api/users",
    tags=["Users"],
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)


@router.get(
    "",
    response_model=UserListResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def list_users(
    page_size: Optional[int] = Query(default=None, description="Non-positive means the default"),
    page_token: str = Query(default="", description="Id of the last user of the previous page"),
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> UserListResponse:
    page = service.list_users(page_size=page_size, page_token=page_token)
    return UserListResponse(
        users=[UserResponse.from_user(user) for user in page.users],
        next_page_token=page.next_page_token,
    )


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int = Path(..., le=MAX_USER_ID),
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> UserResponse:
    return UserResponse.from_user(service.get_user(user_id))


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def create_user(
    payload: UserInputRequest,
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> UserResponse:
    user = service.create_user(
        UserInput(
            first_name=payload.first_name,
            last_name=payload.last_name,
            phone_number=payload.phone_number,
            password=payload.password,
        )
    )
    return UserResponse.from_user(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def update_user(
    payload: UserUpdateRequest,
    user_id: int = Path(..., le=MAX_USER_ID),
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> UserResponse:
    user = service.update_user(
        UserUpdate(
            id=user_id,
            first_name=payload.first_name,
            last_name=payload.last_name,
            phone_number=payload.phone_number,
            password=payload.password,
            blocked=payload.blocked,
        )
    )
    return UserResponse.from_user(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int = Path(..., le=MAX_USER_ID),
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> Response:
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{user_id}/block", status_code=status.HTTP_204_NO_CONTENT)
async def block_user(
    user_id: int = Path(..., le=MAX_USER_ID),
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> Response:
    service.block_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{user_id}/unblock", status_code=status.HTTP_204_NO_CONTENT)
async def unblock_user(
    user_id: int = Path(..., le=MAX_USER_ID),
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> Response:
    service.unblock_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
