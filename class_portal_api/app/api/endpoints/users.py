"""
User endpoints.

Accounts are created with a unique username and an opaque password.
Responses never include the password.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from class_portal_api.app.api.deps import get_user_service
from class_portal_api.app.schemas.user import UserCreate, UserRead
from class_portal_api.app.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(user_in: UserCreate, service: UserService = Depends(get_user_service)) -> UserRead:
    """Create a user.  A taken username answers HTTP 409."""
    return await service.create(user_in)


@router.get("/by-username/{username}", response_model=UserRead)
async def get_user_by_username(username: str, service: UserService = Depends(get_user_service)) -> UserRead:
    user = await service.get_by_username(username)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserRead:
    user = await service.get(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
