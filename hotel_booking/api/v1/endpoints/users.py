"""User account endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile, status

from hotel_booking.api import deps
from hotel_booking.models.user import User
from hotel_booking.schemas.common import MessageResponse
from hotel_booking.schemas.user import (
    LoginResponse,
    PasswordUpdate,
    UserLogin,
    UserRegister,
    UserResponse,
    UserUpdate,
)
from hotel_booking.services.user import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, service: UserService = Depends(deps.get_user_service)):
    return service.register(payload)


@router.post("/login", response_model=LoginResponse)
def login(payload: UserLogin, service: UserService = Depends(deps.get_user_service)):
    return service.login(payload.email, payload.password)


@router.get("", response_model=List[UserResponse])
def list_users(
    name: Optional[str] = Query(default=None),
    service: UserService = Depends(deps.get_user_service),
):
    return service.search(name)


@router.get("/me", response_model=UserResponse)
def read_me(current_user: User = Depends(deps.get_current_user)):
    return current_user


@router.put("/password", response_model=MessageResponse)
def update_password(payload: PasswordUpdate, service: UserService = Depends(deps.get_user_service)):
    service.update_password(payload)
    return MessageResponse(message="Password updated successfully")


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, service: UserService = Depends(deps.get_user_service)):
    return service.get(user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, payload: UserUpdate, service: UserService = Depends(deps.get_user_service)):
    return service.update(user_id, payload)


@router.put("/{user_id}/avatar", response_model=UserResponse)
def update_avatar(
    user_id: int,
    file: UploadFile = File(...),
    service: UserService = Depends(deps.get_user_service),
):
    filename, content = deps.read_uploads([file])[0]
    return service.update_avatar(user_id, filename, content)


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, service: UserService = Depends(deps.get_user_service)):
    service.delete(user_id)
    return MessageResponse(message="User deleted successfully")
