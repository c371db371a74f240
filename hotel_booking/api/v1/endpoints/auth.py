"""Password reset endpoints."""

from fastapi import APIRouter, Depends

from hotel_booking.api import deps
from hotel_booking.schemas.common import MessageResponse
from hotel_booking.schemas.user import ForgotPasswordRequest, ResetPasswordRequest
from hotel_booking.services.user import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(payload: ForgotPasswordRequest, service: AuthService = Depends(deps.get_auth_service)):
    service.forgot_password(payload.email)
    return MessageResponse(message="Password reset email sent")


@router.post("/reset-password", response_model=MessageResponse)
def reset_password(payload: ResetPasswordRequest, service: AuthService = Depends(deps.get_auth_service)):
    # The body schema rejects a missing password before the token is checked
    service.reset_password(payload.token, payload.new_password)
    return MessageResponse(message="Password reset successfully")
