from hotel_booking.schemas.user.user import (
    ForgotPasswordRequest,
    LoginResponse,
    PasswordUpdate,
    ResetPasswordRequest,
    UserLogin,
    UserRegister,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserUpdate",
    "PasswordUpdate",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "UserResponse",
    "LoginResponse",
]
