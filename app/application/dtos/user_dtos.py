"""User DTOs for API layer"""

from pydantic import BaseModel, EmailStr
from typing import Optional


class CreateUserDto(BaseModel):
    """DTO for user registration"""
    email: EmailStr
    username: str
    password: str


class LoginUserDto(BaseModel):
    """DTO for user login"""
    email: str
    password: str


class ForgotPasswordDto(BaseModel):
    """DTO for password recovery request. Any string is accepted so the
    response never depends on the address."""
    email: Optional[str] = None


class ResetPasswordDto(BaseModel):
    """DTO for reset password request"""
    token: str
    new_pw: str


class ChangePasswordDto(BaseModel):
    current_pw: str
    new_pw: str


class UserDto(BaseModel):
    """DTO for user response"""
    id: int
    username: str
    email: str
    is_admin: bool = False


class CurrentUserResponse(BaseModel):
    user: Optional[UserDto] = None


class OkResponse(BaseModel):
    ok: bool = True


class BanUserDto(BaseModel):
    banned: bool = True
