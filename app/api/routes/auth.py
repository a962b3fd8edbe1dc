"""Authentication routes"""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from ...api.dependencies import (
    get_unit_of_work,
    get_email_service,
    get_current_user,
    get_optional_user,
    get_session_token,
    set_session_cookie,
    clear_session_cookie,
)
from ...application.services.session_service import SessionService
from ...application.use_cases.register_user import RegisterUserUseCase
from ...application.use_cases.login_user import LoginUserUseCase
from ...application.use_cases.change_password import ChangePasswordUseCase
from ...application.use_cases.forgot_password_use_case import ForgotPasswordUseCase
from ...application.use_cases.reset_password_use_case import ResetPasswordUseCase
from ...application.dtos.user_dtos import (
    CreateUserDto,
    LoginUserDto,
    ForgotPasswordDto,
    ResetPasswordDto,
    ChangePasswordDto,
    UserDto,
    CurrentUserResponse,
    OkResponse,
)
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.email_service import EmailService

router = APIRouter()


@router.post("/register", response_model=OkResponse)
async def register_user(
    user_data: CreateUserDto,
    response: Response,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Register a new user and log them in"""
    issued = await RegisterUserUseCase(unit_of_work).execute(user_data)
    set_session_cookie(response, issued.token, issued.expires_at)
    return OkResponse()


@router.post("/login", response_model=OkResponse)
async def login_user(
    login_data: LoginUserDto,
    response: Response,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Login user"""
    issued = await LoginUserUseCase(unit_of_work).execute(login_data)
    set_session_cookie(response, issued.token, issued.expires_at)
    return OkResponse()


@router.post("/logout", response_model=OkResponse)
async def logout_user(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    await SessionService(unit_of_work).end(token)
    clear_session_cookie(response)
    return OkResponse()


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(user: Optional[User] = Depends(get_optional_user)):
    """Current user, or null for anonymous callers"""
    if not user:
        return CurrentUserResponse(user=None)
    return CurrentUserResponse(user=UserDto(
        id=user.id.value,
        username=user.username.value,
        email=user.email.value,
        is_admin=user.is_admin,
    ))


@router.post("/recover", response_model=OkResponse)
async def recover_password(
    request: ForgotPasswordDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    email_service: EmailService = Depends(get_email_service),
):
    """Always succeeds so the response does not reveal which emails exist"""
    await ForgotPasswordUseCase(unit_of_work, email_service).execute(request)
    return OkResponse()


@router.post("/reset", response_model=OkResponse)
async def reset_password(
    request: ResetPasswordDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Reset password with token"""
    await ResetPasswordUseCase(unit_of_work).execute(request)
    return OkResponse()


@router.post("/change-pw", response_model=OkResponse)
async def change_password(
    request: ChangePasswordDto,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    await ChangePasswordUseCase(unit_of_work).execute(current_user, request)
    return OkResponse()
