from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_identity_service
from app.core.auth import get_current_user
from app.domains.identity.entities import User
from app.domains.identity.schemas import (
    UserCreate, UserLogin, UserResponse, Token, RefreshRequest
)
from app.domains.identity.services import IdentityService

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Регистрация нового пользователя"""
    try:
        user = await identity_service.register_user(user_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return UserResponse.model_validate(user)


@router.post("/login", response_model=Token)
async def login(
    login_data: UserLogin,
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Вход пользователя"""
    tokens = await identity_service.login_user(login_data)

    if not tokens:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token, refresh_token = tokens
    return Token(access_token=access_token, refresh_token=refresh_token)


@router.post("/refresh", response_model=Token)
async def refresh_token(
    refresh_data: RefreshRequest,
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Обновление пары токенов"""
    tokens = await identity_service.refresh_tokens(refresh_data.refresh_token)

    if not tokens:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid refresh token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token, new_refresh_token = tokens
    return Token(access_token=access_token, refresh_token=new_refresh_token)


@router.post("/signout", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    current_user: User = Depends(get_current_user),
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Выход пользователя"""
    await identity_service.sign_out(current_user.uuid)
