import logging
import uuid
from typing import Optional, Tuple, TYPE_CHECKING

from app.core.security import (
    create_access_token, create_refresh_token, hash_refresh_token,
    verify_refresh_token, verify_token
)
from app.domains.identity.entities import User
from app.domains.identity.schemas import UserCreate, UserLogin

if TYPE_CHECKING:
    from app.db.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис для работы с идентификацией и аутентификацией пользователей"""

    def __init__(self, user_repository: "UserRepository"):
        self.user_repository = user_repository

    async def register_user(self, user_data: UserCreate) -> User:
        """Регистрация нового пользователя"""
        # Проверка существования email и username
        if await self.user_repository.email_exists(user_data.email):
            raise ValueError("Email already registered")

        if await self.user_repository.username_exists(user_data.username):
            raise ValueError("Username already taken")

        user = User.create_user(
            username=user_data.username,
            email=user_data.email,
            password=user_data.password,
            first_name=user_data.first_name,
            last_name=user_data.last_name
        )

        created = await self.user_repository.create(user)
        logger.info(f"Registered user {created.uuid}")
        return created

    async def authenticate_user(self, login_data: UserLogin) -> Optional[User]:
        """Аутентификация пользователя по username и паролю"""
        user = await self.user_repository.get_by_username(login_data.username)

        if not user or not user.is_active:
            return None

        if not user.authenticate(login_data.password):
            return None

        return user

    async def login_user(self, login_data: UserLogin) -> Optional[Tuple[str, str]]:
        """Вход пользователя: выдача пары access/refresh токенов"""
        user = await self.authenticate_user(login_data)

        if not user:
            logger.info(f"Failed login attempt for {login_data.username}")
            return None

        return await self._issue_tokens(user)

    async def refresh_tokens(self, refresh_token: str) -> Optional[Tuple[str, str]]:
        """Ротация refresh токена: старый становится недействительным"""
        payload = verify_refresh_token(refresh_token)
        if payload is None:
            return None

        user = await self._get_user_from_payload(payload)
        if user is None or not user.refresh_token_matches(refresh_token):
            return None

        return await self._issue_tokens(user)

    async def sign_out(self, user_uuid: uuid.UUID) -> None:
        """Выход: отзыв refresh токена"""
        await self.user_repository.update_hashed_refresh_token(user_uuid, None)
        logger.info(f"User {user_uuid} signed out")

    async def get_current_user_from_token(self, token: str) -> Optional[User]:
        """Получение текущего пользователя из JWT токена"""
        payload = verify_token(token)
        if payload is None:
            return None

        return await self._get_user_from_payload(payload)

    async def _issue_tokens(self, user: User) -> Tuple[str, str]:
        token_data = {"sub": str(user.uuid), "username": user.username}

        access_token = create_access_token(data=token_data)
        # jti делает каждый refresh токен уникальным даже в пределах секунды
        refresh_token = create_refresh_token(data={**token_data, "jti": uuid.uuid4().hex})

        await self.user_repository.update_hashed_refresh_token(
            user.uuid,
            hash_refresh_token(refresh_token)
        )
        return access_token, refresh_token

    async def _get_user_from_payload(self, payload: dict) -> Optional[User]:
        try:
            user_uuid = uuid.UUID(payload.get("sub"))
        except (TypeError, ValueError):
            return None

        user = await self.user_repository.get_by_uuid(user_uuid)

        if user is None or not user.is_active:
            return None

        return user
