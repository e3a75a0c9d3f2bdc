import uuid
from datetime import datetime, timezone
from typing import Optional

from app.core.security import get_password_hash, verify_password, verify_refresh_token_hash


class User:
    """Сущность пользователя домена Identity"""

    def __init__(
        self,
        uuid: uuid.UUID,
        username: str,
        email: str,
        password_hash: str,
        first_name: str = "",
        last_name: str = "",
        hashed_refresh_token: Optional[str] = None,
        is_active: bool = True,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.username = username
        self.email = email
        self.password_hash = password_hash
        self.first_name = first_name
        self.last_name = last_name
        self.hashed_refresh_token = hashed_refresh_token
        self.is_active = is_active
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or datetime.now(timezone.utc)

    def authenticate(self, password: str) -> bool:
        """Проверка пароля пользователя"""
        return verify_password(password, self.password_hash)

    def refresh_token_matches(self, refresh_token: str) -> bool:
        """Проверка refresh токена по сохраненному хешу"""
        if not self.hashed_refresh_token:
            return False
        return verify_refresh_token_hash(refresh_token, self.hashed_refresh_token)

    @classmethod
    def create_user(
        cls,
        username: str,
        email: str,
        password: str,
        first_name: str = "",
        last_name: str = ""
    ) -> "User":
        """Создание нового пользователя с хешированием пароля"""
        return cls(
            uuid=uuid.uuid4(),
            username=username,
            email=email,
            password_hash=get_password_hash(password),
            first_name=first_name,
            last_name=last_name
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.uuid == other.uuid

    def __hash__(self) -> int:
        return hash(self.uuid)

    def __repr__(self) -> str:
        return f"User(uuid={self.uuid}, username={self.username}, email={self.email})"
