import hashlib
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import settings

# Контекст для хеширования паролей
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt учитывает только первые 72 байта
BCRYPT_MAX_LENGTH = 72


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Проверка пароля"""
    return pwd_context.verify(plain_password[:BCRYPT_MAX_LENGTH], hashed_password)


def get_password_hash(password: str) -> str:
    """Хеширование пароля"""
    return pwd_context.hash(password[:BCRYPT_MAX_LENGTH])


def _token_digest(token: str) -> str:
    # JWT длиннее 72 байт, поэтому хешируем его дайджест
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def hash_refresh_token(token: str) -> str:
    """Хеш refresh токена для хранения в БД"""
    return pwd_context.hash(_token_digest(token))


def verify_refresh_token_hash(token: str, hashed_token: str) -> bool:
    """Сравнение refresh токена с сохраненным хешем"""
    return pwd_context.verify(_token_digest(token), hashed_token)


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Создание JWT токена доступа"""
    to_encode = data.copy()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expire_minutes)

    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta, "type": "access"})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> Optional[Dict[str, Any]]:
    """Проверка JWT токена доступа и извлечение данных"""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None

    if payload.get("type") != "access":
        return None

    return payload


def create_refresh_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Создание refresh токена"""
    to_encode = data.copy()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.refresh_jwt_expire_minutes)

    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta, "type": "refresh"})
    return jwt.encode(to_encode, settings.refresh_jwt_secret, algorithm=settings.jwt_algorithm)


def verify_refresh_token(token: str) -> Optional[Dict[str, Any]]:
    """Проверка refresh токена"""
    try:
        payload = jwt.decode(token, settings.refresh_jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None

    if payload.get("type") != "refresh":
        return None

    return payload
