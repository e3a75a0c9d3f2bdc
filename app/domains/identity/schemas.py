import re
import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

USERNAME_PATTERN = re.compile(r"^[\w-]+$")
# Хотя бы одна цифра, строчная и заглавная буква
STRONG_PASSWORD_PATTERN = re.compile(r"^(?=.*\d)(?=.*[a-z])(?=.*[A-Z]).{6,20}$")


class UserBase(BaseModel):
    """Публичные поля учетной записи"""
    username: str = Field(..., min_length=4, max_length=20)
    email: EmailStr
    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        if not USERNAME_PATTERN.match(v):
            raise ValueError('Username may contain only letters, digits, underscores and hyphens')
        return v


class UserCreate(UserBase):
    """Регистрация"""
    password: str = Field(..., min_length=6, max_length=20)

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        if not STRONG_PASSWORD_PATTERN.match(v):
            raise ValueError(
                'Password too weak: it must contain an uppercase letter, a lowercase letter and a digit'
            )
        return v


class UserLogin(BaseModel):
    username: str
    password: str


class UserResponse(UserBase):
    """Профиль без секретов"""
    uuid: uuid.UUID
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class Token(BaseModel):
    """Пара JWT: короткий access и refresh для ротации"""
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class RefreshRequest(BaseModel):
    refresh_token: str
