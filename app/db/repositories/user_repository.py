import uuid
from typing import Optional

from sqlalchemy import exists, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.user import User as UserModel
from app.domains.identity.entities import User


class UserRepository:
    """Хранилище учетных записей"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user: User) -> User:
        row = UserModel(
            uuid=user.uuid,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            password_hash=user.password_hash,
            is_active=user.is_active
        )
        self.session.add(row)

        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ValueError("Username or email is already in use")

        await self.session.refresh(row)
        return self._to_domain(row)

    async def get_by_uuid(self, user_uuid: uuid.UUID) -> Optional[User]:
        row = await self.session.get(UserModel, user_uuid, populate_existing=True)
        return None if row is None else self._to_domain(row)

    async def get_by_username(self, username: str) -> Optional[User]:
        row = await self.session.scalar(select(UserModel).where(UserModel.username == username))
        return None if row is None else self._to_domain(row)

    async def exists(self, user_uuid: uuid.UUID) -> bool:
        return await self._any(UserModel.uuid == user_uuid)

    async def email_exists(self, email: str) -> bool:
        return await self._any(UserModel.email == email)

    async def username_exists(self, username: str) -> bool:
        return await self._any(UserModel.username == username)

    async def update_hashed_refresh_token(
        self,
        user_uuid: uuid.UUID,
        hashed_refresh_token: Optional[str]
    ) -> int:
        """Замена хеша refresh токена; None отзывает токен"""
        result = await self.session.execute(
            update(UserModel)
            .where(UserModel.uuid == user_uuid)
            .values(hashed_refresh_token=hashed_refresh_token)
        )
        await self.session.commit()
        return result.rowcount

    async def _any(self, condition) -> bool:
        return bool(await self.session.scalar(select(exists().where(condition))))

    @staticmethod
    def _to_domain(row: UserModel) -> User:
        return User(
            uuid=row.uuid,
            username=row.username,
            email=row.email,
            password_hash=row.password_hash,
            first_name=row.first_name,
            last_name=row.last_name,
            hashed_refresh_token=row.hashed_refresh_token,
            is_active=row.is_active,
            created_at=row.created_at,
            updated_at=row.updated_at
        )
