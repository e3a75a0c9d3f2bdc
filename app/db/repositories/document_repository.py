import uuid
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import and_, delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.document import Document as DocumentModel

if TYPE_CHECKING:
    from app.domains.documents.entities import Document


class DocumentRepository:
    """Хранилище текстов пользователей.

    Каждый метод завершает свою транзакцию сам, сервисы не управляют commit.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, document: "Document") -> "Document":
        """Сохранение нового текста"""
        row = DocumentModel(
            uuid=document.uuid,
            owner_id=document.owner_id,
            content=document.content,
            created_at=document.created_at,
            updated_at=document.updated_at
        )
        self.session.add(row)

        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ValueError(f"Owner {document.owner_id} does not exist")

        await self.session.refresh(row)
        return self._to_domain(row)

    async def get_by_uuid(self, document_uuid: uuid.UUID) -> Optional["Document"]:
        row = await self.session.get(DocumentModel, document_uuid, populate_existing=True)
        return None if row is None else self._to_domain(row)

    async def get_by_owner(self, owner_id: uuid.UUID) -> List["Document"]:
        """Тексты владельца, старые первыми"""
        query = (
            select(DocumentModel)
            .where(DocumentModel.owner_id == owner_id)
            .order_by(DocumentModel.created_at, DocumentModel.uuid)
        )
        rows = (await self.session.scalars(query)).all()
        return [self._to_domain(row) for row in rows]

    async def update(self, document: "Document") -> Optional["Document"]:
        """Запись нового содержимого; None, если текст уже удален"""
        await self.session.execute(
            update(DocumentModel)
            .where(DocumentModel.uuid == document.uuid)
            .values(content=document.content, updated_at=document.updated_at)
        )
        await self.session.commit()
        return await self.get_by_uuid(document.uuid)

    async def delete_by_owner(self, document_uuid: uuid.UUID, owner_id: uuid.UUID) -> int:
        """Удаление только своего текста; возвращает число удаленных строк"""
        result = await self.session.execute(
            delete(DocumentModel).where(
                and_(DocumentModel.uuid == document_uuid, DocumentModel.owner_id == owner_id)
            )
        )
        await self.session.commit()
        return result.rowcount

    @staticmethod
    def _to_domain(row: DocumentModel) -> "Document":
        from app.domains.documents.entities import Document

        return Document(
            uuid=row.uuid,
            owner_id=row.owner_id,
            content=row.content,
            created_at=row.created_at,
            updated_at=row.updated_at
        )
