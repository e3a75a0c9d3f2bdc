import asyncio
import logging
import uuid
from typing import List, Optional, TYPE_CHECKING

from app.domains.documents.analyzer import CachedTextAnalyzer
from app.domains.documents.entities import Document, DocumentAnalysis, UserReport
from app.domains.documents.exceptions import DocumentAccessDeniedError, DocumentNotFoundError
from app.domains.identity.exceptions import UserNotFoundError

if TYPE_CHECKING:
    from app.db.repositories.document_repository import DocumentRepository
    from app.db.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DocumentService:
    """Сервис для работы с документами и их метриками.

    Каждая операция над конкретным документом сначала проходит проверку
    владельца (get_document), и только потом содержимое попадает в анализатор.
    """

    def __init__(
        self,
        document_repository: "DocumentRepository",
        user_repository: "UserRepository",
        analyzer: CachedTextAnalyzer
    ):
        self.document_repository = document_repository
        self.user_repository = user_repository
        self.analyzer = analyzer

    async def create_document(self, content: Optional[str], owner_id: uuid.UUID) -> Document:
        """Создание нового документа"""
        await self._ensure_user_exists(owner_id)

        document = Document.create_document(owner_id=owner_id, content=content)
        created = await self.document_repository.create(document)

        logger.info(f"Document {created.uuid} created by user {owner_id}")
        return created

    async def list_documents(self, owner_id: uuid.UUID) -> List[Document]:
        """Получение документов пользователя"""
        await self._ensure_user_exists(owner_id)
        return await self.document_repository.get_by_owner(owner_id)

    async def get_document(self, document_uuid: uuid.UUID, user_id: uuid.UUID) -> Document:
        """Получение документа с проверкой владельца"""
        document = await self.document_repository.get_by_uuid(document_uuid)

        if document is None:
            raise DocumentNotFoundError(document_uuid)

        if not document.is_owned_by(user_id):
            logger.warning(f"User {user_id} denied access to document {document_uuid}")
            raise DocumentAccessDeniedError(document_uuid)

        return document

    async def update_document(
        self,
        document_uuid: uuid.UUID,
        content: Optional[str],
        user_id: uuid.UUID
    ) -> Document:
        """Замена содержимого документа"""
        document = await self.get_document(document_uuid, user_id)
        document.replace_content(content)

        updated = await self.document_repository.update(document)
        if updated is None:
            # Удален между проверкой владельца и записью
            raise DocumentNotFoundError(document_uuid)

        logger.info(f"Document {document_uuid} updated by user {user_id}")
        return updated

    async def delete_document(self, document_uuid: uuid.UUID, user_id: uuid.UUID) -> None:
        """Удаление документа (только владельцем)"""
        affected = await self.document_repository.delete_by_owner(document_uuid, user_id)

        if affected == 0:
            raise DocumentNotFoundError(document_uuid)

        logger.info(f"Document {document_uuid} deleted by user {user_id}")

    async def word_count(self, document_uuid: uuid.UUID, user_id: uuid.UUID) -> int:
        document = await self.get_document(document_uuid, user_id)
        return await self.analyzer.count_words(document.content)

    async def character_count(
        self,
        document_uuid: uuid.UUID,
        user_id: uuid.UUID,
        exclude_punctuation: bool = False
    ) -> int:
        document = await self.get_document(document_uuid, user_id)
        return await self.analyzer.count_characters(document.content, exclude_punctuation)

    async def sentence_count(self, document_uuid: uuid.UUID, user_id: uuid.UUID) -> int:
        document = await self.get_document(document_uuid, user_id)
        return await self.analyzer.count_sentences(document.content)

    async def paragraph_count(self, document_uuid: uuid.UUID, user_id: uuid.UUID) -> int:
        document = await self.get_document(document_uuid, user_id)
        return await self.analyzer.count_paragraphs(document.content)

    async def longest_words(self, document_uuid: uuid.UUID, user_id: uuid.UUID) -> List[str]:
        document = await self.get_document(document_uuid, user_id)
        return await self.analyzer.longest_words(document.content)

    async def user_report(self, user_id: uuid.UUID) -> UserReport:
        """Отчет со всеми метриками по каждому документу пользователя"""
        await self._ensure_user_exists(user_id)

        documents = await self.document_repository.get_by_owner(user_id)
        entries = [await self._analyze(document) for document in documents]

        logger.info(f"Built report for user {user_id} with {len(entries)} documents")
        return UserReport(user_id=user_id, entries=entries)

    async def _analyze(self, document: Document) -> DocumentAnalysis:
        content = document.content
        # Метрики независимы, результаты собираются по позиции
        words, characters, sentences, paragraphs, longest = await asyncio.gather(
            self.analyzer.count_words(content),
            self.analyzer.count_characters(content),
            self.analyzer.count_sentences(content),
            self.analyzer.count_paragraphs(content),
            self.analyzer.longest_words(content),
        )
        return DocumentAnalysis(
            document_id=document.uuid,
            content=content,
            word_count=words,
            character_count=characters,
            sentence_count=sentences,
            paragraph_count=paragraphs,
            longest_words=longest
        )

    async def _ensure_user_exists(self, user_id: uuid.UUID) -> None:
        if not await self.user_repository.exists(user_id):
            raise UserNotFoundError(user_id)
