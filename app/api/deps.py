from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.cache import CacheBackend
from app.core.config import settings
from app.core.db import get_db
from app.db.repositories.document_repository import DocumentRepository
from app.db.repositories.user_repository import UserRepository
from app.domains.documents.analyzer import CachedTextAnalyzer
from app.domains.documents.services import DocumentService
from app.domains.identity.services import IdentityService


def get_cache(request: Request) -> CacheBackend:
    """Кэш, созданный в lifespan приложения"""
    return request.app.state.cache


def get_identity_service(db: AsyncSession = Depends(get_db)) -> IdentityService:
    return IdentityService(UserRepository(db))


def get_document_service(
    db: AsyncSession = Depends(get_db),
    cache: CacheBackend = Depends(get_cache)
) -> DocumentService:
    """Сборка сервиса документов из репозиториев и кэша"""
    analyzer = CachedTextAnalyzer(cache, timeout=settings.cache_timeout_seconds)
    return DocumentService(DocumentRepository(db), UserRepository(db), analyzer)
