import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.http import auth_router, documents_router, health_router, users_router
from app.core.cache import create_cache
from app.core.config import settings
from app.core.db import engine
from app.core.logging import configure_logging
from app.db.models import Base
from app.domains.documents.exceptions import DocumentAccessDeniedError, DocumentNotFoundError
from app.domains.identity.exceptions import UserNotFoundError

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Схема создается из метаданных моделей, миграций нет
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    app.state.cache = create_cache(settings)
    logger.info("Text Analyzer started")
    try:
        yield
    finally:
        await app.state.cache.close()
        await engine.dispose()
        logger.info("Text Analyzer stopped")


app = FastAPI(
    title="Text Analyzer",
    description="Хранение текстов пользователей и вычисление их метрик",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DocumentNotFoundError)
async def document_not_found_handler(request: Request, exc: DocumentNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(DocumentAccessDeniedError)
async def document_access_denied_handler(request: Request, exc: DocumentAccessDeniedError):
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": str(exc)})


@app.exception_handler(UserNotFoundError)
async def user_not_found_handler(request: Request, exc: UserNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


# Подключаем роутеры
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(documents_router)


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": "Text Analyzer API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }
