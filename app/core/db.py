from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.config import settings


def build_engine(database_url: str, echo: bool = False):
    """Создание асинхронного движка"""
    if database_url.startswith("sqlite"):
        # Одно соединение на процесс, иначе in-memory база у каждого соединения своя
        return create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(database_url, echo=echo, pool_pre_ping=True)


# Асинхронный движок
engine = build_engine(settings.database_url, echo=settings.database_echo)

# Сессии
SessionLocal = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


# Функция для dependency injection в FastAPI
async def get_db():
    async with SessionLocal() as session:
        yield session
