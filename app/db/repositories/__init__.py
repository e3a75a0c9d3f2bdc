from app.db.repositories.user_repository import UserRepository
from app.db.repositories.document_repository import DocumentRepository

__all__ = [
    "UserRepository",
    "DocumentRepository",
]
