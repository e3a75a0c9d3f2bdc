import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, List


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Document:
    """Сущность документа домена Documents"""

    def __init__(
        self,
        uuid: uuid.UUID,
        content: str = "",
        owner_id: uuid.UUID = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.content = content if content is not None else ""
        self.owner_id = owner_id
        self.created_at = created_at or _utcnow()
        self.updated_at = updated_at or _utcnow()

    def replace_content(self, new_content: Optional[str]) -> None:
        """Полная замена содержимого документа"""
        self.content = new_content if new_content is not None else ""
        self.updated_at = _utcnow()

    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        """Проверка является ли пользователь владельцем"""
        return self.owner_id == user_id

    @classmethod
    def create_document(cls, owner_id: uuid.UUID, content: Optional[str] = "") -> "Document":
        """Создание нового документа"""
        return cls(
            uuid=uuid.uuid4(),
            content=content,
            owner_id=owner_id
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.uuid == other.uuid

    def __hash__(self) -> int:
        return hash(self.uuid)

    def __repr__(self) -> str:
        return f"Document(uuid={self.uuid}, owner_id={self.owner_id}, length={len(self.content)})"


@dataclass
class DocumentAnalysis:
    """Все метрики одного документа"""
    document_id: uuid.UUID
    content: str
    word_count: int
    character_count: int
    sentence_count: int
    paragraph_count: int
    longest_words: List[str]


@dataclass
class UserReport:
    """Сводный отчет по всем документам пользователя"""
    user_id: uuid.UUID
    entries: List[DocumentAnalysis] = field(default_factory=list)
