from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import List
import uuid
from datetime import datetime

MAX_CONTENT_LENGTH = 1000000  # 1MB max content


class DocumentBase(BaseModel):
    """Базовая схема документа"""
    content: str = Field(default="", max_length=MAX_CONTENT_LENGTH)

    @field_validator('content', mode='before')
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v


class DocumentCreate(DocumentBase):
    """Схема для создания документа"""
    pass


class DocumentUpdate(DocumentBase):
    """Схема для обновления документа (содержимое заменяется целиком)"""
    pass


class DocumentResponse(DocumentBase):
    """Схема для ответа с данными документа"""
    uuid: uuid.UUID
    owner_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DocumentListResponse(BaseModel):
    """Схема для списка документов"""
    documents: List[DocumentResponse]
    total: int


class CountResponse(BaseModel):
    """Схема для числовой метрики"""
    count: int = Field(..., ge=0)


class LongestWordsResponse(BaseModel):
    """Схема для самых длинных слов"""
    longest_words: List[str]


class DocumentAnalysisResponse(BaseModel):
    """Схема метрик одного документа в отчете"""
    document_id: uuid.UUID
    content: str
    word_count: int
    character_count: int
    sentence_count: int
    paragraph_count: int
    longest_words: List[str]

    model_config = ConfigDict(from_attributes=True)


class UserReportResponse(BaseModel):
    """Схема отчета по документам пользователя"""
    user_id: uuid.UUID
    entries: List[DocumentAnalysisResponse]

    model_config = ConfigDict(from_attributes=True)
