from fastapi import APIRouter, Depends, Query, Response, status
import uuid

from app.api.deps import get_document_service
from app.core.auth import get_current_user
from app.domains.documents.schemas import (
    DocumentCreate, DocumentUpdate, DocumentResponse, DocumentListResponse,
    CountResponse, LongestWordsResponse
)
from app.domains.documents.services import DocumentService
from app.domains.identity.entities import User

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("/", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    document_data: DocumentCreate,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Создание нового документа"""
    document = await document_service.create_document(document_data.content, current_user.uuid)
    return DocumentResponse.model_validate(document)


@router.get("/", response_model=DocumentListResponse)
async def list_documents(
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Получение списка документов текущего пользователя"""
    documents = await document_service.list_documents(current_user.uuid)

    return DocumentListResponse(
        documents=[DocumentResponse.model_validate(doc) for doc in documents],
        total=len(documents)
    )


@router.get("/{document_uuid}", response_model=DocumentResponse)
async def get_document(
    document_uuid: uuid.UUID,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Получение документа по UUID"""
    document = await document_service.get_document(document_uuid, current_user.uuid)
    return DocumentResponse.model_validate(document)


@router.put("/{document_uuid}", response_model=DocumentResponse)
async def update_document(
    document_uuid: uuid.UUID,
    update_data: DocumentUpdate,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Обновление документа"""
    document = await document_service.update_document(
        document_uuid,
        update_data.content,
        current_user.uuid
    )
    return DocumentResponse.model_validate(document)


@router.delete("/{document_uuid}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_uuid: uuid.UUID,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Удаление документа"""
    await document_service.delete_document(document_uuid, current_user.uuid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Метрики документа
@router.get("/{document_uuid}/word-count", response_model=CountResponse)
async def get_word_count(
    document_uuid: uuid.UUID,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    count = await document_service.word_count(document_uuid, current_user.uuid)
    return CountResponse(count=count)


@router.get("/{document_uuid}/character-count", response_model=CountResponse)
async def get_character_count(
    document_uuid: uuid.UUID,
    exclude_punctuation: bool = Query(False),
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    count = await document_service.character_count(
        document_uuid,
        current_user.uuid,
        exclude_punctuation=exclude_punctuation
    )
    return CountResponse(count=count)


@router.get("/{document_uuid}/sentence-count", response_model=CountResponse)
async def get_sentence_count(
    document_uuid: uuid.UUID,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    count = await document_service.sentence_count(document_uuid, current_user.uuid)
    return CountResponse(count=count)


@router.get("/{document_uuid}/paragraph-count", response_model=CountResponse)
async def get_paragraph_count(
    document_uuid: uuid.UUID,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    count = await document_service.paragraph_count(document_uuid, current_user.uuid)
    return CountResponse(count=count)


@router.get("/{document_uuid}/longest-words", response_model=LongestWordsResponse)
async def get_longest_words(
    document_uuid: uuid.UUID,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    longest_words = await document_service.longest_words(document_uuid, current_user.uuid)
    return LongestWordsResponse(longest_words=longest_words)
