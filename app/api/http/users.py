from fastapi import APIRouter, Depends

from app.api.deps import get_document_service
from app.core.auth import get_current_user
from app.domains.documents.schemas import UserReportResponse
from app.domains.documents.services import DocumentService
from app.domains.identity.entities import User
from app.domains.identity.schemas import UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_profile(current_user: User = Depends(get_current_user)):
    """Профиль текущего пользователя"""
    return UserResponse.model_validate(current_user)


@router.get("/me/report", response_model=UserReportResponse)
async def get_user_report(
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Метрики по всем документам текущего пользователя"""
    report = await document_service.user_report(current_user.uuid)
    return UserReportResponse.model_validate(report)
