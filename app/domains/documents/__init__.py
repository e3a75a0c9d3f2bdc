from app.domains.documents.entities import Document, DocumentAnalysis, UserReport
from app.domains.documents.exceptions import DocumentNotFoundError, DocumentAccessDeniedError
from app.domains.documents.schemas import (
    DocumentBase, DocumentCreate, DocumentUpdate, DocumentResponse,
    DocumentListResponse, CountResponse, LongestWordsResponse,
    DocumentAnalysisResponse, UserReportResponse
)

__all__ = [
    "Document", "DocumentAnalysis", "UserReport",
    "DocumentNotFoundError", "DocumentAccessDeniedError",
    "DocumentBase", "DocumentCreate", "DocumentUpdate", "DocumentResponse",
    "DocumentListResponse", "CountResponse", "LongestWordsResponse",
    "DocumentAnalysisResponse", "UserReportResponse",
]
