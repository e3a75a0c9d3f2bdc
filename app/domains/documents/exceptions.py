import uuid


class DocumentNotFoundError(LookupError):
    """Документ не существует"""

    def __init__(self, document_id: uuid.UUID) -> None:
        self.document_id = document_id
        super().__init__(f"Document with ID {document_id} not found")


class DocumentAccessDeniedError(PermissionError):
    """Документ существует, но принадлежит другому пользователю"""

    def __init__(self, document_id: uuid.UUID) -> None:
        self.document_id = document_id
        super().__init__("Access to the requested resource is denied")
