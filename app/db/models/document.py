from sqlalchemy import Column, Text, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from app.db.base import BaseModel


class Document(BaseModel):
    __tablename__ = "documents"

    content = Column(Text, nullable=False, default="")
    owner_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Relationships
    owner = relationship("User", back_populates="documents")
