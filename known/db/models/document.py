from sqlalchemy import Column, String, Text, ForeignKey, UUID
from sqlalchemy.orm import relationship

from known.db.base import BaseModel


class Document(BaseModel):
    __tablename__ = "documents"
    
    name = Column(String(255), nullable=False)
    content = Column(Text, default="")
    folder_id = Column(UUID(as_uuid=True), ForeignKey("folders.uuid"), nullable=False, index=True)
    owner_id = Column(UUID(as_uuid=True), ForeignKey("users.uuid"), nullable=False)
    
    # Relationships
    folder = relationship("Folder", back_populates="documents")
    owner = relationship("User", back_populates="documents")
