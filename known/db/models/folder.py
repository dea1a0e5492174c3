from sqlalchemy import Column, String, ForeignKey, UUID
from sqlalchemy.orm import relationship

from known.db.base import BaseModel


class Folder(BaseModel):
    __tablename__ = "folders"
    
    name = Column(String(255), nullable=False)
    owner_id = Column(UUID(as_uuid=True), ForeignKey("users.uuid"), nullable=False, index=True)
    
    # Relationships
    owner = relationship("User", back_populates="folders")
    documents = relationship("Document", back_populates="folder", cascade="all, delete-orphan")
