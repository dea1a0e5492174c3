from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
import uuid
from datetime import datetime

from known.domains.documents.entities import Document


class DocumentBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    content: str = Field(default="", max_length=1000000)  # 1MB max content
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()


class DocumentCreate(DocumentBase):
    folder: uuid.UUID


class DocumentUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, max_length=1000000)
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if v is not None and not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip() if v else v


class DocumentResponse(DocumentBase):
    id: str
    folder: uuid.UUID
    owner_id: uuid.UUID = Field(alias="ownerId")
    created_at: datetime
    updated_at: datetime
    word_count: int
    content_length: int
    
    model_config = ConfigDict(populate_by_name=True)
    
    @classmethod
    def from_entity(cls, document: Document) -> "DocumentResponse":
        return cls(
            id=document.id,
            name=document.name,
            content=document.content,
            folder=document.folder_id,
            owner_id=document.owner_id,
            created_at=document.created_at,
            updated_at=document.updated_at,
            word_count=document.get_word_count(),
            content_length=document.get_content_length()
        )


class DocumentEnvelope(BaseModel):
    data: DocumentResponse


class DocumentListEnvelope(BaseModel):
    data: List[DocumentResponse]
