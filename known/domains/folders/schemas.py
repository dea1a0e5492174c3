from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import List
from datetime import datetime
import uuid


class FolderCreate(BaseModel):
    """Body of the new-folder request"""
    name: str = Field(..., min_length=1, max_length=255)
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Folder name cannot be empty')
        return v.strip()


class FolderResponse(BaseModel):
    id: str
    name: str
    owner_id: uuid.UUID = Field(alias="ownerId")
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class FolderEnvelope(BaseModel):
    data: FolderResponse


class FolderListEnvelope(BaseModel):
    data: List[FolderResponse]
