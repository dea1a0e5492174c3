import uuid
from datetime import datetime
from typing import Optional


class Document:
    """Document entity; always lives in exactly one folder"""
    
    def __init__(
        self,
        uuid: uuid.UUID,
        name: str,
        folder_id: uuid.UUID,
        owner_id: uuid.UUID,
        content: str = "",
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.name = name
        self.folder_id = folder_id
        self.owner_id = owner_id
        self.content = content or ""
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()
    
    @property
    def id(self) -> str:
        """String id used in URLs and JSON"""
        return str(self.uuid)
    
    def update_content(self, new_content: str) -> None:
        """Replace the document text"""
        self.content = new_content
        self.updated_at = datetime.utcnow()
    
    def rename(self, new_name: str) -> None:
        """Rename the document"""
        self.name = new_name
        self.updated_at = datetime.utcnow()
    
    def get_content_length(self) -> int:
        """Length of the content in characters"""
        return len(self.content)
    
    def get_word_count(self) -> int:
        """Count whitespace separated words"""
        if not self.content.strip():
            return 0
        return len(self.content.split())
    
    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        """Whether the user owns the document"""
        return self.owner_id == user_id
    
    @classmethod
    def create_document(
        cls, name: str, folder_id: uuid.UUID, owner_id: uuid.UUID, content: str = ""
    ) -> "Document":
        """Build a new document with a fresh UUID"""
        return cls(
            uuid=uuid.uuid4(),
            name=name,
            folder_id=folder_id,
            owner_id=owner_id,
            content=content
        )
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.uuid == other.uuid
    
    def __repr__(self) -> str:
        return f"Document(uuid={self.uuid}, name={self.name}, folder_id={self.folder_id})"
