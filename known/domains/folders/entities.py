import uuid
from datetime import datetime
from typing import Optional


class Folder:
    """Named container of documents owned by a single user"""
    
    def __init__(
        self,
        uuid: uuid.UUID,
        name: str,
        owner_id: uuid.UUID,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.name = name
        self.owner_id = owner_id
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()
    
    @property
    def id(self) -> str:
        # Path segments are compared against this string form
        return str(self.uuid)
    
    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        """Whether the user owns the folder"""
        return self.owner_id == user_id
    
    @classmethod
    def create_folder(cls, name: str, owner_id: uuid.UUID) -> "Folder":
        """Build a new folder with a fresh UUID"""
        return cls(uuid=uuid.uuid4(), name=name, owner_id=owner_id)
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, Folder):
            return False
        return self.uuid == other.uuid
    
    def __repr__(self) -> str:
        return f"Folder(uuid={self.uuid}, name={self.name})"
