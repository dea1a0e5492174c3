import uuid
from datetime import datetime
from typing import Optional

from known.core.security import get_password_hash, verify_password


class User:
    """Identity entity behind a session"""
    
    def __init__(
        self,
        uuid: uuid.UUID,
        email: str,
        name: str,
        password_hash: str,
        image: Optional[str] = None,
        is_active: bool = True,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.email = email
        self.name = name
        self.password_hash = password_hash
        self.image = image
        self.is_active = is_active
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()
    
    def authenticate(self, password: str) -> bool:
        """Check a plain password against the stored hash"""
        return verify_password(password[:72], self.password_hash)
    
    @classmethod
    def create_user(cls, email: str, name: str, password: str, image: Optional[str] = None) -> "User":
        """Build a new user with a hashed password"""
        # bcrypt only looks at the first 72 bytes
        password_hash = get_password_hash(password[:72])
        
        return cls(
            uuid=uuid.uuid4(),
            email=email,
            name=name,
            password_hash=password_hash,
            image=image
        )
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.uuid == other.uuid
    
    def __repr__(self) -> str:
        return f"User(uuid={self.uuid}, email={self.email}, name={self.name})"
