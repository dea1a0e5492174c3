from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
import uuid

from known.db.models.user import User as UserModel
from known.domains.identity.entities import User


class UserRepository:
    """Persistence for users"""
    
    def __init__(self, session: AsyncSession):
        """Bind the repository to a database session"""
        self.session = session
    
    async def create(self, user: User) -> User:
        """Insert a new user"""
        db_user = UserModel(
            uuid=user.uuid,
            email=user.email,
            name=user.name,
            image=user.image,
            password_hash=user.password_hash,
            is_active=user.is_active
        )
        
        self.session.add(db_user)
        try:
            await self.session.commit()
            await self.session.refresh(db_user)
            return self._to_domain(db_user)
        except IntegrityError:
            await self.session.rollback()
            raise ValueError("User with this email already exists")
    
    async def get_by_uuid(self, user_uuid: uuid.UUID) -> Optional[User]:
        """Fetch a user by UUID"""
        result = await self.session.execute(
            select(UserModel).where(UserModel.uuid == user_uuid)
        )
        db_user = result.scalar_one_or_none()
        return self._to_domain(db_user) if db_user else None
    
    async def get_by_email(self, email: str) -> Optional[User]:
        """Fetch a user by email"""
        result = await self.session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        db_user = result.scalar_one_or_none()
        return self._to_domain(db_user) if db_user else None
    
    async def email_exists(self, email: str) -> bool:
        """Whether the email is already taken"""
        result = await self.session.execute(
            select(UserModel.uuid).where(UserModel.email == email)
        )
        return result.scalar_one_or_none() is not None
    
    def _to_domain(self, db_user: UserModel) -> User:
        """Row to domain entity"""
        return User(
            uuid=db_user.uuid,
            email=db_user.email,
            name=db_user.name,
            password_hash=db_user.password_hash,
            image=db_user.image,
            is_active=db_user.is_active,
            created_at=db_user.created_at,
            updated_at=db_user.updated_at
        )
