from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
import logging
import uuid
from datetime import datetime

from known.db.repositories.user_repository import UserRepository
from known.domains.identity.entities import User
from known.domains.identity.schemas import UserCreate, UserLogin, Session, SessionUser
from known.core.security import create_access_token, verify_token

logger = logging.getLogger(__name__)


class IdentityService:
    """Registration, login and session lookup"""
    
    def __init__(self, session: AsyncSession):
        """Bind the service to a database session"""
        self.session = session
        self.user_repository = UserRepository(session)
    
    async def register_user(self, user_data: UserCreate) -> User:
        """Register a new user; ValueError when the email is taken"""
        if await self.user_repository.email_exists(user_data.email):
            raise ValueError("Email already registered")
        
        user = User.create_user(
            email=user_data.email,
            name=user_data.name,
            password=user_data.password,
            image=user_data.image
        )
        
        created = await self.user_repository.create(user)
        logger.info(f"Registered user {created.uuid}")
        return created
    
    async def authenticate_user(self, login_data: UserLogin) -> Optional[User]:
        """Active user matching the credentials, or None"""
        user = await self.user_repository.get_by_email(login_data.email)
        
        if not user or not user.is_active:
            return None
        
        if not user.authenticate(login_data.password):
            return None
        
        return user
    
    async def login_user(self, login_data: UserLogin) -> Optional[str]:
        """Check credentials and issue a session token"""
        user = await self.authenticate_user(login_data)
        
        if not user:
            logger.info(f"Failed login for {login_data.email}")
            return None
        
        token_data = {
            "sub": str(user.uuid),
            "name": user.name,
            "email": user.email
        }
        
        return create_access_token(data=token_data)
    
    async def get_user_by_uuid(self, user_uuid: uuid.UUID) -> Optional[User]:
        """Fetch a user by UUID"""
        return await self.user_repository.get_by_uuid(user_uuid)
    
    async def get_session_from_token(self, token: str) -> Optional[Session]:
        """Resolve a token to a session; any problem means no session"""
        payload = verify_token(token)
        
        if payload is None:
            return None
        
        try:
            user_uuid = uuid.UUID(payload.get("sub") or "")
        except ValueError:
            return None
        
        user = await self.user_repository.get_by_uuid(user_uuid)
        
        if user is None or not user.is_active:
            return None
        
        return Session(
            user=SessionUser(
                id=str(user.uuid),
                name=user.name,
                email=user.email,
                image=user.image
            ),
            expires=datetime.utcfromtimestamp(payload["exp"])
        )
