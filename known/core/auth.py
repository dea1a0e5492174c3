from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from known.core.config import settings
from known.core.db import get_db
from known.core.security import extract_token_from_header
from known.domains.identity.schemas import Session
from known.domains.identity.services import IdentityService


def get_request_token(request: Request) -> Optional[str]:
    """Session cookie first, then a bearer header"""
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        return token
    return extract_token_from_header(request.headers.get("Authorization", ""))


async def get_optional_session(
    request: Request,
    db: AsyncSession = Depends(get_db)
) -> Optional[Session]:
    """Current session, or None when the visitor is not signed in"""
    token = get_request_token(request)
    
    if not token:
        return None
    
    identity_service = IdentityService(db)
    return await identity_service.get_session_from_token(token)


async def require_session(session: Optional[Session] = Depends(get_optional_session)) -> Session:
    """Current session; 401 when the visitor is not signed in"""
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session
