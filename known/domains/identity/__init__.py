from known.domains.identity.entities import User
from known.domains.identity.schemas import (
    UserBase, UserCreate, UserLogin, UserResponse, Token, SessionUser, Session
)

__all__ = [
    "User",
    "UserBase", "UserCreate", "UserLogin", "UserResponse", "Token",
    "SessionUser", "Session",
]
