from known.api.http.health import router as health_router
from known.api.http.auth import router as auth_router
from known.api.http.folders import router as folders_router
from known.api.http.documents import router as documents_router
from known.api.http.pages import router as pages_router
from known.api.http.blog import router as blog_router

__all__ = [
    "health_router",
    "auth_router",
    "folders_router",
    "documents_router",
    "pages_router",
    "blog_router",
]
