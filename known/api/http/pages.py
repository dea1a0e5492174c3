from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from known.core.auth import get_optional_session
from known.core.config import settings
from known.core.db import get_db
from known.core.templates import templates
from known.domains.identity.schemas import Session
from known.domains.workspace.resolver import resolve_page_state, select_view
from known.domains.workspace.store import DatabaseWorkspaceStore

router = APIRouter(tags=["pages"])

MAX_SEGMENTS = 3


async def _render_app(request: Request, path: str, session: Optional[Session], db: AsyncSession):
    # Empty slots keep their position; only trailing slashes are dropped
    path = path.rstrip("/")
    segments = path.split("/") if path else []

    if len(segments) > MAX_SEGMENTS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    
    props = await resolve_page_state(session, segments, DatabaseWorkspaceStore(db))
    
    return templates.TemplateResponse(
        request,
        "app.html",
        {
            "props": props,
            "view": select_view(props),
            "user": props.new_session.user if props.new_session else None,
            "api_host": settings.api_host.rstrip("/"),
        },
    )


@router.get("/app")
async def app_home(
    request: Request,
    session: Optional[Session] = Depends(get_optional_session),
    db: AsyncSession = Depends(get_db)
):
    return await _render_app(request, "", session, db)


@router.get("/app/{path:path}")
async def app_page(
    request: Request,
    path: str,
    session: Optional[Session] = Depends(get_optional_session),
    db: AsyncSession = Depends(get_db)
):
    """Folder browser: /app/<folder>/<any>/<doc>"""
    return await _render_app(request, path, session, db)


@router.get("/signin")
async def signin(request: Request):
    return templates.TemplateResponse(request, "signin.html", {})
