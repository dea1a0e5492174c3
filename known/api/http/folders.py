from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import uuid

from known.core.auth import require_session
from known.core.db import get_db
from known.domains.folders.schemas import (
    FolderCreate, FolderResponse, FolderEnvelope, FolderListEnvelope
)
from known.domains.folders.services import FolderService
from known.domains.identity.schemas import Session

router = APIRouter(prefix="/api/folder", tags=["folders"])


@router.post("/", response_model=FolderEnvelope, status_code=status.HTTP_201_CREATED)
async def create_folder(
    folder_data: FolderCreate,
    session: Session = Depends(require_session),
    db: AsyncSession = Depends(get_db)
):
    folder_service = FolderService(db)
    folder = await folder_service.create_folder(folder_data, uuid.UUID(session.user.id))
    return {"data": FolderResponse.model_validate(folder)}


@router.get("/", response_model=FolderListEnvelope)
async def list_folders(
    session: Session = Depends(require_session),
    db: AsyncSession = Depends(get_db)
):
    folder_service = FolderService(db)
    folders = await folder_service.get_folders(uuid.UUID(session.user.id))
    return {"data": [FolderResponse.model_validate(f) for f in folders]}
