from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
import uuid

from known.core.auth import require_session
from known.core.db import get_db
from known.domains.documents.schemas import (
    DocumentCreate, DocumentUpdate, DocumentResponse, DocumentEnvelope, DocumentListEnvelope
)
from known.domains.documents.services import DocumentService
from known.domains.folders.services import FolderService
from known.domains.identity.schemas import Session

router = APIRouter(prefix="/api/doc", tags=["documents"])


def _not_found(what: str = "Document") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{what} not found"
    )


def _forbidden(e: PermissionError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=str(e)
    )


@router.get("/", response_model=DocumentListEnvelope)
async def get_docs_by_folder(
    folder: uuid.UUID = Query(...),
    session: Session = Depends(require_session),
    db: AsyncSession = Depends(get_db)
):
    """Documents of one of the caller's folders"""
    folder_service = FolderService(db)
    document_service = DocumentService(db)
    
    try:
        owned = await folder_service.get_owned_folder(folder, uuid.UUID(session.user.id))
    except PermissionError as e:
        raise _forbidden(e)
    
    if not owned:
        raise _not_found("Folder")
    
    documents = await document_service.get_docs_by_folder(owned.uuid)
    return {"data": [DocumentResponse.from_entity(doc) for doc in documents]}


@router.post("/", response_model=DocumentEnvelope, status_code=status.HTTP_201_CREATED)
async def create_document(
    document_data: DocumentCreate,
    session: Session = Depends(require_session),
    db: AsyncSession = Depends(get_db)
):
    document_service = DocumentService(db)
    
    try:
        document = await document_service.create_document(document_data, uuid.UUID(session.user.id))
    except PermissionError as e:
        raise _forbidden(e)
    
    if not document:
        raise _not_found("Folder")
    
    return {"data": DocumentResponse.from_entity(document)}


@router.get("/{document_uuid}", response_model=DocumentEnvelope)
async def get_document(
    document_uuid: uuid.UUID,
    session: Session = Depends(require_session),
    db: AsyncSession = Depends(get_db)
):
    document_service = DocumentService(db)
    
    try:
        document = await document_service.get_document(document_uuid, uuid.UUID(session.user.id))
    except PermissionError as e:
        raise _forbidden(e)
    
    if not document:
        raise _not_found()
    
    return {"data": DocumentResponse.from_entity(document)}


@router.put("/{document_uuid}", response_model=DocumentEnvelope)
async def update_document(
    document_uuid: uuid.UUID,
    update_data: DocumentUpdate,
    session: Session = Depends(require_session),
    db: AsyncSession = Depends(get_db)
):
    document_service = DocumentService(db)
    
    try:
        document = await document_service.update_document(
            document_uuid,
            update_data,
            uuid.UUID(session.user.id)
        )
    except PermissionError as e:
        raise _forbidden(e)
    
    if not document:
        raise _not_found()
    
    return {"data": DocumentResponse.from_entity(document)}
