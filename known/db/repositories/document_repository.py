from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
import uuid

from known.db.models.document import Document as DocumentModel
from known.domains.documents.entities import Document


class DocumentRepository:
    """Persistence for documents"""
    
    def __init__(self, session: AsyncSession):
        """Bind the repository to a database session"""
        self.session = session
    
    async def create(self, document: Document) -> Document:
        """Insert a new document"""
        db_document = DocumentModel(
            uuid=document.uuid,
            name=document.name,
            content=document.content,
            folder_id=document.folder_id,
            owner_id=document.owner_id
        )
        
        self.session.add(db_document)
        try:
            await self.session.commit()
            await self.session.refresh(db_document)
            return self._to_domain(db_document)
        except IntegrityError:
            await self.session.rollback()
            raise ValueError("Invalid folder_id or owner_id")
    
    async def get_by_uuid(self, document_uuid: uuid.UUID) -> Optional[Document]:
        """Fetch a document by UUID"""
        result = await self.session.execute(
            select(DocumentModel).where(DocumentModel.uuid == document_uuid)
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None
    
    async def get_by_folder(self, folder_id: uuid.UUID) -> List[Document]:
        """All documents of a folder, oldest first"""
        result = await self.session.execute(
            select(DocumentModel)
            .where(DocumentModel.folder_id == folder_id)
            .order_by(DocumentModel.created_at, DocumentModel.name)
        )
        db_documents = result.scalars().all()
        return [self._to_domain(doc) for doc in db_documents]
    
    async def update(self, document: Document) -> Optional[Document]:
        """Persist name and content of an existing document"""
        result = await self.session.execute(
            select(DocumentModel).where(DocumentModel.uuid == document.uuid)
        )
        db_document = result.scalar_one_or_none()
        
        if not db_document:
            return None
        
        db_document.name = document.name
        db_document.content = document.content
        
        await self.session.commit()
        await self.session.refresh(db_document)
        return self._to_domain(db_document)
    
    def _to_domain(self, db_document: DocumentModel) -> Document:
        """Row to domain entity"""
        return Document(
            uuid=db_document.uuid,
            name=db_document.name,
            folder_id=db_document.folder_id,
            owner_id=db_document.owner_id,
            content=db_document.content,
            created_at=db_document.created_at,
            updated_at=db_document.updated_at
        )
