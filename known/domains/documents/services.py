from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
import logging
import uuid

from known.db.repositories.document_repository import DocumentRepository
from known.domains.documents.entities import Document
from known.domains.documents.schemas import DocumentCreate, DocumentUpdate
from known.domains.folders.services import FolderService

logger = logging.getLogger(__name__)


class DocumentService:
    """Document operations; every document belongs to one folder"""
    
    def __init__(self, session: AsyncSession):
        """Bind the service to a database session"""
        self.session = session
        self.document_repository = DocumentRepository(session)
        self.folder_service = FolderService(session)
    
    async def create_document(self, document_data: DocumentCreate, owner_id: uuid.UUID) -> Optional[Document]:
        """Create a document inside one of the owner's folders; None if the folder is unknown"""
        folder = await self.folder_service.get_owned_folder(document_data.folder, owner_id)
        
        if not folder:
            return None
        
        document = Document.create_document(
            name=document_data.name,
            folder_id=folder.uuid,
            owner_id=owner_id,
            content=document_data.content
        )
        
        created = await self.document_repository.create(document)
        logger.info(f"Created document {created.uuid} in folder {folder.uuid}")
        return created
    
    async def get_docs_by_folder(self, folder_id: uuid.UUID) -> List[Document]:
        """All documents of a folder"""
        return await self.document_repository.get_by_folder(folder_id)
    
    async def get_document(self, document_uuid: uuid.UUID, user_id: uuid.UUID) -> Optional[Document]:
        """Fetch a document, refusing access to other users' documents"""
        document = await self.document_repository.get_by_uuid(document_uuid)
        
        if not document:
            return None
        
        if not document.is_owned_by(user_id):
            raise PermissionError("You don't have access to this document")
        
        return document
    
    async def update_document(
        self,
        document_uuid: uuid.UUID,
        update_data: DocumentUpdate,
        user_id: uuid.UUID
    ) -> Optional[Document]:
        """Apply a rename and/or new content; None if the document is unknown"""
        document = await self.get_document(document_uuid, user_id)
        
        if not document:
            return None
        
        if update_data.name:
            document.rename(update_data.name)
        
        if update_data.content is not None:
            document.update_content(update_data.content)
        
        return await self.document_repository.update(document)
