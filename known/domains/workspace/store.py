import uuid
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from known.domains.documents.entities import Document
from known.domains.documents.services import DocumentService
from known.domains.folders.entities import Folder
from known.domains.folders.services import FolderService


class DatabaseWorkspaceStore:
    """Feeds the page resolver from the database"""

    def __init__(self, session: AsyncSession):
        self.folder_service = FolderService(session)
        self.document_service = DocumentService(session)

    async def get_folders(self, user_id: str) -> List[Folder]:
        """Folders of the signed-in user"""
        return await self.folder_service.get_folders(uuid.UUID(user_id))

    async def get_docs_by_folder(self, folder_id: str) -> List[Document]:
        """Documents of one folder"""
        return await self.document_service.get_docs_by_folder(uuid.UUID(folder_id))
