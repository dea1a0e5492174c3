from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
import logging
import uuid

from known.db.repositories.folder_repository import FolderRepository
from known.domains.folders.entities import Folder
from known.domains.folders.schemas import FolderCreate

logger = logging.getLogger(__name__)


class FolderService:
    """Folder operations scoped to an owner"""
    
    def __init__(self, session: AsyncSession):
        """Bind the service to a database session"""
        self.session = session
        self.folder_repository = FolderRepository(session)
    
    async def create_folder(self, folder_data: FolderCreate, owner_id: uuid.UUID) -> Folder:
        """Create a folder for the owner"""
        folder = Folder.create_folder(name=folder_data.name, owner_id=owner_id)
        created = await self.folder_repository.create(folder)
        logger.info(f"Created folder {created.uuid} for user {owner_id}")
        return created
    
    async def get_folders(self, owner_id: uuid.UUID) -> List[Folder]:
        """All folders of the owner"""
        return await self.folder_repository.get_by_owner(owner_id)
    
    async def get_folder(self, folder_uuid: uuid.UUID) -> Optional[Folder]:
        """Fetch a folder without an ownership check"""
        return await self.folder_repository.get_by_uuid(folder_uuid)
    
    async def get_owned_folder(self, folder_uuid: uuid.UUID, user_id: uuid.UUID) -> Optional[Folder]:
        """Fetch a folder, refusing access to other users' folders"""
        folder = await self.folder_repository.get_by_uuid(folder_uuid)
        
        if not folder:
            return None
        
        if not folder.is_owned_by(user_id):
            raise PermissionError("You don't have access to this folder")
        
        return folder
