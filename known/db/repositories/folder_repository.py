from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
import uuid

from known.db.models.folder import Folder as FolderModel
from known.domains.folders.entities import Folder


class FolderRepository:
    """Persistence for folders"""
    
    def __init__(self, session: AsyncSession):
        """Bind the repository to a database session"""
        self.session = session
    
    async def create(self, folder: Folder) -> Folder:
        """Insert a new folder"""
        db_folder = FolderModel(
            uuid=folder.uuid,
            name=folder.name,
            owner_id=folder.owner_id
        )
        
        self.session.add(db_folder)
        try:
            await self.session.commit()
            await self.session.refresh(db_folder)
            return self._to_domain(db_folder)
        except IntegrityError:
            await self.session.rollback()
            raise ValueError("Invalid owner_id")
    
    async def get_by_uuid(self, folder_uuid: uuid.UUID) -> Optional[Folder]:
        """Fetch a folder by UUID"""
        result = await self.session.execute(
            select(FolderModel).where(FolderModel.uuid == folder_uuid)
        )
        db_folder = result.scalar_one_or_none()
        return self._to_domain(db_folder) if db_folder else None
    
    async def get_by_owner(self, owner_id: uuid.UUID) -> List[Folder]:
        """All folders of a user, oldest first"""
        result = await self.session.execute(
            select(FolderModel)
            .where(FolderModel.owner_id == owner_id)
            .order_by(FolderModel.created_at, FolderModel.name)
        )
        db_folders = result.scalars().all()
        return [self._to_domain(folder) for folder in db_folders]
    
    def _to_domain(self, db_folder: FolderModel) -> Folder:
        """Row to domain entity"""
        return Folder(
            uuid=db_folder.uuid,
            name=db_folder.name,
            owner_id=db_folder.owner_id,
            created_at=db_folder.created_at,
            updated_at=db_folder.updated_at
        )
