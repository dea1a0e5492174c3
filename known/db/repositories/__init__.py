from known.db.repositories.user_repository import UserRepository
from known.db.repositories.folder_repository import FolderRepository
from known.db.repositories.document_repository import DocumentRepository

__all__ = [
    "UserRepository",
    "FolderRepository",
    "DocumentRepository",
]
