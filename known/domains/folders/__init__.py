from known.domains.folders.entities import Folder
from known.domains.folders.schemas import (
    FolderCreate, FolderResponse, FolderEnvelope, FolderListEnvelope
)

__all__ = [
    "Folder",
    "FolderCreate", "FolderResponse", "FolderEnvelope", "FolderListEnvelope",
]
