from known.db.models.user import User
from known.db.models.folder import Folder
from known.db.models.document import Document

__all__ = [
    "User",
    "Folder",
    "Document",
]
