from known.domains.documents.entities import Document
from known.domains.documents.schemas import (
    DocumentBase, DocumentCreate, DocumentUpdate, DocumentResponse,
    DocumentEnvelope, DocumentListEnvelope
)

__all__ = [
    "Document",
    "DocumentBase", "DocumentCreate", "DocumentUpdate", "DocumentResponse",
    "DocumentEnvelope", "DocumentListEnvelope",
]
