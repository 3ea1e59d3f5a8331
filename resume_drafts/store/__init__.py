from functools import lru_cache

from resume_drafts.core.config import settings

from .memory_store import InMemoryDocumentStore
from .provider import DocumentStore
from .sqlite_store import SqliteDocumentStore

PROFILES_COLLECTION = "user_profiles"
TEMPLATES_COLLECTION = "templates"


@lru_cache(maxsize=1)
def get_default_document_store() -> DocumentStore:
    if settings.store_backend == "sqlite":
        return SqliteDocumentStore(settings.store_db_path)
    return InMemoryDocumentStore()


__all__ = [
    "DocumentStore",
    "InMemoryDocumentStore",
    "SqliteDocumentStore",
    "PROFILES_COLLECTION",
    "TEMPLATES_COLLECTION",
    "get_default_document_store",
]
