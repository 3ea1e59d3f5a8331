from __future__ import annotations

import copy
import threading
from typing import Any

from .provider import DocumentStore


def matches_filters(document: dict[str, Any], filters: dict[str, Any]) -> bool:
    return all(document.get(key) == value for key, value in filters.items())


class InMemoryDocumentStore(DocumentStore):
    def __init__(self, seed: dict[str, dict[str, dict[str, Any]]] | None = None) -> None:
        self._lock = threading.Lock()
        self._collections: dict[str, dict[str, dict[str, Any]]] = copy.deepcopy(seed) if seed else {}

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        with self._lock:
            document = self._collections.get(collection, {}).get(doc_id)
            return copy.deepcopy(document) if document is not None else None

    def find(self, collection: str, **filters: Any) -> list[dict[str, Any]]:
        with self._lock:
            documents = list(self._collections.get(collection, {}).values())
        return [copy.deepcopy(document) for document in documents if matches_filters(document, filters)]

    def put(self, collection: str, doc_id: str, document: dict[str, Any]) -> None:
        stored = copy.deepcopy(document)
        stored.setdefault("id", doc_id)
        with self._lock:
            self._collections.setdefault(collection, {})[doc_id] = stored
