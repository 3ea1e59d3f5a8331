from __future__ import annotations

from typing import Any, Protocol


class DocumentStore(Protocol):
    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """Return one document by id, or None."""

    def find(self, collection: str, **filters: Any) -> list[dict[str, Any]]:
        """Return documents whose top-level fields equal every filter value."""

    def put(self, collection: str, doc_id: str, document: dict[str, Any]) -> None:
        """Insert or replace a document."""
