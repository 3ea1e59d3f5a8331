from __future__ import annotations

import json
import os
import sqlite3
import threading
from typing import Any

from .memory_store import matches_filters
from .provider import DocumentStore


class SqliteDocumentStore(DocumentStore):
    """Documents stored as JSON payloads in a single SQLite table."""

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        self._lock = threading.Lock()
        self._conn: sqlite3.Connection | None = None

    def _get_connection(self) -> sqlite3.Connection:
        with self._lock:
            if self._conn is not None:
                return self._conn

            directory = os.path.dirname(self._db_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            conn = sqlite3.connect(
                self._db_path,
                check_same_thread=False,
                timeout=5,
                isolation_level=None,
            )
            conn.execute("PRAGMA journal_mode=WAL;")
            conn.execute("PRAGMA synchronous=NORMAL;")
            conn.execute("PRAGMA busy_timeout=5000;")
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS documents (
                    collection TEXT NOT NULL,
                    doc_id TEXT NOT NULL,
                    payload_json TEXT NOT NULL,
                    PRIMARY KEY (collection, doc_id)
                );
                """
            )
            self._conn = conn
            return conn

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        conn = self._get_connection()
        with self._lock:
            cur = conn.execute(
                "SELECT payload_json FROM documents WHERE collection = ? AND doc_id = ?",
                (collection, doc_id),
            )
            row = cur.fetchone()
        if not row:
            return None
        return json.loads(row[0]) if row[0] else {}

    def find(self, collection: str, **filters: Any) -> list[dict[str, Any]]:
        conn = self._get_connection()
        with self._lock:
            cur = conn.execute(
                "SELECT payload_json FROM documents WHERE collection = ? ORDER BY doc_id",
                (collection,),
            )
            rows = cur.fetchall()
        documents = [json.loads(row[0]) for row in rows if row[0]]
        return [document for document in documents if matches_filters(document, filters)]

    def put(self, collection: str, doc_id: str, document: dict[str, Any]) -> None:
        conn = self._get_connection()
        payload = dict(document)
        payload.setdefault("id", doc_id)
        payload_json = json.dumps(payload, ensure_ascii=False)
        with self._lock:
            conn.execute(
                """
                INSERT INTO documents (collection, doc_id, payload_json) VALUES (?, ?, ?)
                ON CONFLICT (collection, doc_id) DO UPDATE SET payload_json = excluded.payload_json
                """,
                (collection, doc_id, payload_json),
            )

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
