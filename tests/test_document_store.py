import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_drafts.store import InMemoryDocumentStore, SqliteDocumentStore  # noqa: E402


class InMemoryDocumentStoreTests(unittest.TestCase):
    def test_put_get_find(self):
        store = InMemoryDocumentStore()
        store.put("user_profiles", "p1", {"user": "u1", "first_name": "Ada"})
        store.put("user_profiles", "p2", {"user": "u2", "first_name": "Grace"})

        self.assertEqual(store.get("user_profiles", "p1")["first_name"], "Ada")
        self.assertEqual(store.get("user_profiles", "p1")["id"], "p1")
        self.assertIsNone(store.get("user_profiles", "missing"))
        self.assertIsNone(store.get("other", "p1"))
        self.assertEqual([doc["id"] for doc in store.find("user_profiles", user="u2")], ["p2"])
        self.assertEqual(len(store.find("user_profiles")), 2)

    def test_documents_are_copied(self):
        seed = {"templates": {"t1": {"id": "t1", "tags": ["modern"]}}}
        store = InMemoryDocumentStore(seed)
        seed["templates"]["t1"]["tags"].append("mutated")
        fetched = store.get("templates", "t1")
        fetched["tags"].append("also mutated")
        self.assertEqual(store.get("templates", "t1")["tags"], ["modern"])


class SqliteDocumentStoreTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.store = SqliteDocumentStore(str(Path(self._tmp.name) / "nested" / "documents.db"))

    def tearDown(self):
        self.store.close()
        self._tmp.cleanup()

    def test_round_trip_and_upsert(self):
        self.store.put("templates", "t1", {"name": "Modern", "tags": ["modern"]})
        self.store.put("templates", "t1", {"name": "Modern v2", "tags": ["modern", "clean"]})
        document = self.store.get("templates", "t1")
        self.assertEqual(document["name"], "Modern v2")
        self.assertEqual(document["id"], "t1")
        self.assertIsNone(self.store.get("templates", "t2"))

    def test_find_filters_on_top_level_fields(self):
        self.store.put("user_profiles", "a", {"user": "u1", "experience_level": "senior"})
        self.store.put("user_profiles", "b", {"user": "u2", "experience_level": "entry"})
        matches = self.store.find("user_profiles", user="u2")
        self.assertEqual([doc["id"] for doc in matches], ["b"])
        self.assertEqual([doc["id"] for doc in self.store.find("user_profiles")], ["a", "b"])
        self.assertEqual(self.store.find("templates"), [])


if __name__ == "__main__":
    unittest.main()
