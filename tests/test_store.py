"""
Тесты именованного хранилища данных.
"""

import hashlib

from wydra.data.store import DataStore, content_hash


def _md5(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


class TestDataStore:

    def test_define_by_name(self):
        store = DataStore()
        assert store.define("team", "a: 1") == "team"
        assert store.lookup("team") == {"a": 1}
        entry = store.get("team")
        assert entry.name == "team"
        assert entry.hash == _md5("a: 1team")

    def test_content_hash(self):
        assert content_hash("body", "name") == _md5("bodyname")

    def test_collision_keeps_both(self):
        store = DataStore()
        first = store.define("team", "a: 1")
        second = store.define("team", "a: 2")

        expected_hash = _md5("a: 2team")
        assert first == "team"
        assert second == f"team-{expected_hash}"
        assert len(store) == 2

        # по имени находится первый блок, второй - по хешу или составному ключу
        assert store.lookup("team") == {"a": 1}
        assert store.lookup(expected_hash) == {"a": 2}
        assert store.get(second).data == {"a": 2}

    def test_lookup_by_hash(self):
        store = DataStore()
        store.define("x", "- a\n- b")
        assert store.lookup(_md5("- a\n- bx")) == ["a", "b"]

    def test_lookup_missing(self):
        assert DataStore().lookup("nope") is None

    def test_malformed_block_stores_empty(self):
        store = DataStore()
        store.define("bad", "a: b: c")
        assert store.lookup("bad") == {}

    def test_clear(self):
        store = DataStore()
        store.define("a", "x: 1")
        store.clear()
        assert "a" not in store
        assert store.entries() == []
