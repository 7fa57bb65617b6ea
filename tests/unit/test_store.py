"""
Tests for the persisted LocatorStore.
"""

import json
import threading

import pytest

from healing_locators.locators.store import LocatorStore
from healing_locators.locators.strategy import LocatorStrategy


class TestLoad:
    """Loading the persisted mapping."""
    
    def test_missing_file_is_created_empty(self, store_path):
        store = LocatorStore(store_path)
        
        assert len(store) == 0
        assert store.memory_only is False
        assert json.loads(store_path.read_text()) == {}
    
    def test_missing_file_not_created_when_disabled(self, store_path):
        store = LocatorStore(store_path, create_if_missing=False)
        
        assert len(store) == 0
        assert not store_path.exists()
    
    def test_loads_existing_entries(self, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text(json.dumps({"searchBox": {"by": "id", "value": "search"}}))
        
        store = LocatorStore(store_path)
        
        assert store.get("searchBox") == LocatorStrategy.id("search")
        assert "searchBox" in store
    
    def test_invalid_json_is_replaced_with_empty_mapping(self, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("{not json")

        store = LocatorStore(store_path)

        assert len(store) == 0
        assert store.memory_only is False
        assert json.loads(store_path.read_text()) == {}

    def test_learning_resumes_after_invalid_json(self, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("{not json")

        LocatorStore(store_path).put("searchBox", LocatorStrategy.id("search"))

        next_run = LocatorStore(store_path)
        assert next_run.get("searchBox") == LocatorStrategy.id("search")

    def test_non_object_json_is_replaced(self, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("[1, 2, 3]")

        store = LocatorStore(store_path)

        assert store.memory_only is False
        assert store.get("anything") is None
        assert json.loads(store_path.read_text()) == {}

    def test_unreadable_file_degrades_to_memory_only(self, store_path, monkeypatch):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("{}")

        def broken_read_text(self, *args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr("pathlib.Path.read_text", broken_read_text)
        store = LocatorStore(store_path)
        store.put("searchBox", LocatorStrategy.id("search"))
        monkeypatch.undo()

        assert store.memory_only is True
        assert store.get("searchBox") == LocatorStrategy.id("search")
        assert store_path.read_text() == "{}"

    def test_unusable_entry_reads_as_absent(self, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text(json.dumps({"weird": {"by": "link", "value": "x"}}))
        
        store = LocatorStore(store_path)
        
        assert store.get("weird") is None


class TestPut:
    """Writing entries."""
    
    def test_put_persists(self, store, store_path):
        store.put("addToCartButton", LocatorStrategy.css(".buy-btn"))
        
        data = json.loads(store_path.read_text())
        assert data == {"addToCartButton": {"by": "css", "value": ".buy-btn"}}
    
    def test_put_overwrites(self, store, store_path):
        store.put("addToCartButton", LocatorStrategy.css(".buy-btn"))
        store.put("addToCartButton", LocatorStrategy.xpath("//button"))
        
        assert store.get("addToCartButton") == LocatorStrategy.xpath("//button")
        assert json.loads(store_path.read_text())["addToCartButton"] == {"by": "xpath", "value": "//button"}
    
    def test_survives_reload(self, store, store_path):
        store.put("searchBox", LocatorStrategy.name("q"))
        
        reloaded = LocatorStore(store_path)
        assert reloaded.get("searchBox") == LocatorStrategy.name("q")
    
    def test_unknown_keys_preserved(self, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text(json.dumps({
            "legacy": {"by": "link", "value": "Home", "note": "kept"},
            "_meta": {"version": 1},
        }))
        store = LocatorStore(store_path)
        
        store.put("searchBox", LocatorStrategy.id("search"))
        
        data = json.loads(store_path.read_text())
        assert data["legacy"] == {"by": "link", "value": "Home", "note": "kept"}
        assert data["_meta"] == {"version": 1}
        assert data["searchBox"] == {"by": "id", "value": "search"}
    
    def test_merges_entries_from_other_writers(self, store_path):
        first = LocatorStore(store_path)
        second = LocatorStore(store_path)
        
        first.put("a", LocatorStrategy.id("a"))
        second.put("b", LocatorStrategy.id("b"))
        
        data = json.loads(store_path.read_text())
        assert set(data) == {"a", "b"}
        assert second.get("a") == LocatorStrategy.id("a")
    
    def test_no_temp_files_left(self, store, store_path):
        store.put("a", LocatorStrategy.id("a"))
        store.put("b", LocatorStrategy.id("b"))
        
        assert not [p for p in store_path.parent.iterdir() if p.name.endswith(".tmp")]
        assert json.loads(store_path.read_text()) == {
            "a": {"by": "id", "value": "a"},
            "b": {"by": "id", "value": "b"},
        }
    
    def test_concurrent_puts_keep_every_entry(self, store, store_path):
        def worker(index: int) -> None:
            for n in range(10):
                store.put(f"element-{index}-{n}", LocatorStrategy.css(f"#e{index}-{n}"))
        
        threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        
        data = json.loads(store_path.read_text())
        assert len(data) == 40
        assert len(store) == 40

    def test_concurrent_writers_on_one_file_keep_every_entry(self, store_path):
        stores = [LocatorStore(store_path), LocatorStore(store_path)]

        def worker(index: int) -> None:
            for n in range(50):
                stores[index].put(f"element-{index}-{n}", LocatorStrategy.css(f"#e{index}-{n}"))

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        data = json.loads(store_path.read_text())
        assert len(data) == 100
        assert LocatorStore(store_path).get("element-0-49") == LocatorStrategy.css("#e0-49")

    def test_write_failure_is_swallowed(self, store, monkeypatch):
        def broken_replace(src, dst):
            raise OSError("disk full")
        
        monkeypatch.setattr("healing_locators.locators.store.os.replace", broken_replace)
        
        store.put("a", LocatorStrategy.id("a"))
        
        assert store.get("a") == LocatorStrategy.id("a")


class TestRemove:
    
    def test_remove(self, store, store_path):
        store.put("a", LocatorStrategy.id("a"))
        
        assert store.remove("a") is True
        assert store.get("a") is None
        assert json.loads(store_path.read_text()) == {}
    
    def test_remove_missing(self, store):
        assert store.remove("nothing") is False
    
    def test_names(self, store):
        store.put("a", LocatorStrategy.id("a"))
        store.put("b", LocatorStrategy.id("b"))
        assert sorted(store.names()) == ["a", "b"]
