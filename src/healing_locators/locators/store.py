"""
Locator Store - Persist the last strategy that located each named element.

The store maps a logical element name ("addToCartButton") to the strategy
that most recently found it. It is loaded once when constructed and written
back synchronously on every update, so the next test run starts from the
strategies that worked last time.

File format:
    {
      "addToCartButton": {"by": "xpath", "value": "//button[contains(text(),'Add')]"},
      "searchBox": {"by": "id", "value": "search"}
    }

Several processes may share one file. Every write holds an exclusive lock on
a sidecar "<file>.lock", re-reads the file, merges its update in and moves a
temp file from the same directory into place with os.replace, so entries
added by other writers survive and readers never see a partial file.
"""

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from filelock import FileLock

from healing_locators.exceptions import InvalidStrategyError, StoreIOError
from healing_locators.locators.strategy import LocatorStrategy

logger = logging.getLogger(__name__)


class LocatorStore:
    """
    Durable mapping from element name to last-known-good strategy.

    Usage:
        store = LocatorStore("config/element-locators.json")

        store.put("searchBox", LocatorStrategy.id("search"))
        store.get("searchBox")
        # LocatorStrategy(kind=<LocatorKind.ID: 'id'>, expression='search')

    Read or write failures never raise. A file that is not a JSON object is
    replaced with an empty mapping. When the file cannot be read or written
    at all, the store keeps working from memory for the session.
    """

    def __init__(
        self,
        path: Union[str, Path] = "config/element-locators.json",
        create_if_missing: bool = True,
    ):
        self.path = Path(path).expanduser()
        self.create_if_missing = create_if_missing
        self._entries: Dict[str, Any] = {}
        self._memory_only = False
        self._lock = threading.Lock()
        self.load()

    @property
    def memory_only(self) -> bool:
        """True when the file could not be used and nothing is persisted."""
        return self._memory_only

    @property
    def lock_path(self) -> Path:
        return self.path.with_name(f"{self.path.name}.lock")

    def load(self) -> None:
        """Read the persisted mapping, creating or repairing the file as needed."""
        with self._lock:
            self._memory_only = False
            if not self.path.exists():
                self._entries = {}
                if self.create_if_missing:
                    self._reset("missing")
                logger.debug(f"No locator store at {self.path}, starting empty")
                return

            try:
                self._entries = self._read()
                logger.debug(f"Loaded {len(self._entries)} locators from {self.path}")
            except StoreIOError as e:
                self._entries = {}
                if isinstance(e.cause, OSError):
                    self._degrade(e)
                else:
                    logger.warning(f"Locator store is not usable, starting empty: {e}")
                    self._reset("unparsable")

    def get(self, name: str) -> Optional[LocatorStrategy]:
        """
        Get the stored strategy for a name.

        The strategy is not checked against the page; it is only what
        worked the last time it was written.

        Returns:
            The strategy, or None if absent or unreadable
        """
        with self._lock:
            raw = self._entries.get(name)
        if raw is None:
            return None
        try:
            return LocatorStrategy.from_dict(raw)
        except InvalidStrategyError as e:
            logger.debug(f"Ignoring unusable store entry for {name}: {e}")
            return None

    def put(self, name: str, strategy: LocatorStrategy) -> None:
        """
        Record the strategy for a name and persist the whole store.

        The entry is replaced as a whole. Callers must only put a strategy
        that has just located the element.
        """
        with self._lock:
            self._entries[name] = strategy.to_dict()
            self._flush({name: strategy.to_dict()})

    def remove(self, name: str) -> bool:
        """
        Delete the entry for a name.

        Returns:
            True if an entry was removed
        """
        with self._lock:
            if name not in self._entries:
                return False
            del self._entries[name]
            self._flush({}, removed=name)
            return True

    def names(self) -> List[str]:
        """Names that currently have an entry."""
        with self._lock:
            return list(self._entries.keys())

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @contextmanager
    def _file_lock(self) -> Iterator[None]:
        """Hold the cross-process lock guarding read-merge-replace."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            lock = FileLock(str(self.lock_path))
            lock.acquire()
        except OSError as e:
            raise StoreIOError(f"Cannot lock locator store: {e}", path=self.path, cause=e) from e
        try:
            yield
        finally:
            lock.release()

    def _reset(self, reason: str) -> None:
        """Write an empty mapping unless another writer got there first."""
        try:
            with self._file_lock():
                try:
                    if self.path.exists():
                        self._entries = self._read()
                        return
                except StoreIOError as e:
                    if isinstance(e.cause, OSError):
                        raise
                self._write({})
                logger.debug(f"Wrote empty locator store to {self.path} ({reason})")
        except StoreIOError as e:
            self._degrade(e)

    def _flush(self, updates: Dict[str, Any], removed: Optional[str] = None) -> None:
        """Merge updates into the on-disk mapping and replace the file."""
        if self._memory_only:
            logger.debug(f"Locator store is memory-only, not writing {self.path}")
            return

        try:
            with self._file_lock():
                try:
                    on_disk = self._read() if self.path.exists() else {}
                except StoreIOError as e:
                    logger.warning(f"Locator store changed to unreadable content, rewriting from memory: {e}")
                    on_disk = dict(self._entries)

                merged = {**on_disk, **updates}
                if removed is not None:
                    merged.pop(removed, None)

                self._write(merged)
                self._entries = merged
        except StoreIOError as e:
            logger.warning(f"Failed to save locator store: {e}")

    def _read(self) -> Dict[str, Any]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StoreIOError(f"Cannot read locator store: {e}", path=self.path, cause=e) from e
        try:
            data = json.loads(text)
        except ValueError as e:
            raise StoreIOError(f"Locator store is not valid JSON: {e}", path=self.path, cause=e) from e
        if not isinstance(data, dict):
            raise StoreIOError("Locator store must contain a JSON object", path=self.path)
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                dir=self.path.parent,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            raise StoreIOError(f"Cannot write locator store: {e}", path=self.path, cause=e) from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

    def _degrade(self, error: StoreIOError) -> None:
        self._memory_only = True
        logger.warning(f"Locator store unavailable, using memory-only cache: {error}")
