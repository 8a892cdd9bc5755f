"""
Persistent storage for student and instructor records.

Each record type lives in its own file inside the data directory:

    <data dir>/students.json
    <data dir>/instructors.json

Design rationale:
- a file is read completely when the repository is created
- every change rewrites the complete file (no partial writes)
- the repository does not know about Student or Instructor; it only needs
  a record type with `record_id`, `to_dict()` and `from_dict()`

Lookups are linear scans. Files are small enough for that to be fine.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Generic, Iterator, Optional, Protocol, TypeVar

logger = logging.getLogger(__name__)

DATA_DIR_ENV = "STUDENTRECORDS_DATA_DIR"
STUDENTS_FILE = "students.json"
INSTRUCTORS_FILE = "instructors.json"


class Storable(Protocol):
    @property
    def record_id(self) -> Optional[str]: ...

    def to_dict(self) -> dict[str, Any]: ...

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Any: ...


T = TypeVar("T", bound=Storable)
P = TypeVar("P")


class RepositoryError(Exception):
    """Base class for repository failures."""


class RepositoryLoadError(RepositoryError):
    """The backing file exists but its content cannot be turned into records."""


def default_data_dir() -> Path:
    """
    Return the directory that holds the JSON files.

    $STUDENTRECORDS_DATA_DIR wins, otherwise the current working directory.
    Using a function instead of a constant makes testing easier,
    because tests can override the environment.
    """
    env = os.environ.get(DATA_DIR_ENV, "").strip()
    return Path(env) if env else Path.cwd()


class EventChannel(Generic[P]):
    """
    Minimal synchronous observer list.

    Listeners are called in registration order, in the calling thread,
    and their exceptions propagate to whoever emitted.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._listeners: list[Callable[[P], None]] = []

    def subscribe(self, listener: Callable[[P], None]) -> Callable[[P], None]:
        # returning the listener allows @channel.subscribe as decorator
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Callable[[P], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, payload: P) -> None:
        for listener in list(self._listeners):
            listener(payload)

    def emit_logged(self, payload: P) -> None:
        """
        Like emit(), but a failing listener is logged and the rest still run.
        """
        for listener in list(self._listeners):
            try:
                listener(payload)
            except Exception as exc:
                logger.error("Listener on %s failed: %s", self.name, exc)

    def __len__(self) -> int:
        return len(self._listeners)


class JsonRepository(Generic[T]):
    """
    File-backed store for one record type.

    The in-memory list is a full mirror of the file after loading
    and after every save_changes().
    """

    def __init__(self, path: str | Path, record_type: type[T]) -> None:
        self._path = Path(path)
        self._record_type = record_type
        self._entities: list[T] = self._load()

        self.entity_added: EventChannel[T] = EventChannel("entity_added")
        self.entity_deleted: EventChannel[str] = EventChannel("entity_deleted")

    @property
    def path(self) -> Path:
        return self._path

    @property
    def record_type(self) -> type[T]:
        return self._record_type

    def _type_name(self) -> str:
        return self._record_type.__name__.lower()

    def _load(self) -> list[T]:
        # First run: file does not exist yet -> empty store
        if not self._path.exists():
            logger.debug("No %s file at %s, starting empty", self._type_name(), self._path)
            return []

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise TypeError(f"expected a JSON array, got {type(raw).__name__}")
            entities = [self._record_type.from_dict(d) for d in raw]
        except (json.JSONDecodeError, UnicodeDecodeError, KeyError, TypeError, ValueError, AttributeError) as exc:
            raise RepositoryLoadError(f"Cannot load {self._path}: {exc}") from exc

        logger.debug("Loaded %d %s record(s) from %s", len(entities), self._type_name(), self._path)
        return entities

    def add(self, entity: T) -> None:
        """
        Append entity, persist, then notify entity_added.

        Duplicate IDs are accepted; get_by_id only ever returns the first one.
        """
        self._entities.append(entity)
        self.save_changes()
        self.entity_added.emit(entity)

    def get_by_id(self, entity_id: str) -> Optional[T]:
        for e in self._entities:
            if e.record_id == entity_id:
                return e
        return None

    def delete(self, entity_id: str) -> bool:
        """
        Remove the first record with this ID, persist, then notify entity_deleted.

        Returns True once the reduced collection is on disk. A miss is a
        silent no-op. Failures, including failing listeners, are logged
        instead of raised, so the caller's loop keeps running.
        """
        try:
            entity = self.get_by_id(entity_id)
            if entity is None:
                return False
            self._entities.remove(entity)
            self.save_changes()
        except Exception as exc:
            logger.error("Error deleting %s %s from %s: %s", self._type_name(), entity_id, self._path, exc)
            return False

        self.entity_deleted.emit_logged(entity_id)
        return True

    def save_changes(self) -> None:
        """
        Write the complete collection to the backing file, overwriting it.

        Creates parent directories if needed.
        """
        payload = [e.to_dict() for e in self._entities]
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.debug("Saved %d %s record(s) to %s", len(payload), self._type_name(), self._path)

    def get_all_entities(self) -> tuple[T, ...]:
        """
        Snapshot of all records in insertion order.

        The tuple cannot change the collection, but the records in it are
        the live objects: edit one, then call save_changes() to persist.
        """
        return tuple(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_all_entities())
