"""
JSON file storage and per-collection locking.

Each domain keeps its records as a single JSON array in
``<content_root>/<data_dir>/<name>.json``.  A ``JsonCollection`` loads
the whole array into pydantic models and rewrites the whole file on
save.  Services wrap every read-modify-write cycle in the collection's
``lock`` so that two concurrent updates of the same file cannot
interleave and lose a write.

``get_collection`` returns one shared ``JsonCollection`` per file so
that every caller in the process uses the same lock.  How failures
are reported depends on ``settings.strict_storage``: strict mode
raises ``StorageError``, otherwise failures are logged and the
collection behaves as empty (reads) or unchanged (writes).
"""

import json
import logging
import os
import threading
from pathlib import Path
from typing import Dict, Generic, List, Type, TypeVar

from pydantic import BaseModel, TypeAdapter

from .config import settings
from .exceptions import StorageError

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = logging.getLogger(__name__)


def get_data_dir() -> Path:
    """Compute the directory holding the data files.

    If ``settings.content_root`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    content_root = Path(settings.content_root)
    if not content_root.is_absolute():
        base_dir = Path(__file__).resolve().parents[3]
        content_root = base_dir / content_root
    return (content_root / settings.data_dir).resolve()


class JsonCollection(Generic[ModelT]):
    """A list of ``model`` records persisted as one JSON document."""

    def __init__(self, name: str, path: Path, model: Type[ModelT]) -> None:
        self.name = name
        self.path = Path(path)
        self.model = model
        self.lock = threading.RLock()
        self._adapter = TypeAdapter(List[model])

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> List[ModelT]:
        """Read every record from disk.

        A missing file is not an error and yields an empty list.  A file
        containing JSON ``null`` is treated the same way.
        """
        with self.lock:
            if not self.path.exists():
                logger.warning("%s data file not found at %s", self.name.capitalize(), self.path)
                return []
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
                if data is None:
                    return []
                # JSONDecodeError and pydantic's ValidationError are both ValueErrors.
                return self._adapter.validate_python(data)
            except (OSError, ValueError) as exc:
                logger.error("Error reading %s data from %s: %s", self.name, self.path, exc)
                if settings.strict_storage:
                    raise StorageError(f"Could not read {self.name} data from {self.path}") from exc
                return []

    def save(self, items: List[ModelT]) -> None:
        """Rewrite the file with ``items``, pretty-printed.

        The document is written to a sibling temporary file first and
        then moved over the original, so readers never see a half
        written file.
        """
        with self.lock:
            payload = self._adapter.dump_python(items, mode="json", by_alias=True)
            tmp_path = self.path.with_name(self.path.name + ".tmp")
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                tmp_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
                os.replace(tmp_path, self.path)
            except OSError as exc:
                logger.error("Error writing %s data to %s: %s", self.name, self.path, exc)
                if settings.strict_storage:
                    raise StorageError(f"Could not write {self.name} data to {self.path}") from exc


_collections: Dict[Path, JsonCollection] = {}
_registry_lock = threading.Lock()


def get_collection(name: str, model: Type[ModelT]) -> JsonCollection[ModelT]:
    """Return the shared collection for ``<data_dir>/<name>.json``."""
    path = get_data_dir() / f"{name}.json"
    with _registry_lock:
        collection = _collections.get(path)
        if collection is None:
            collection = JsonCollection(name, path, model)
            _collections[path] = collection
        return collection


def clear_collections() -> None:
    """Forget every cached collection (used when the data directory changes)."""
    with _registry_lock:
        _collections.clear()
