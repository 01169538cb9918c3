from __future__ import annotations

import logging
import threading
from typing import Any, Generic, List, Optional, Tuple, TypeVar

from recordstore.core.records import matches, validate_record


RecordType = TypeVar("RecordType")

logger = logging.getLogger(__name__)


class RecordSequence(Generic[RecordType]):
    """Append-only, insertion-ordered storage behind a record store.

    Appends are serialized by a lock; lookups read without one since the
    list only ever grows.
    """

    __slots__ = ("_items", "_lock", "_validate")

    def __init__(self, *, validate: bool = False) -> None:
        self._items: List[RecordType] = []
        self._lock = threading.Lock()
        self._validate = validate

    @property
    def validate(self) -> bool:
        return self._validate

    def append(self, item: RecordType) -> None:
        if self._validate:
            validate_record(item)
        with self._lock:
            self._items.append(item)
            size = len(self._items)
        logger.debug(f"Record appended, {size} held")

    def find_first(self, identifier: Any) -> Optional[RecordType]:
        for item in self._items:
            if matches(item, identifier):
                return item
        return None

    def count(self) -> int:
        return len(self._items)

    def snapshot(self) -> Tuple[RecordType, ...]:
        with self._lock:
            return tuple(self._items)
