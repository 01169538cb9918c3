"""
Class-based record store.

A plain class whose single module-level instance is frozen right after
construction, and whose methods cannot be replaced on the class.

Flaw: nothing stops code from calling ``_ClassRecordStore()`` and getting a
second, independent store. The leading underscore marks the constructor as
private; ``get_class_store`` is the supported way in.
"""

from typing import Any, Final, Optional, Tuple

from recordstore.core.config_manager import config_manager
from recordstore.core.patterns.immutable import Frozen, SealedMeta
from recordstore.core.patterns.singleton import singleton_factory
from recordstore.repositories.base import RecordSequence


class _ClassRecordStore(Frozen, metaclass=SealedMeta):

    __slots__ = ("_records", "_frozen")

    def __init__(self, validate: bool = False) -> None:
        self._records: RecordSequence = RecordSequence(validate=validate)
        self._freeze()

    def add(self, item: Any) -> None:
        self._records.append(item)

    def get(self, id: Any) -> Optional[Any]:
        return self._records.find_first(id)

    def count(self) -> int:
        return self._records.count()

    def snapshot(self) -> Tuple[Any, ...]:
        return self._records.snapshot()


@singleton_factory
def get_class_store() -> _ClassRecordStore:
    """Return the process-wide class store, building it on first use."""
    return _ClassRecordStore(validate=config_manager.is_validation_enabled())


single_three: Final = get_class_store()
