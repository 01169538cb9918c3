"""
Frozen object-literal record store.

The records sit in a module-private sequence and ``single_two`` is a frozen
bundle of that sequence's bound methods: the name is ``Final`` and the
operations cannot be reassigned.

Flaw: the bundle can still be copied with ``dataclasses.replace``, which
yields a second object sharing the same records.
"""

from typing import Final

from recordstore.core.config_manager import config_manager
from recordstore.core.patterns.singleton import singleton_factory
from recordstore.core.records import RecordStoreOps
from recordstore.repositories.base import RecordSequence


_records: RecordSequence = RecordSequence(validate=config_manager.is_validation_enabled())


@singleton_factory
def get_frozen_store() -> RecordStoreOps:
    """Return the frozen store. It is built at import time."""
    return RecordStoreOps(
        add=_records.append,
        get=_records.find_first,
        count=_records.count,
        snapshot=_records.snapshot,
    )


single_two: Final = get_frozen_store()
