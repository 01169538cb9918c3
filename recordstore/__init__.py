"""
In-memory record stores built four ways around the singleton pattern.

``record_store`` is the canonical process-wide store; ``get_record_store``
returns that same instance.
"""

from typing import Final

from recordstore.core.exceptions import FrozenStoreError, InvalidRecordError, RecordStoreError
from recordstore.core.logging_config import configure_logging
from recordstore.core.records import Record, RecordStore, RecordStoreOps
from recordstore.stores import (
    GuardedRecordStore,
    get_class_store,
    get_closure_store,
    get_frozen_store,
    get_guarded_store,
    single_four,
    single_one,
    single_three,
    single_two,
)

get_record_store = get_guarded_store

record_store: Final = get_record_store()

__all__ = [
    "FrozenStoreError",
    "InvalidRecordError",
    "RecordStoreError",
    "configure_logging",
    "Record",
    "RecordStore",
    "RecordStoreOps",
    "GuardedRecordStore",
    "get_class_store",
    "get_closure_store",
    "get_frozen_store",
    "get_guarded_store",
    "get_record_store",
    "record_store",
    "single_one",
    "single_two",
    "single_three",
    "single_four",
]
