"""
Record store variants.

Four takes on the same process-wide record store:
- closure: records hidden in closure cells behind an immutable bundle of functions
- frozen: a frozen bundle over a module-private record sequence
- class: a frozen instance of a plain class with sealed methods
- guarded: a class whose construction always returns the existing instance
"""

from .closure_store import get_closure_store, single_one
from .frozen_store import get_frozen_store, single_two
from .class_store import get_class_store, single_three
from .guarded_store import GuardedRecordStore, get_guarded_store, single_four

__all__ = [
    "get_closure_store",
    "single_one",
    "get_frozen_store",
    "single_two",
    "get_class_store",
    "single_three",
    "GuardedRecordStore",
    "get_guarded_store",
    "single_four",
]
