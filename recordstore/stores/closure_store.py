"""
Closure-based record store.

The records live only in the cells of the closures built by
``_build_store``; the caller receives an immutable bundle of those closures
and nothing else. ``get_closure_store`` wraps the builder so that calling
it again hands back the same bundle.
"""

import logging
import threading
from typing import Any, Final, List, Optional, Tuple

from recordstore.core.config_manager import config_manager
from recordstore.core.patterns.singleton import singleton_factory
from recordstore.core.records import RecordStoreOps, matches, validate_record


logger = logging.getLogger(__name__)


def _build_store(validate: bool = False) -> RecordStoreOps:
    data: List[Any] = []
    lock = threading.Lock()

    def add(item: Any) -> None:
        if validate:
            validate_record(item)
        with lock:
            data.append(item)
        logger.debug(f"Record appended to closure store, {len(data)} held")

    def get(id: Any) -> Optional[Any]:
        for item in data:
            if matches(item, id):
                return item
        return None

    def count() -> int:
        return len(data)

    def snapshot() -> Tuple[Any, ...]:
        with lock:
            return tuple(data)

    return RecordStoreOps(add=add, get=get, count=count, snapshot=snapshot)


@singleton_factory
def get_closure_store() -> RecordStoreOps:
    """Return the process-wide closure store, building it on first use."""
    return _build_store(validate=config_manager.is_validation_enabled())


single_one: Final = get_closure_store()
