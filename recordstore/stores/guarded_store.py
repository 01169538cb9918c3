"""
Guarded-constructor record store.

``GuardedRecordStore()`` can be called any number of times: the singleton
metaclass builds the instance on the first call and returns that same
instance on every later one. The instance is frozen once set up and its
methods are sealed on the class.
"""

from typing import Any, Final, Optional, Tuple
import logging

from recordstore.core.config_manager import config_manager
from recordstore.core.patterns.immutable import Frozen, SealedSingletonMeta
from recordstore.core.patterns.singleton import Singleton
from recordstore.repositories.base import RecordSequence


class GuardedRecordStore(Frozen, Singleton, metaclass=SealedSingletonMeta):
    """
    Singleton Record Store.

    Holds the process-wide sequence of records. Every construction path
    (``GuardedRecordStore()``, ``GuardedRecordStore.get_instance()``,
    ``get_guarded_store()``) yields the same object.
    """

    def _setup(self):
        """Initialize the record sequence and freeze the instance."""
        self._logger = logging.getLogger(__name__)
        self._records: RecordSequence = RecordSequence(
            validate=config_manager.is_validation_enabled()
        )
        self._logger.info(
            f"Record store initialized (validation enabled: {self._records.validate})"
        )
        self._freeze()

    def add(self, item: Any) -> None:
        """
        Append a record to the end of the store.

        Args:
            item: The record to store; kept by reference
        """
        self._records.append(item)

    def get(self, id: Any) -> Optional[Any]:
        """
        Look up a record by identifier.

        Args:
            id: The identifier to compare against each record's ``id``

        Returns:
            The first record, in insertion order, whose id equals ``id``,
            or None if no record matches
        """
        return self._records.find_first(id)

    def count(self) -> int:
        """Get the number of records held."""
        return self._records.count()

    def snapshot(self) -> Tuple[Any, ...]:
        """Get a copy of the held records in insertion order."""
        return self._records.snapshot()


def get_guarded_store() -> GuardedRecordStore:
    """Return the process-wide guarded store."""
    return GuardedRecordStore.get_instance()


# Create the global record store instance
single_four: Final = get_guarded_store()
