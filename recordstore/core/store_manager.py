from typing import Dict, Any, Optional
import logging
from recordstore.core.patterns.singleton import Singleton
from recordstore.core.config_manager import config_manager
from recordstore.core.records import RecordStore
from recordstore.stores.closure_store import single_one
from recordstore.stores.frozen_store import single_two
from recordstore.stores.class_store import single_three
from recordstore.stores.guarded_store import single_four


class StoreManager(Singleton):
    """
    Singleton Store Manager.

    This class provides centralized access to the record store variants.
    It acts as a registry, making it easy to reach any variant by name and
    to report on all of them at once. Stores are never removed.
    """

    def _setup(self):
        """Initialize the store manager."""
        self._stores: Dict[str, RecordStore] = {}
        self._logger = logging.getLogger(__name__)
        self._register_core_stores()

    def _register_core_stores(self):
        """Register the four built-in store variants."""
        self.register_store("closure", single_one)
        self.register_store("frozen", single_two)
        self.register_store("class", single_three)
        self.register_store("guarded", single_four)
        self._logger.info("Core stores registered successfully")

    def register_store(self, name: str, store: RecordStore):
        """
        Register a store with the store manager.

        Args:
            name: The name to register the store under
            store: The store instance to register

        Raises:
            ValueError: If a different store is already registered under ``name``
        """
        existing = self._stores.get(name)
        if existing is not None and existing is not store:
            self._logger.error(f"Store '{name}' is already registered")
            raise ValueError(f"Store '{name}' is already registered")
        self._stores[name] = store
        self._logger.debug(f"Store '{name}' registered")

    def get_store(self, name: str) -> Optional[RecordStore]:
        """
        Get a registered store by name.

        Args:
            name: The name of the store to retrieve

        Returns:
            The store instance, or None if not found
        """
        return self._stores.get(name)

    def has_store(self, name: str) -> bool:
        """
        Check if a store is registered.

        Args:
            name: The name of the store to check

        Returns:
            True if the store is registered, False otherwise
        """
        return name in self._stores

    def list_stores(self) -> list:
        """
        Get a list of all registered store names.

        Returns:
            List of store names in registration order
        """
        return list(self._stores.keys())

    def get_status(self) -> Dict[str, Any]:
        """
        Get the overall status of the registered stores.

        Returns:
            Dictionary containing the registered names and their record counts
        """
        return {
            "stores_registered": len(self._stores),
            "store_names": self.list_stores(),
            "record_counts": {
                name: store.count() for name, store in self._stores.items()
            },
            "validation_enabled": config_manager.is_validation_enabled(),
        }


# Create the global store manager instance
store_manager = StoreManager.get_instance()
