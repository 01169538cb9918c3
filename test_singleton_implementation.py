#!/usr/bin/env python3
"""
Test script to verify the singleton pattern implementation.

This script tests:
1. Singleton instance creation and uniqueness
2. Configuration management
3. Store manager functionality
4. Thread safety of singleton implementations
5. Package-level exports

Run this script (or pytest) to validate the singleton pattern implementation.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from recordstore.core.config_manager import ConfigManager, config_manager
from recordstore.core.patterns import Singleton, singleton_factory
from recordstore.core.store_manager import StoreManager, store_manager
from recordstore.stores.guarded_store import GuardedRecordStore, get_guarded_store, single_four


def test_singleton_uniqueness():
    """Test that singletons return the same instance."""
    print("Testing singleton uniqueness...")

    # Test ConfigManager
    config1 = ConfigManager.get_instance()
    config2 = ConfigManager()
    config3 = config_manager

    assert config1 is config2 is config3, "ConfigManager instances are not the same!"
    print("✓ ConfigManager singleton test passed")

    # Test GuardedRecordStore
    store1 = GuardedRecordStore.get_instance()
    store2 = GuardedRecordStore()
    store3 = get_guarded_store()

    assert store1 is store2 is store3 is single_four, "GuardedRecordStore instances are not the same!"
    print("✓ GuardedRecordStore singleton test passed")

    # Test StoreManager
    manager1 = StoreManager.get_instance()
    manager2 = StoreManager()
    manager3 = store_manager

    assert manager1 is manager2 is manager3, "StoreManager instances are not the same!"
    print("✓ StoreManager singleton test passed")


def test_setup_runs_once():
    """Test that _setup is only invoked for the first construction."""
    print("\nTesting one-time setup...")

    calls = []

    class Counted(Singleton):
        def _setup(self):
            calls.append(self)

    first = Counted()
    second = Counted.get_instance()

    assert first is second, "Counted instances are not the same!"
    assert len(calls) == 1, f"_setup ran {len(calls)} times"
    print("✓ One-time setup test passed")


def test_thread_safety():
    """Test thread safety of singleton implementations."""
    print("\nTesting thread safety...")

    instances = {"config": [], "store": [], "manager": []}

    def create_instances():
        instances["config"].append(ConfigManager.get_instance())
        instances["store"].append(GuardedRecordStore.get_instance())
        instances["manager"].append(StoreManager.get_instance())

    # Create instances from multiple threads
    with ThreadPoolExecutor(max_workers=10) as executor:
        futures = [executor.submit(create_instances) for _ in range(20)]
        for future in futures:
            future.result()

    # Check all instances are the same
    config_set = set(id(instance) for instance in instances["config"])
    store_set = set(id(instance) for instance in instances["store"])
    manager_set = set(id(instance) for instance in instances["manager"])

    assert len(config_set) == 1, f"ConfigManager not thread-safe: {len(config_set)} different instances"
    assert len(store_set) == 1, f"GuardedRecordStore not thread-safe: {len(store_set)} different instances"
    assert len(manager_set) == 1, f"StoreManager not thread-safe: {len(manager_set)} different instances"

    print("✓ Thread safety test passed")


def test_racing_first_access():
    """Test that racing first calls to a factory accessor build one instance."""
    print("\nTesting racing first access...")

    built = []
    barrier = threading.Barrier(8)

    @singleton_factory
    def make():
        built.append(object())
        return built[-1]

    def race():
        barrier.wait()
        return make()

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = [future.result() for future in [executor.submit(race) for _ in range(8)]]

    assert len(built) == 1, f"Factory ran {len(built)} times"
    assert all(result is built[0] for result in results), "Accessor returned different objects"
    print("✓ Racing first access test passed")


def test_config_manager():
    """Test ConfigManager functionality."""
    print("\nTesting ConfigManager functionality...")

    config = config_manager

    # Test settings access
    settings = config.settings
    assert settings is not None, "Settings not accessible"
    print("✓ Settings accessible")

    # Test logging settings
    logging_settings = config.get_logging_settings()
    assert "level" in logging_settings, "Logging settings incomplete"
    assert "format" in logging_settings, "Logging settings incomplete"
    print("✓ Logging settings accessible")

    # Test boolean methods
    debug_mode = config.is_debug_mode()
    validation_enabled = config.is_validation_enabled()
    assert isinstance(debug_mode, bool), "Debug mode not boolean"
    assert isinstance(validation_enabled, bool), "Validation flag not boolean"
    print("✓ Boolean methods working")


def test_store_manager():
    """Test StoreManager functionality."""
    print("\nTesting StoreManager functionality...")

    manager = store_manager

    # Test store registration
    for name in ("closure", "frozen", "class", "guarded"):
        assert manager.has_store(name), f"{name} store not registered"
    print("✓ Core stores registered")

    # Test store access
    assert manager.get_store("guarded") is single_four, "Guarded store not accessible"
    assert manager.get_store("missing") is None, "Unknown store should be None"
    print("✓ Store access working")

    # Test store listing
    stores = manager.list_stores()
    assert stores[:4] == ["closure", "frozen", "class", "guarded"], "Store listing out of order"
    print("✓ Store listing working")

    # Test re-registration
    manager.register_store("guarded", single_four)
    try:
        manager.register_store("guarded", object())
    except ValueError:
        pass
    else:
        raise AssertionError("Replacing a registered store should fail")
    assert manager.get_store("guarded") is single_four, "Guarded store was replaced"
    print("✓ Re-registration guard working")

    # Test status
    status = manager.get_status()
    assert isinstance(status, dict), "Status not a dictionary"
    assert status["stores_registered"] == len(stores), "Status store count mismatch"
    assert status["record_counts"]["guarded"] == single_four.count(), "Status record count mismatch"
    print("✓ Store status accessible")


def test_package_exports():
    """Test package-level imports."""
    print("\nTesting package exports...")

    from recordstore import get_record_store, record_store

    assert record_store is single_four, "record_store is not the guarded store"
    assert get_record_store() is record_store, "get_record_store returned another store"
    print("✓ Package exports working")


def main():
    """Run all tests."""
    print("🔍 Testing Singleton Pattern Implementation")
    print("=" * 50)

    try:
        test_singleton_uniqueness()
        test_setup_runs_once()
        test_thread_safety()
        test_racing_first_access()
        test_config_manager()
        test_store_manager()
        test_package_exports()

        print("\n" + "=" * 50)
        print("🎉 All tests passed! Singleton pattern implementation is working correctly.")

    except Exception as e:
        print(f"\n❌ Test failed: {e}")
        import traceback
        traceback.print_exc()
        return False

    return True


if __name__ == "__main__":
    success = main()
    exit(0 if success else 1)
