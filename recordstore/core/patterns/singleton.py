from abc import ABC, ABCMeta
from typing import Any, Callable, TypeVar
import functools
import logging
import threading


T = TypeVar("T")

logger = logging.getLogger(__name__)


class SingletonMeta(type):
    """
    Thread-safe Singleton metaclass.
    This metaclass ensures that only one instance of a class exists
    and provides thread-safe initialization.
    """

    _instances = {}
    # Reentrant so that one singleton's _setup may reach for another.
    _instance_lock: threading.RLock = threading.RLock()

    def __call__(cls, *args, **kwargs):
        """
        Possible changes to the value of the `__init__` argument do not affect
        the returned instance.
        """
        with cls._instance_lock:
            if cls not in cls._instances:
                instance = super().__call__(*args, **kwargs)
                cls._instances[cls] = instance
                logger.info(f"Singleton instance of {cls.__name__} created")
        return cls._instances[cls]


class SingletonABCMeta(SingletonMeta, ABCMeta):
    """
    Metaclass that combines Singleton and ABC metaclasses to avoid conflicts.
    """
    pass


class Singleton(ABC, metaclass=SingletonABCMeta):
    """
    Abstract base class for implementing Singleton pattern.

    Any class that inherits from this will automatically become a singleton
    with thread-safe initialization. There is deliberately no way to reset
    the instance: it lives until the process exits.
    """

    def __init__(self):
        """Initialize the singleton instance."""
        if hasattr(self, '_initialized'):
            return
        self._initialized = True
        self._setup()

    def _setup(self):
        """
        Override this method to perform actual initialization.
        This method will only be called once during the lifetime of the singleton.
        """
        pass

    @classmethod
    def get_instance(cls):
        """
        Get the singleton instance.

        Returns:
            The singleton instance of the class.
        """
        return cls()


def singleton_factory(factory: Callable[[], T]) -> Callable[[], T]:
    """
    Turn a zero-argument factory into an idempotent accessor.

    The first call runs the factory under a lock; every later call returns
    the object it produced. The accessor is the sole creation path, so no
    caller can end up holding a second instance.
    """
    lock = threading.Lock()
    instance: Any = None
    created = False

    @functools.wraps(factory)
    def accessor() -> T:
        nonlocal instance, created
        with lock:
            if not created:
                instance = factory()
                created = True
                logger.info(f"Singleton instance from {factory.__qualname__} created")
        return instance

    return accessor
