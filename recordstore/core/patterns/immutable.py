"""
Helpers that keep a store's operation set fixed once it is built.

``Frozen`` guards instances: after ``_freeze()`` no attribute can be set or
deleted. ``SealedMeta`` guards classes: public attributes defined in the
class body (the operations) cannot be replaced or deleted at runtime.
"""

from recordstore.core.exceptions import FrozenStoreError
from recordstore.core.patterns.singleton import SingletonABCMeta


class Frozen:
    """Mixin that rejects attribute assignment once ``_freeze`` has run."""

    __slots__ = ()

    def _freeze(self):
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            raise FrozenStoreError(
                f"Cannot set '{name}' on frozen {type(self).__name__}"
            )
        super().__setattr__(name, value)

    def __delattr__(self, name):
        if getattr(self, "_frozen", False):
            raise FrozenStoreError(
                f"Cannot delete '{name}' from frozen {type(self).__name__}"
            )
        super().__delattr__(name)


class SealedMeta(type):
    """Metaclass that refuses to rebind public attributes of its classes."""

    def __setattr__(cls, name, value):
        cls._ensure_not_sealed(name)
        super().__setattr__(name, value)

    def __delattr__(cls, name):
        cls._ensure_not_sealed(name)
        super().__delattr__(name)

    def _ensure_not_sealed(cls, name):
        if name.startswith("_"):
            return
        if any(name in klass.__dict__ for klass in cls.__mro__):
            raise FrozenStoreError(
                f"Cannot replace '{name}' on sealed class {cls.__name__}"
            )


class SealedSingletonMeta(SealedMeta, SingletonABCMeta):
    """Sealed metaclass for classes that also derive from ``Singleton``."""
    pass
