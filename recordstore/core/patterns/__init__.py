"""
Design Patterns Module

This module contains the design pattern implementations the record stores are built on.
Currently includes:
- Singleton Pattern: metaclass, base class and factory decorator guaranteeing one instance per process
- Immutability helpers: frozen instances and sealed classes so a store's operations cannot be swapped out
"""

from .singleton import Singleton, SingletonMeta, SingletonABCMeta, singleton_factory
from .immutable import Frozen, SealedMeta, SealedSingletonMeta

__all__ = [
    "Singleton",
    "SingletonMeta",
    "SingletonABCMeta",
    "singleton_factory",
    "Frozen",
    "SealedMeta",
    "SealedSingletonMeta",
]
