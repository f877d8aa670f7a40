"""
Storage Services Package

Provides the abstract account storage interface and its implementations.
The flat file is the production backend; the in-memory one backs tests.
"""

from tourism.services.storage.interface import (
    AccountStorageInterface,
    PersistenceError,
    StorageError,
)
from tourism.services.storage.flat_file import FlatFileAccountStorage
from tourism.services.storage.memory import InMemoryAccountStorage

__all__ = [
    # Interfaces
    "AccountStorageInterface",
    # Exceptions
    "PersistenceError",
    "StorageError",
    # Implementations
    "FlatFileAccountStorage",
    "InMemoryAccountStorage",
]
