"""Services package."""

from tourism.services.storage import (
    AccountStorageInterface,
    FlatFileAccountStorage,
    InMemoryAccountStorage,
    PersistenceError,
    StorageError,
)

__all__ = [
    # Storage services
    "AccountStorageInterface",
    "FlatFileAccountStorage",
    "InMemoryAccountStorage",
    "PersistenceError",
    "StorageError",
]
