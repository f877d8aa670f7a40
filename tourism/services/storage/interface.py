"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for account storage.
This allows us to:
1. Swap the flat file for a real database later
2. Use in-memory storage for testing
3. Keep the Account Store decoupled from the file format

The interface is intentionally tiny. The store always rewrites the whole
collection after a change, so there is no per-record update or delete.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from tourism.errors import TourismError
from tourism.models.account import UserAccount


class AccountStorageInterface(ABC):
    """
    Abstract interface for account persistence.

    Any storage implementation (flat file, SQLite, etc.)
    must implement these methods.
    """

    @abstractmethod
    def load(self) -> list[UserAccount]:
        """
        Read every stored account.

        Returns:
            Accounts in stored order. Empty if nothing has been saved yet.

        Raises:
            PersistenceError: If the resource exists but cannot be read or parsed
        """
        pass

    @abstractmethod
    def save_all(self, accounts: Iterable[UserAccount]) -> None:
        """
        Replace the stored collection with the given accounts.

        Args:
            accounts: Every account, in the order they should be stored

        Raises:
            PersistenceError: If the write fails
        """
        pass


class StorageError(TourismError):
    """Base exception for storage operations."""
    pass


class PersistenceError(StorageError):
    """Stored accounts could not be read, parsed or written."""
    pass
