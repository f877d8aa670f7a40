"""
In-Memory Storage Implementation

Keeps the "stored" accounts in a list. Used by tests and by anyone who wants
the store without touching the disk.
"""

from typing import Iterable, Optional

from tourism.models.account import UserAccount
from tourism.services.storage.interface import (
    AccountStorageInterface,
    PersistenceError,
)


class InMemoryAccountStorage(AccountStorageInterface):
    """
    List-backed account storage.

    Set `fail_on_save` to make the next saves raise PersistenceError.
    `save_count` counts successful saves.
    """

    def __init__(self, accounts: Optional[Iterable[UserAccount]] = None):
        self._accounts: list[UserAccount] = list(accounts or [])
        self.fail_on_save = False
        self.save_count = 0

    def load(self) -> list[UserAccount]:
        return list(self._accounts)

    def save_all(self, accounts: Iterable[UserAccount]) -> None:
        if self.fail_on_save:
            raise PersistenceError("Simulated write failure")
        self._accounts = list(accounts)
        self.save_count += 1
