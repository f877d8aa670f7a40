"""
Account Store

Holds every registered account and implements the account operations:
register, authenticate, book, cancel, change password and check booking.

GUARANTEES:
- Usernames are unique
- At most one active booking per account
- Every successful mutation is written to storage before the call returns
- A mutation whose write fails is undone in memory and re-raised, so memory
  and storage never disagree after an operation

Records are kept in a dict keyed by username. Dicts preserve insertion order,
so the stored file order is registration order.
"""

from typing import Iterable, Optional

import structlog

from tourism.catalog import get_package
from tourism.errors import (
    AlreadyBookedError,
    DuplicateUsernameError,
    NoActiveBookingError,
    UserNotFoundError,
    WrongPasswordError,
    ZeroTicketsError,
)
from tourism.models.account import (
    Booking,
    BookingSummary,
    RefundInfo,
    UserAccount,
)
from tourism.services.storage import AccountStorageInterface, StorageError


class AccountStore:
    """
    In-memory account collection mirrored to an AccountStorageInterface.

    Accounts are frozen models; an update swaps in a new copy.
    """

    def __init__(
        self,
        storage: AccountStorageInterface,
        accounts: Optional[Iterable[UserAccount]] = None,
    ):
        """
        Initialize the store.

        Args:
            storage: Where every change is written.
            accounts: Initial records, e.g. from storage.load().

        Raises:
            DuplicateUsernameError: If the initial records repeat a username
        """
        self._storage = storage
        self._logger = structlog.get_logger(__name__)
        self._accounts: dict[str, UserAccount] = {}
        for account in accounts or []:
            if account.username in self._accounts:
                raise DuplicateUsernameError(account.username)
            self._accounts[account.username] = account

    @classmethod
    def from_storage(cls, storage: AccountStorageInterface) -> "AccountStore":
        """Build a store from whatever the storage already holds."""
        return cls(storage, storage.load())

    def __len__(self) -> int:
        return len(self._accounts)

    @property
    def accounts(self) -> list[UserAccount]:
        """All accounts in registration order."""
        return list(self._accounts.values())

    # -------- Lookup --------

    def find_by_username(self, username: str) -> Optional[UserAccount]:
        """Exact, case-sensitive lookup. Returns None if absent."""
        return self._accounts.get(username)

    def _require(self, username: str) -> UserAccount:
        account = self.find_by_username(username)
        if account is None:
            raise UserNotFoundError(username)
        return account

    # -------- Persistence --------

    def _commit(self, updated: UserAccount, previous: Optional[UserAccount]) -> None:
        """
        Put `updated` in place and write everything out.

        On a storage failure the previous record (or its absence) is
        restored before the error propagates.
        """
        self._accounts[updated.username] = updated
        try:
            self._storage.save_all(self.accounts)
        except StorageError as e:
            if previous is None:
                del self._accounts[updated.username]
            else:
                self._accounts[updated.username] = previous
            self._logger.error("persist_failed", username=updated.username, error=str(e))
            raise

    # -------- Operations --------

    def register(self, username: str, password: str) -> UserAccount:
        """
        Create a new account with no booking.

        Raises:
            DuplicateUsernameError: If the username is taken (store unchanged)
            PersistenceError: If the write fails (store unchanged)
        """
        if self.find_by_username(username) is not None:
            raise DuplicateUsernameError(username)

        account = UserAccount(username=username, password=password)
        self._commit(account, previous=None)

        self._logger.info("account_registered", username=username)
        return account

    def authenticate(self, username: str, password: str) -> UserAccount:
        """
        Check credentials.

        Raises:
            UserNotFoundError: No such username
            WrongPasswordError: Username exists, password differs
        """
        account = self._require(username)
        if account.password != password:
            self._logger.info("login_rejected", username=username)
            raise WrongPasswordError(username)
        return account

    def book(self, username: str, package_code: int, ticket_count: int) -> Booking:
        """
        Book a catalog package for the account.

        Checks run in this order: user exists, no active booking,
        valid package code, at least one ticket.
        """
        account = self._require(username)
        if account.booking is not None:
            raise AlreadyBookedError(username, account.booking.destination)

        package = get_package(package_code)
        if ticket_count <= 0:
            raise ZeroTicketsError(ticket_count)

        booking = Booking(
            destination=package.destination,
            unit_price=package.price,
            ticket_count=ticket_count,
        )
        self._commit(account.model_copy(update={"booking": booking}), previous=account)

        self._logger.info(
            "booking_created",
            username=username,
            package_code=package_code,
            ticket_count=ticket_count,
        )
        return booking

    def cancel(self, username: str) -> RefundInfo:
        """
        Cancel the active booking and refund it in full.

        Raises:
            UserNotFoundError: No such username
            NoActiveBookingError: Nothing to cancel
        """
        account = self._require(username)
        booking = account.booking
        if booking is None:
            raise NoActiveBookingError(username)

        refund = RefundInfo(
            destination=booking.destination,
            ticket_count=booking.ticket_count,
            amount=booking.total,
        )
        self._commit(account.model_copy(update={"booking": None}), previous=account)

        self._logger.info("booking_cancelled", username=username, refund=str(refund.amount))
        return refund

    def change_password(
        self,
        username: str,
        current_password: str,
        new_password: str,
    ) -> None:
        """
        Replace the password after verifying the current one.

        A wrong current password changes nothing and writes nothing.
        """
        account = self._require(username)
        if account.password != current_password:
            raise WrongPasswordError(username)

        self._commit(account.model_copy(update={"password": new_password}), previous=account)
        self._logger.info("password_changed", username=username)

    def check_booking(self, username: str) -> BookingSummary:
        """
        Summarize the active booking.

        Raises:
            UserNotFoundError: No such username
            NoActiveBookingError: No booking to summarize
        """
        account = self._require(username)
        if account.booking is None:
            raise NoActiveBookingError(username)
        return BookingSummary.from_booking(account.booking)
