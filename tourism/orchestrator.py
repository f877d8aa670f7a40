"""
Main Orchestrator for Tourism Manager

This module ties the components together and owns the session:
1. Anonymous actions (register, login, browse the catalog)
2. Authenticated actions (book, check total, cancel, change password, logout)

DESIGN DECISION: The session is an explicit value held here, not a global.
Authenticated actions always act for `session.username`, so the CLI can
never book or cancel on behalf of somebody else.
"""

from typing import Optional

import structlog

from tourism.accounts import AccountStore
from tourism.catalog import TOUR_PACKAGES
from tourism.config import Settings, get_settings
from tourism.errors import NotLoggedInError
from tourism.models.account import (
    Booking,
    BookingSummary,
    RefundInfo,
    Session,
    UserAccount,
)
from tourism.models.tour import TourPackage
from tourism.services.storage import FlatFileAccountStorage


class TourismService:
    """
    Session-aware front for the Account Store.

    Flow:
    1. register / login while anonymous
    2. book, check, cancel, change password while logged in
    3. logout returns to anonymous
    """

    def __init__(self, store: AccountStore, session: Optional[Session] = None):
        self._store = store
        self._session = session or Session()
        self._logger = structlog.get_logger(__name__)

    @property
    def session(self) -> Session:
        return self._session

    @property
    def store(self) -> AccountStore:
        return self._store

    @property
    def current_user(self) -> Optional[UserAccount]:
        """The logged-in account, or None when anonymous."""
        if not self._session.is_authenticated:
            return None
        return self._store.find_by_username(self._session.username)

    def _require_login(self) -> str:
        if not self._session.is_authenticated:
            raise NotLoggedInError()
        return self._session.username

    # -------- Anonymous actions --------

    def list_packages(self) -> tuple[TourPackage, ...]:
        return TOUR_PACKAGES

    def register(self, username: str, password: str) -> UserAccount:
        return self._store.register(username, password)

    def login(self, username: str, password: str) -> UserAccount:
        """
        Authenticate and start a session for the user.

        A failed login leaves the current session untouched.
        """
        account = self._store.authenticate(username, password)
        self._session.login(account.username)
        self._logger.info("session_started", username=account.username)
        return account

    def logout(self) -> None:
        username = self._require_login()
        self._session.logout()
        self._logger.info("session_ended", username=username)

    # -------- Authenticated actions --------

    def book(self, package_code: int, ticket_count: int) -> Booking:
        return self._store.book(self._require_login(), package_code, ticket_count)

    def check_booking(self) -> BookingSummary:
        return self._store.check_booking(self._require_login())

    def cancel(self) -> RefundInfo:
        return self._store.cancel(self._require_login())

    def change_password(self, current_password: str, new_password: str) -> None:
        self._store.change_password(self._require_login(), current_password, new_password)


def create_app_components(
    settings: Optional[Settings] = None,
    users_file: Optional[str] = None,
) -> TourismService:
    """
    Factory function to create the service from configuration.

    Loads existing accounts from the configured file.

    Args:
        settings: Settings to use. Defaults to get_settings().
        users_file: Overrides the configured accounts file path.

    Raises:
        PersistenceError: If the accounts file exists but cannot be read
    """
    settings = settings or get_settings()
    storage_settings = settings.storage

    storage = FlatFileAccountStorage(
        users_file or storage_settings.users_path,
        atomic_writes=storage_settings.atomic_writes,
    )
    store = AccountStore.from_storage(storage)
    return TourismService(store)
