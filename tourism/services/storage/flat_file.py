"""
Flat File Storage Implementation

DESIGN DECISION: Accounts live in a plain text file, one record per line:

    <username> <password> <destination> <unit_price> <ticket_count>

An account without a booking is written with the placeholder
destination `N/A` and zero price and tickets.

Destinations such as "Paris, France" contain spaces, which a purely
whitespace-split format cannot carry. Every field is shell-quoted on write
(`shlex.quote`) and split with `shlex.split` on read. Files written by the
older unquoted format are still readable: when a line has more than five
tokens, everything between the password and the two numeric fields is
the destination.

TRADEOFFS:
- Every save rewrites the whole file (fine for a handful of customers)
- No locking (one process, one writer)
"""

import contextlib
import os
import shlex
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable, Union

import structlog
from pydantic import ValidationError

from tourism.models.account import SENTINEL_DESTINATION, Booking, UserAccount
from tourism.services.storage.interface import (
    AccountStorageInterface,
    PersistenceError,
)


FIELD_COUNT = 5
CENTS = Decimal("0.01")


class FlatFileAccountStorage(AccountStorageInterface):
    """
    Flat file implementation of account storage.

    With atomic_writes enabled, saves go to `<file>.tmp` first and are
    renamed over the real file, so a crash mid-write leaves the previous
    contents intact.
    """

    def __init__(self, path: Union[str, Path], atomic_writes: bool = True):
        self._path = Path(path)
        self._atomic_writes = atomic_writes
        self._logger = structlog.get_logger(__name__)

    @property
    def path(self) -> Path:
        return self._path

    def _account_to_line(self, account: UserAccount) -> str:
        """Convert an account to one file line (without newline)."""
        if account.booking is None:
            destination = SENTINEL_DESTINATION
            unit_price = Decimal("0")
            ticket_count = 0
        else:
            destination = account.booking.destination
            unit_price = account.booking.unit_price
            ticket_count = account.booking.ticket_count

        fields = [
            account.username,
            account.password,
            destination,
            str(unit_price.quantize(CENTS)),
            str(ticket_count),
        ]
        return " ".join(shlex.quote(field) for field in fields)

    def _line_to_account(self, line: str, line_number: int) -> UserAccount:
        """Convert one file line back to an account."""
        try:
            tokens = shlex.split(line)
        except ValueError as e:
            raise PersistenceError(
                f"Malformed record on line {line_number} of {self._path}: {e}"
            )

        if len(tokens) < FIELD_COUNT:
            raise PersistenceError(
                f"Malformed record on line {line_number} of {self._path}: "
                f"expected {FIELD_COUNT} fields, found {len(tokens)}"
            )

        username, password = tokens[0], tokens[1]
        # Legacy lines carry multi-word destinations unquoted
        destination = " ".join(tokens[2:-2])

        try:
            unit_price = Decimal(tokens[-2]).quantize(CENTS)
            ticket_count = int(tokens[-1])
        except (InvalidOperation, ValueError):
            raise PersistenceError(
                f"Malformed record on line {line_number} of {self._path}: "
                f"bad price or ticket count ({tokens[-2]!r}, {tokens[-1]!r})"
            )

        booking = None
        if (
            destination != SENTINEL_DESTINATION
            and unit_price != 0
            and ticket_count != 0
        ):
            try:
                booking = Booking(
                    destination=destination,
                    unit_price=unit_price,
                    ticket_count=ticket_count,
                )
            except ValidationError as e:
                raise PersistenceError(
                    f"Invalid booking on line {line_number} of {self._path}: {e}"
                )

        return UserAccount(username=username, password=password, booking=booking)

    def load(self) -> list[UserAccount]:
        """
        Load accounts from the file.

        A missing file is normal on first run and yields an empty list.
        Blank lines are skipped.
        """
        if not self._path.exists():
            self._logger.info("accounts_file_missing", path=str(self._path))
            return []

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Could not read accounts file {self._path}: {e}") from e

        accounts = []
        for line_number, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            accounts.append(self._line_to_account(line, line_number))

        self._logger.info("accounts_loaded", path=str(self._path), count=len(accounts))
        return accounts

    def save_all(self, accounts: Iterable[UserAccount]) -> None:
        """Rewrite the whole file with the given accounts."""
        lines = [self._account_to_line(account) + "\n" for account in accounts]

        if self._atomic_writes:
            target = self._path.with_name(self._path.name + ".tmp")
        else:
            target = self._path

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "w", encoding="utf-8") as f:
                f.writelines(lines)
                f.flush()
                os.fsync(f.fileno())
            if self._atomic_writes:
                os.replace(target, self._path)
        except OSError as e:
            if target != self._path:
                with contextlib.suppress(OSError):
                    target.unlink()
            self._logger.error("accounts_save_failed", path=str(self._path), error=str(e))
            raise PersistenceError(f"Could not write accounts file {self._path}: {e}") from e

        self._logger.info("accounts_saved", path=str(self._path), count=len(lines))
