"""
Tests for account storage backends.

The flat file tests use real files under tmp_path.
"""

import pytest
from decimal import Decimal

from tourism.models.account import Booking, UserAccount
from tourism.services.storage import (
    FlatFileAccountStorage,
    InMemoryAccountStorage,
    PersistenceError,
)


def _paris_booking(tickets: int = 2) -> Booking:
    return Booking(destination="Paris, France", unit_price=Decimal("400000"), ticket_count=tickets)


class TestFlatFileLoad:
    """Tests for reading the accounts file."""

    def test_missing_file_loads_empty(self, users_file):
        """Test first run with no file is not an error."""
        storage = FlatFileAccountStorage(users_file)
        assert storage.load() == []

    def test_empty_file_loads_empty(self, users_file):
        """Test an empty file yields no accounts."""
        users_file.write_text("", encoding="utf-8")
        assert FlatFileAccountStorage(users_file).load() == []

    def test_blank_lines_are_skipped(self, users_file):
        """Test blank lines between records are ignored."""
        users_file.write_text("\nalice p1 N/A 0.00 0\n\n   \nbob p2 N/A 0.00 0\n", encoding="utf-8")
        accounts = FlatFileAccountStorage(users_file).load()
        assert [a.username for a in accounts] == ["alice", "bob"]

    def test_sentinel_record_has_no_booking(self, users_file):
        """Test 'N/A 0 0' reads back as no booking."""
        users_file.write_text("alice p1 N/A 0.000000 0\n", encoding="utf-8")
        (account,) = FlatFileAccountStorage(users_file).load()
        assert account.username == "alice"
        assert account.password == "p1"
        assert account.booking is None

    def test_quoted_destination(self, users_file):
        """Test quoted multi-word destinations parse as one field."""
        users_file.write_text("alice p1 'Tokyo, Japan' 600000.00 1\n", encoding="utf-8")
        (account,) = FlatFileAccountStorage(users_file).load()
        assert account.booking.destination == "Tokyo, Japan"
        assert account.booking.unit_price == Decimal("600000")
        assert account.booking.ticket_count == 1

    def test_legacy_unquoted_destination(self, users_file):
        """Test records from the old unquoted format still load."""
        users_file.write_text("alice p1 Paris, France 400000.000000 2\n", encoding="utf-8")
        (account,) = FlatFileAccountStorage(users_file).load()
        assert account.booking.destination == "Paris, France"
        assert account.booking.unit_price == Decimal("400000.00")
        assert account.booking.ticket_count == 2

    def test_zero_tickets_means_no_booking(self, users_file):
        """Test any zero field is read as the no-booking state."""
        users_file.write_text("alice p1 Rome, Italy 100000.00 0\n", encoding="utf-8")
        (account,) = FlatFileAccountStorage(users_file).load()
        assert account.booking is None

    def test_too_few_fields_rejected(self, users_file):
        """Test a short record fails loudly with its line number."""
        users_file.write_text("alice p1 N/A 0.00 0\nbob p2\n", encoding="utf-8")
        with pytest.raises(PersistenceError, match="line 2"):
            FlatFileAccountStorage(users_file).load()

    def test_unbalanced_quote_rejected(self, users_file):
        """Test a broken quote is reported, not guessed at."""
        users_file.write_text("alice 'p1 N/A 0.00 0\n", encoding="utf-8")
        with pytest.raises(PersistenceError, match="line 1"):
            FlatFileAccountStorage(users_file).load()

    def test_bad_price_rejected(self, users_file):
        """Test non-numeric price is rejected."""
        users_file.write_text("alice p1 N/A abc 0\n", encoding="utf-8")
        with pytest.raises(PersistenceError, match="bad price or ticket count"):
            FlatFileAccountStorage(users_file).load()

    def test_bad_ticket_count_rejected(self, users_file):
        """Test non-integer ticket count is rejected."""
        users_file.write_text("alice p1 N/A 0.00 two\n", encoding="utf-8")
        with pytest.raises(PersistenceError):
            FlatFileAccountStorage(users_file).load()

    def test_negative_tickets_rejected(self, users_file):
        """Test an impossible booking is rejected."""
        users_file.write_text("alice p1 'Rome, Italy' 100000.00 -1\n", encoding="utf-8")
        with pytest.raises(PersistenceError, match="Invalid booking"):
            FlatFileAccountStorage(users_file).load()

    def test_unreadable_path_raises(self, tmp_path):
        """Test a path that exists but cannot be read raises."""
        directory = tmp_path / "users.txt"
        directory.mkdir()
        with pytest.raises(PersistenceError, match="Could not read"):
            FlatFileAccountStorage(directory).load()

    def test_invalid_utf8_raises(self, users_file):
        """Test undecodable bytes are reported as a storage failure."""
        users_file.write_bytes(b"al\xffice p1 N/A 0.00 0\n")
        with pytest.raises(PersistenceError, match="Could not read"):
            FlatFileAccountStorage(users_file).load()

    def test_windows_line_endings(self, users_file):
        """Test CRLF files load like LF files."""
        users_file.write_bytes(b"alice p1 N/A 0.00 0\r\nbob p2 N/A 0.00 0\r\n")
        accounts = FlatFileAccountStorage(users_file).load()
        assert [(a.username, a.password) for a in accounts] == [("alice", "p1"), ("bob", "p2")]


class TestFlatFileSave:
    """Tests for writing the accounts file."""

    def test_save_writes_one_line_per_account(self, users_file):
        """Test the exact on-disk format."""
        storage = FlatFileAccountStorage(users_file)
        storage.save_all([
            UserAccount(username="alice", password="secret", booking=_paris_booking()),
            UserAccount(username="bob", password="hunter2"),
        ])
        assert users_file.read_text(encoding="utf-8") == (
            "alice secret 'Paris, France' 400000.00 2\n"
            "bob hunter2 N/A 0.00 0\n"
        )

    def test_save_is_full_rewrite(self, users_file):
        """Test saving replaces previous contents instead of appending."""
        storage = FlatFileAccountStorage(users_file)
        storage.save_all([UserAccount(username="alice", password="p1")])
        storage.save_all([UserAccount(username="bob", password="p2")])
        assert [a.username for a in storage.load()] == ["bob"]

    def test_atomic_save_leaves_no_temp_file(self, users_file):
        """Test the temp file is renamed away."""
        storage = FlatFileAccountStorage(users_file, atomic_writes=True)
        storage.save_all([UserAccount(username="alice", password="p1")])
        assert users_file.exists()
        assert not users_file.with_name("users.txt.tmp").exists()

    def test_non_atomic_save(self, users_file):
        """Test direct writes work too."""
        storage = FlatFileAccountStorage(users_file, atomic_writes=False)
        storage.save_all([UserAccount(username="alice", password="p1")])
        assert users_file.read_text(encoding="utf-8") == "alice p1 N/A 0.00 0\n"

    def test_save_creates_parent_directory(self, tmp_path):
        """Test a missing parent directory is created."""
        path = tmp_path / "data" / "users.txt"
        FlatFileAccountStorage(path).save_all([UserAccount(username="alice", password="p1")])
        assert path.exists()

    @pytest.mark.parametrize("atomic", [True, False])
    def test_unwritable_path_raises(self, tmp_path, atomic):
        """Test write failures surface as PersistenceError."""
        directory = tmp_path / "users.txt"
        directory.mkdir()
        storage = FlatFileAccountStorage(directory, atomic_writes=atomic)
        with pytest.raises(PersistenceError, match="Could not write"):
            storage.save_all([UserAccount(username="alice", password="p1")])

    def test_failed_atomic_save_removes_temp_file(self, tmp_path):
        """Test a failed rename does not leave the temp file behind."""
        directory = tmp_path / "users.txt"
        directory.mkdir()
        storage = FlatFileAccountStorage(directory, atomic_writes=True)
        with pytest.raises(PersistenceError):
            storage.save_all([UserAccount(username="alice", password="p1")])
        assert not (tmp_path / "users.txt.tmp").exists()


class TestFlatFileRoundTrip:
    """save_all(load()) reproduces the same collection."""

    def test_round_trip_preserves_every_field(self, users_file):
        """Test single-word and multi-word values survive a round trip."""
        accounts = [
            UserAccount(username="alice", password="p1", booking=_paris_booking(3)),
            UserAccount(username="bob", password="my secret phrase"),
            UserAccount(username="o'brien", password="", booking=Booking(
                destination="Gilgit, Pakistan",
                unit_price=Decimal("75000"),
                ticket_count=1,
            )),
        ]
        storage = FlatFileAccountStorage(users_file)
        storage.save_all(accounts)

        expected = [a.model_dump() for a in accounts]
        loaded = storage.load()
        assert [a.model_dump() for a in loaded] == expected

        storage.save_all(loaded)
        assert [a.model_dump() for a in storage.load()] == expected

    def test_order_is_preserved(self, users_file):
        """Test records come back in the order they were saved."""
        names = ["zed", "amy", "kim", "bo"]
        storage = FlatFileAccountStorage(users_file)
        storage.save_all([UserAccount(username=n, password="x") for n in names])
        assert [a.username for a in storage.load()] == names

    def test_unusual_separators_in_fields(self, users_file):
        """Test form feeds and Unicode line separators stay inside their field."""
        accounts = [
            UserAccount(username="alice", password="p1"),
            UserAccount(username="bob", password="pa\x0css"),
            UserAccount(username="carol\u2028x", password="a\x1cb\x85c\u2029d"),
            UserAccount(username="dave", password="p4"),
        ]
        storage = FlatFileAccountStorage(users_file)
        storage.save_all(accounts)
        assert [a.model_dump() for a in storage.load()] == [a.model_dump() for a in accounts]


class TestInMemoryStorage:
    """Tests for the in-memory backend."""

    def test_starts_with_given_accounts(self):
        """Test initial accounts are returned by load."""
        storage = InMemoryAccountStorage([UserAccount(username="alice", password="p1")])
        assert [a.username for a in storage.load()] == ["alice"]

    def test_save_replaces_contents(self):
        """Test save_all replaces and counts."""
        storage = InMemoryAccountStorage()
        storage.save_all([UserAccount(username="bob", password="p2")])
        assert [a.username for a in storage.load()] == ["bob"]
        assert storage.save_count == 1

    def test_simulated_failure(self):
        """Test fail_on_save raises and keeps old contents."""
        storage = InMemoryAccountStorage([UserAccount(username="alice", password="p1")])
        storage.fail_on_save = True
        with pytest.raises(PersistenceError):
            storage.save_all([])
        assert [a.username for a in storage.load()] == ["alice"]
        assert storage.save_count == 0
