"""
Account Models for Tourism Manager

These models define the records the Account Store holds and the values
its operations return.

DESIGN DECISION: A missing booking is `None`, never a placeholder record.
The "N/A / 0 / 0" sentinel exists only inside the flat file format and is
translated at the storage boundary. A Booking that is half-filled cannot be
constructed at all.

Accounts are frozen. The store replaces a record with an updated copy
instead of mutating it, which makes rolling back a failed write trivial.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


SENTINEL_DESTINATION = "N/A"


# =============================================================================
# BOOKINGS
# =============================================================================

class Booking(BaseModel):
    """
    A single active tour booking.

    Price is per ticket; the total is always derived, never stored.
    """
    model_config = ConfigDict(frozen=True)

    destination: str = Field(
        ...,
        min_length=1,
        description="Destination name as listed in the catalog"
    )
    unit_price: Decimal = Field(
        ...,
        gt=0,
        decimal_places=2,
        description="Price per ticket in Rs"
    )
    ticket_count: int = Field(
        ...,
        ge=1,
        description="Number of tickets booked"
    )

    @field_validator('destination')
    @classmethod
    def reject_sentinel(cls, v: str) -> str:
        """The placeholder destination never names a real booking."""
        if v == SENTINEL_DESTINATION:
            raise ValueError(f"'{SENTINEL_DESTINATION}' is not a valid destination")
        return v

    @property
    def total(self) -> Decimal:
        """Total cost of the booking."""
        return self.unit_price * self.ticket_count


class UserAccount(BaseModel):
    """
    One registered customer.

    Usernames are case-sensitive and never change after registration.
    Passwords are kept in plaintext, matching the lab-exercise scope.
    """
    model_config = ConfigDict(frozen=True)

    username: str = Field(
        ...,
        description="Unique login name"
    )
    password: str = Field(
        ...,
        description="Plaintext password"
    )
    booking: Optional[Booking] = Field(
        default=None,
        description="Active booking, if any"
    )

    @property
    def has_booking(self) -> bool:
        return self.booking is not None


# =============================================================================
# OPERATION RESULTS
# =============================================================================

class RefundInfo(BaseModel):
    """What the customer gets back after a cancellation."""
    model_config = ConfigDict(frozen=True)

    destination: str
    ticket_count: int = Field(..., ge=1)
    amount: Decimal = Field(..., ge=0)


class BookingSummary(BaseModel):
    """Booking details shown by 'Check Total'."""
    model_config = ConfigDict(frozen=True)

    destination: str
    ticket_count: int = Field(..., ge=1)
    unit_price: Decimal = Field(..., gt=0)
    total: Decimal = Field(..., gt=0)

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingSummary":
        return cls(
            destination=booking.destination,
            ticket_count=booking.ticket_count,
            unit_price=booking.unit_price,
            total=booking.total,
        )


# =============================================================================
# SESSION
# =============================================================================

class SessionMode(str, Enum):
    """Which menu the CLI is showing."""
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class Session(BaseModel):
    """
    Who is logged in right now.

    Starts anonymous. `login` and `logout` are the only transitions.
    """
    mode: SessionMode = SessionMode.ANONYMOUS
    username: Optional[str] = None

    @model_validator(mode='after')
    def validate_mode(self) -> 'Session':
        """Authenticated sessions always name a user; anonymous ones never do."""
        if self.mode == SessionMode.AUTHENTICATED and self.username is None:
            raise ValueError("Authenticated session requires a username")
        if self.mode == SessionMode.ANONYMOUS and self.username is not None:
            raise ValueError("Anonymous session cannot carry a username")
        return self

    @property
    def is_authenticated(self) -> bool:
        return self.mode == SessionMode.AUTHENTICATED

    def login(self, username: str) -> None:
        self.username = username
        self.mode = SessionMode.AUTHENTICATED

    def logout(self) -> None:
        self.mode = SessionMode.ANONYMOUS
        self.username = None
