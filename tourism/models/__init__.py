"""
Data Models Package

This package contains all Pydantic models used in the Tourism Manager.
Records held by the Account Store and values returned by its operations
must conform to these schemas.
"""

from tourism.models.account import (
    SENTINEL_DESTINATION,
    Booking,
    BookingSummary,
    RefundInfo,
    Session,
    SessionMode,
    UserAccount,
)
from tourism.models.tour import TourPackage

__all__ = [
    # Account models
    "SENTINEL_DESTINATION",
    "Booking",
    "BookingSummary",
    "RefundInfo",
    "Session",
    "SessionMode",
    "UserAccount",
    # Catalog models
    "TourPackage",
]
