"""
Tour Package Model

The catalog is fixed for the life of the process and never persisted.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class TourPackage(BaseModel):
    """One entry in the tour catalog."""
    model_config = ConfigDict(frozen=True)

    code: int = Field(
        ...,
        ge=1,
        le=10,
        description="Menu code the customer types to pick this tour"
    )
    destination: str = Field(
        ...,
        min_length=1,
        description="City and country"
    )
    price: Decimal = Field(
        ...,
        gt=0,
        decimal_places=2,
        description="Price per ticket in Rs"
    )
