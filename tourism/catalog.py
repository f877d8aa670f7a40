"""
Tour Catalog

The ten packages on offer. Codes, names and prices are fixed.
"""

from decimal import Decimal

from tourism.errors import InvalidPackageCodeError
from tourism.models.tour import TourPackage


TOUR_PACKAGES: tuple[TourPackage, ...] = (
    TourPackage(code=1, destination="Paris, France", price=Decimal("400000")),
    TourPackage(code=2, destination="Tokyo, Japan", price=Decimal("600000")),
    TourPackage(code=3, destination="Bangkok, Thailand", price=Decimal("250000")),
    TourPackage(code=4, destination="Abu Dhabi, UAE", price=Decimal("380000")),
    TourPackage(code=5, destination="Miami, USA", price=Decimal("120000")),
    TourPackage(code=6, destination="Rome, Italy", price=Decimal("100000")),
    TourPackage(code=7, destination="Munich, Germany", price=Decimal("300000")),
    TourPackage(code=8, destination="Madrid, Spain", price=Decimal("320000")),
    TourPackage(code=9, destination="Istanbul, Turkey", price=Decimal("450000")),
    TourPackage(code=10, destination="Gilgit, Pakistan", price=Decimal("75000")),
)

_BY_CODE = {package.code: package for package in TOUR_PACKAGES}


def get_package(code: int) -> TourPackage:
    """
    Look up a package by its menu code.

    Raises:
        InvalidPackageCodeError: If code is not between 1 and 10
    """
    try:
        return _BY_CODE[code]
    except KeyError:
        raise InvalidPackageCodeError(code) from None


def format_amount(amount: Decimal) -> str:
    """Render a rupee amount the way the menus print it, e.g. 'Rs 400000'."""
    return f"Rs {amount:.0f}"
