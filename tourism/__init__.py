"""
Tourism Manager - Source Package

A small record-management tool for customer accounts and tour bookings.

DESIGN PRINCIPLES:
1. Memory and disk never disagree across an operation boundary
2. Fail early, fail visibly
3. One active booking per customer
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Tourism Manager Team"
