"""Account store package."""

from tourism.accounts.store import AccountStore

__all__ = ["AccountStore"]
