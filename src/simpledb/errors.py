"""Errors raised by the simpledb format."""

from __future__ import annotations
from typing import Optional


class SimpleDbError(Exception):
    """Base error for this package."""


class TokenError(SimpleDbError, ValueError):
    """Raised by strict validation when a row cannot survive a round trip.

    `token` is None when the problem belongs to the row as a whole.
    """

    def __init__(self, token: Optional[str], reason: str, row: Optional[int] = None) -> None:
        self.token = token
        self.reason = reason
        self.row = row
        where = f"row {row}: " if row is not None else ""
        what = f"token {token!r} " if token is not None else ""
        super().__init__(f"{where}{what}{reason}")
