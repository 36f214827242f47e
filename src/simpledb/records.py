"""Token rows.

A row is a single line split on a literal separator:
    <token>;<token>;<token>

Example:
    alice;42;admin

Design notes:
- The split is naive: a token containing the separator comes back as two.
- Empty segments ("a;;b") are dropped, never kept as "" tokens.
- Nothing is validated unless validate() is called explicitly.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from .config import DEFAULT_SEPARATOR, resolve_separator
from .errors import TokenError


@dataclass
class TokenRow:
    """One record: an ordered list of string tokens (duplicates allowed)."""

    tokens: list[str] = field(default_factory=list)

    @classmethod
    def parse(cls, line: str, separator: Optional[str] = DEFAULT_SEPARATOR) -> "TokenRow":
        """Parse one line into a row. Never raises for string input.

        An empty separator does not split: the whole line is one token.
        """
        separator = resolve_separator(separator)
        if not separator:
            return cls([line] if line else [])
        return cls([t for t in line.split(separator) if t])

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "TokenRow":
        """Wrap existing tokens as-is (no filtering)."""
        return cls(list(tokens))

    def serialize(self, separator: Optional[str] = DEFAULT_SEPARATOR) -> str:
        """Render the row back to its line form; "" when there are no tokens."""
        return resolve_separator(separator).join(self.tokens)

    def validate(self, separator: Optional[str] = DEFAULT_SEPARATOR) -> None:
        """Check the row would parse back unchanged.

        Raises:
            TokenError: on an empty row or token, a token holding the separator
                or a line break, or tokens that run together once joined.
        """
        separator = resolve_separator(separator)
        if not self.tokens:
            raise TokenError(None, "row has no tokens")
        for token in self.tokens:
            if not token:
                raise TokenError(token, "is empty")
            if separator and separator in token:
                raise TokenError(token, f"contains the separator {separator!r}")
            if "\r" in token or "\n" in token:
                raise TokenError(token, "contains a line break")
        if not separator and len(self.tokens) > 1:
            raise TokenError(None, "several tokens cannot be joined by an empty separator")
        # Multi-char separators can form across a token boundary ("a:" + "::" + "b").
        parsed = TokenRow.parse(self.serialize(separator), separator).tokens
        if parsed != self.tokens:
            bad = next((t for t, p in zip(self.tokens, parsed) if t != p), self.tokens[-1])
            raise TokenError(bad, f"runs into the separator {separator!r} when joined")

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __str__(self) -> str:
        return self.serialize()
