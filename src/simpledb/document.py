"""Whole-document parsing and persistence.

Pipeline shape:
- split text -> lines (empty lines dropped)
- parse each line -> TokenRow
- render rows -> lines -> text joined by the platform newline

Files are read and written in one piece; there is no streaming, locking or retry.
Any OSError from the file layer reaches the caller unchanged.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Union

from .config import (
    DEFAULT_ENCODING,
    DEFAULT_SEPARATOR,
    NEWLINE,
    READ_ENCODING,
    resolve_separator,
    split_lines,
)
from .errors import TokenError
from .records import TokenRow

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


@dataclass
class Document:
    """Ordered rows of a parsed text blob, in source line order."""

    rows: list[TokenRow] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str, separator: Optional[str] = DEFAULT_SEPARATOR) -> "Document":
        """Parse a multi-line blob. Lines that yield no tokens are dropped."""
        separator = resolve_separator(separator)
        rows = []
        for line in split_lines(text):
            row = TokenRow.parse(line, separator)
            if row.tokens:
                rows.append(row)
        logger.debug("Parsed %s rows from %s chars", len(rows), len(text))
        return cls(rows)

    @classmethod
    def load(
        cls,
        path: PathLike,
        separator: Optional[str] = DEFAULT_SEPARATOR,
        encoding: str = READ_ENCODING,
    ) -> "Document":
        """Read a whole file and parse it.

        A leading UTF-8 BOM is dropped with the default encoding.

        Raises:
            OSError: if the file cannot be read.
        """
        try:
            # newline="" hands "\r" and "\r\n" to split_lines untranslated
            with open(path, "r", encoding=encoding, newline="") as fh:
                text = fh.read()
        except OSError as exc:
            logger.warning("Failed to read %s: %s", path, exc)
            raise
        doc = cls.parse(text, separator)
        logger.info("Loaded %s rows from %s", len(doc.rows), path)
        return doc

    @classmethod
    def from_source(
        cls,
        data: str,
        separator: Optional[str] = DEFAULT_SEPARATOR,
        data_is_path: bool = True,
    ) -> "Document":
        """Load from a path, or parse data itself when data_is_path is False."""
        if data_is_path:
            return cls.load(data, separator)
        return cls.parse(data, separator)

    def serialize(
        self,
        separator: Optional[str] = DEFAULT_SEPARATOR,
        newline: str = NEWLINE,
        strict: bool = False,
    ) -> Optional[str]:
        """Render all rows; None when there are no rows at all.

        None means "no data", while a single row without tokens renders as "".

        Raises:
            TokenError: only with strict=True, see validate().
        """
        separator = resolve_separator(separator)
        if strict:
            self.validate(separator)
        if not self.rows:
            return None
        out = newline.join(row.serialize(separator) for row in self.rows)
        logger.debug("Serialized %s rows into %s chars", len(self.rows), len(out))
        return out

    def save(
        self,
        path: PathLike,
        separator: Optional[str] = DEFAULT_SEPARATOR,
        encoding: str = DEFAULT_ENCODING,
        newline: str = NEWLINE,
        strict: bool = False,
    ) -> None:
        """Overwrite path with the serialized document. No rows writes an empty file.

        Raises:
            OSError: if the file cannot be written.
            TokenError: only with strict=True; nothing is written then.
        """
        text = self.serialize(separator, newline=newline, strict=strict)
        try:
            with open(path, "w", encoding=encoding, newline="") as fh:
                fh.write(text or "")
        except OSError as exc:
            logger.warning("Failed to write %s: %s", path, exc)
            raise
        logger.info("Saved %s rows to %s", len(self.rows), path)

    def validate(self, separator: Optional[str] = DEFAULT_SEPARATOR) -> None:
        """Strict check that every row round-trips.

        Raises:
            TokenError: naming the first offending row index.
        """
        for idx, row in enumerate(self.rows):
            try:
                row.validate(separator)
            except TokenError as exc:
                raise TokenError(exc.token, exc.reason, row=idx) from exc
        logger.debug("Validated %s rows", len(self.rows))

    def append(self, tokens: Iterable[str]) -> TokenRow:
        """Wrap tokens in a new row, add it last and return it."""
        row = TokenRow.from_tokens(tokens)
        self.rows.append(row)
        return row

    def __iter__(self) -> Iterator[TokenRow]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __str__(self) -> str:
        return self.serialize() or ""
