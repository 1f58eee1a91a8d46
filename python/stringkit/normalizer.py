"""ASCII transliteration for stringkit.

Converts text to 7-bit printable ASCII in three passes:

1. A configurable table of regex -> replacement substitutions, applied in
   order (e.g. "ß" -> "ss", "Ä" -> "Ae").
2. Unicode decomposition for anything the table missed: accented letters
   lose their combining marks ("ğ" -> "g").
3. Anything still outside tab, newline, carriage return and 0x20-0x7E is
   removed.
"""

import re
import unicodedata
from dataclasses import dataclass
from typing import Any

from .config import config_pairs
from .errors import ConfigurationError

NON_PRINTABLE_PATTERN = re.compile(r"[^\x09\x0A\x0D\x20-\x7E]")


def fold_char(char: str) -> str:
    """Strip combining marks from a single character.

    Args:
        char: Single character.

    Returns:
        The character without diacritics, or the character unchanged if it
        does not decompose to ASCII.
    """
    if char.isascii():
        return char

    normalized = unicodedata.normalize("NFD", char)
    ascii_chars = []
    for c in normalized:
        if unicodedata.category(c) != "Mn":  # Not a combining mark
            if c.isascii():
                ascii_chars.append(c)
    return "".join(ascii_chars) if ascii_chars else char


def fold_accents(text: str) -> str:
    """Strip combining marks from every character of text."""
    return "".join(fold_char(char) for char in text)


def strip_non_printable(text: str) -> str:
    """Remove everything that is not printable ASCII or tab/newline/CR."""
    return NON_PRINTABLE_PATTERN.sub("", text)


def compile_table(table: Any) -> tuple[tuple[re.Pattern[str], str], ...]:
    """Compile a transliteration table.

    Args:
        table: Mapping of pattern -> replacement, or a list of
            [pattern, replacement] pairs. Order is preserved.

    Raises:
        ConfigurationError: if the table is malformed or a pattern is invalid.
    """
    if table is None:
        return ()
    compiled = []
    for pattern, replacement in config_pairs(table, "ascii"):
        try:
            compiled.append((re.compile(pattern), replacement))
        except re.error as e:
            raise ConfigurationError(f"Invalid ASCII table pattern {pattern!r}: {e}") from e
    return tuple(compiled)


@dataclass(frozen=True)
class Transliterator:
    """Callable converting text to printable ASCII."""

    table: tuple[tuple[re.Pattern[str], str], ...] = ()
    fold: bool = True

    @classmethod
    def from_config(cls, table: Any, fold: bool = True) -> "Transliterator":
        return cls(table=compile_table(table), fold=fold)

    def __call__(self, text: str) -> str:
        for pattern, replacement in self.table:
            text = pattern.sub(replacement, text)
        if self.fold:
            text = fold_accents(text)
        return strip_non_printable(text)


def to_ascii(text: str, table: Any = None, fold: bool = True) -> str:
    """Convenience function to transliterate text in one call.

    Args:
        text: Text to convert.
        table: Optional transliteration table (see compile_table).
        fold: Strip diacritics the table did not handle.

    Returns:
        Printable ASCII text.
    """
    return Transliterator.from_config(table, fold=fold)(text)
